"""
Mapping primitives shared by the packed normal encoder and decoder.

Every function accepts either a single float or a numpy array and works
element-wise on arrays, the same way the fixed-point helpers treat scalars
and arrays.
"""

import math
import numpy as np
from typing import Union

from .constants import X_SCALE, Y_SCALE, LOW_HALF_MASK, WORD_MASK

# Modulus of the unsigned 32-bit cast
WORD_RANGE = float(WORD_MASK + 1)

Number = Union[float, np.ndarray]


def unsigned_normalize(value: Number) -> Number:
    """Map [-1, 1] to [0, 1]. Values outside the domain are extrapolated."""
    return (value + 1.0) * 0.5


def signed_normalize(value: Number) -> Number:
    """Map [0, 1] to [-1, 1]. Inverse of ``unsigned_normalize``."""
    return value * 2.0 - 1.0


def _round_half_away(value: Number) -> Number:
    """Round to nearest, ties away from zero (Python's ``round`` ties to even)."""
    if isinstance(value, np.ndarray):
        return np.sign(value) * np.floor(np.abs(value) + 0.5)
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _scale(value: Number, scale: int) -> Number:
    if isinstance(value, np.ndarray):
        with np.errstate(over="ignore"):
            return value * scale
    return value * scale


def _to_unsigned(scaled: Number) -> Union[int, np.ndarray]:
    """
    Round and wrap scaled values into [0, 2**32), like a cast to uint32.

    Magnitudes that overflowed to infinity while scaling have no integer
    value and map to code 0.
    """
    if isinstance(scaled, np.ndarray):
        finite = np.isfinite(scaled)
        wrapped = np.fmod(_round_half_away(np.where(finite, scaled, 0.0)), WORD_RANGE)
        wrapped = np.where(wrapped < 0.0, wrapped + WORD_RANGE, wrapped)
        return wrapped.astype(np.int64)
    if not math.isfinite(scaled):
        return 0
    return int(math.fmod(_round_half_away(scaled), WORD_RANGE)) & WORD_MASK


def quantize_15(value: Number) -> Union[int, np.ndarray]:
    """
    Quantize a [0, 1] float to a 15-bit unsigned code.

    The result is masked to 16 bits, so inputs outside [0, 1] wrap instead
    of spilling into neighbouring fields. They are not rejected.

    Args:
        value: Float or numpy array of floats in [0, 1]

    Returns:
        Integer code in [0, 32767] for in-range input, or a uint32 array
    """
    code = _to_unsigned(_scale(value, Y_SCALE))
    if isinstance(code, np.ndarray):
        return (code & LOW_HALF_MASK).astype(np.uint32)
    return code & LOW_HALF_MASK


def quantize_16(value: Number) -> Union[int, np.ndarray]:
    """
    Quantize a [0, 1] float to a 16-bit unsigned code.

    Unlike ``quantize_15`` there is no 16-bit mask: the code is only cast to
    an unsigned 32-bit integer.

    Args:
        value: Float or numpy array of floats in [0, 1]

    Returns:
        Integer code in [0, 65535] for in-range input, or a uint32 array
    """
    code = _to_unsigned(_scale(value, X_SCALE))
    if isinstance(code, np.ndarray):
        return code.astype(np.uint32)
    return code

