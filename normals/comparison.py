"""Tolerance-based comparison of floats and vectors."""

import numpy as np
from typing import Sequence, Union

from .constants import DEFAULT_EPSILON


def float_eq(a: float, b: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """True when ``a`` and ``b`` differ by less than ``epsilon``."""
    return abs(a - b) < epsilon


def vector_equals(v1: Sequence[float], v2: Sequence[float], epsilon: float = DEFAULT_EPSILON) -> bool:
    """True when all three components are within ``epsilon`` of each other."""
    return (float_eq(v1[0], v2[0], epsilon)
            and float_eq(v1[1], v2[1], epsilon)
            and float_eq(v1[2], v2[2], epsilon))


def round_trip_error(original: Union[np.ndarray, Sequence], decoded: Union[np.ndarray, Sequence]) -> np.ndarray:
    """
    Absolute per-component error between two arrays of vectors.

    Args:
        original: Array-like of shape (..., 3)
        decoded: Array-like of the same shape

    Returns:
        float64 array of absolute differences
    """
    original = np.asarray(original, dtype=np.float64)
    decoded = np.asarray(decoded, dtype=np.float64)
    if original.shape != decoded.shape:
        raise ValueError(f"Shape mismatch: {original.shape} vs {decoded.shape}")
    return np.abs(original - decoded)


def vectors_close(original: Union[np.ndarray, Sequence], decoded: Union[np.ndarray, Sequence],
                  epsilon: float = DEFAULT_EPSILON) -> np.ndarray:
    """Row-wise ``vector_equals`` for arrays of shape (..., 3)."""
    return np.all(round_trip_error(original, decoded) < epsilon, axis=-1)
