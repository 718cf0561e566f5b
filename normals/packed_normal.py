"""
Packing of unit normals into 32-bit words.

This module provides the encoder and decoder for the packed normal format
(16 bits of x, 15 bits of y, 1 bit for the sign of z), batch versions that
work on numpy arrays, and helpers that move packed words to and from their
4-byte wire representation.
"""

import logging
import math
import operator
import numpy as np
from typing import Any, Dict, NamedTuple, Sequence, Union

from .constants import (
    BYTEORDERS,
    DEFAULT_BYTEORDER,
    LOW_HALF_MASK,
    SIGN_MASK,
    WORD_BYTES,
    WORD_MASK,
    X_SCALE,
    X_SHIFT,
    Y_SCALE,
    Y_SHIFT,
)
from .mapping import quantize_15, quantize_16, signed_normalize, unsigned_normalize

logger = logging.getLogger(__name__)


class Vector3(NamedTuple):
    """A 3D direction vector."""
    x: float
    y: float
    z: float


def _as_components(vector: Sequence[float]) -> Vector3:
    components = tuple(float(c) for c in vector)
    if len(components) != 3:
        raise ValueError(f"Expected a 3-component vector, got {len(components)} components")
    if not all(math.isfinite(c) for c in components):
        raise ValueError(f"Cannot pack non-finite vector {components}")
    return Vector3(*components)


def _check_word(word: Any) -> int:
    word = operator.index(word)
    if not 0 <= word <= WORD_MASK:
        raise ValueError(f"{word} is not a 32-bit unsigned word")
    return word


def _check_byteorder(byteorder: str) -> str:
    if byteorder not in BYTEORDERS:
        raise ValueError(f"byteorder must be one of {BYTEORDERS}, got {byteorder!r}")
    return byteorder


def _wire_dtype(byteorder: str) -> np.dtype:
    return np.dtype(">u4" if byteorder == "big" else "<u4")


def pack(vector: Sequence[float]) -> int:
    """
    Pack a unit vector into a 32-bit word.

    The vector is assumed to be unit length; this is not checked. Only the
    sign of z is stored, its magnitude is recovered from the other two
    components on unpack.

    Args:
        vector: Sequence of three floats (x, y, z)

    Returns:
        Packed word as an integer in [0, 2**32)

    Raises:
        ValueError: If the vector does not have three finite components
    """
    x, y, z = _as_components(vector)
    ux = quantize_16(unsigned_normalize(x))
    uy = quantize_15(unsigned_normalize(y))
    negative = 1 if z < 0.0 else 0
    return ((ux << X_SHIFT) | (uy << Y_SHIFT) | negative) & WORD_MASK


def unpack(word: int) -> Vector3:
    """
    Unpack a 32-bit word into an approximate unit vector.

    When quantization puts (x, y) outside the unit disk, the radicand used
    to rebuild z is clamped to zero and z comes back as (signed) zero.

    Args:
        word: Packed word produced by ``pack``

    Returns:
        Reconstructed vector
    """
    word = _check_word(word)
    x = word >> X_SHIFT
    y = (word & LOW_HALF_MASK) >> Y_SHIFT
    negative = word & SIGN_MASK

    fx = signed_normalize(x / float(X_SCALE))
    fy = signed_normalize(y / float(Y_SCALE))
    radicand = max(0.0, 1.0 - (fx * fx + fy * fy))
    fz = math.sqrt(radicand) * (-1.0 if negative else 1.0)
    return Vector3(fx, fy, fz)


def pack_array(normals: Union[np.ndarray, Sequence[Sequence[float]]]) -> np.ndarray:
    """
    Pack an array of unit vectors.

    Args:
        normals: Array-like of shape (..., 3)

    Returns:
        uint32 array of shape (...)
    """
    array = np.asarray(normals, dtype=np.float64)
    if array.ndim == 0 or array.shape[-1] != 3:
        raise ValueError(f"Expected an array of shape (..., 3), got {array.shape}")
    if not np.all(np.isfinite(array)):
        raise ValueError("Cannot pack non-finite vectors")

    flat = array.reshape(-1, 3)
    ux = quantize_16(unsigned_normalize(flat[:, 0]))
    uy = quantize_15(unsigned_normalize(flat[:, 1]))
    negative = (flat[:, 2] < 0.0).astype(np.uint32)
    words = (ux << np.uint32(X_SHIFT)) | (uy << np.uint32(Y_SHIFT)) | negative
    return words.astype(np.uint32).reshape(array.shape[:-1])


def unpack_array(words: Union[np.ndarray, Sequence[int]]) -> np.ndarray:
    """
    Unpack an array of packed words.

    Args:
        words: Integer array-like of packed words

    Returns:
        float32 array of shape words.shape + (3,)
    """
    array = np.asarray(words)
    if array.size and array.dtype.kind not in "ui":
        raise ValueError(f"Packed words must be integers, got dtype {array.dtype}")
    flat = array.astype(np.int64).reshape(-1)
    if np.any((flat < 0) | (flat > WORD_MASK)):
        raise ValueError("Packed words must fit in 32 unsigned bits")

    x = flat >> X_SHIFT
    y = (flat & LOW_HALF_MASK) >> Y_SHIFT
    negative = (flat & SIGN_MASK).astype(bool)

    fx = signed_normalize(x / float(X_SCALE))
    fy = signed_normalize(y / float(Y_SCALE))
    radicand = np.maximum(0.0, 1.0 - (fx * fx + fy * fy))
    fz = np.sqrt(radicand) * np.where(negative, -1.0, 1.0)

    vectors = np.stack([fx, fy, fz], axis=-1).astype(np.float32)
    return vectors.reshape(array.shape + (3,))


def to_bytes(words: Union[int, np.ndarray, Sequence[int]], byteorder: str = DEFAULT_BYTEORDER) -> bytes:
    """
    Serialize packed words to their wire form, 4 bytes per word.

    Args:
        words: A single packed word or an array-like of words
        byteorder: "big" (default) or "little"

    Returns:
        Serialized bytes
    """
    _check_byteorder(byteorder)
    if isinstance(words, (int, np.integer)):
        return _check_word(words).to_bytes(WORD_BYTES, byteorder)

    array = np.asarray(words)
    if array.size and array.dtype.kind not in "ui":
        raise ValueError(f"Packed words must be integers, got dtype {array.dtype}")
    flat = array.astype(np.int64).reshape(-1)
    if np.any((flat < 0) | (flat > WORD_MASK)):
        raise ValueError("Packed words must fit in 32 unsigned bits")
    return flat.astype(_wire_dtype(byteorder)).tobytes()


def from_bytes(data: bytes, byteorder: str = DEFAULT_BYTEORDER) -> np.ndarray:
    """
    Deserialize wire bytes into packed words.

    Args:
        data: Buffer whose length is a multiple of 4
        byteorder: "big" (default) or "little"

    Returns:
        uint32 array of packed words in native byte order
    """
    _check_byteorder(byteorder)
    if len(data) % WORD_BYTES:
        raise ValueError(f"Buffer length {len(data)} is not a multiple of {WORD_BYTES}")
    return np.frombuffer(data, dtype=_wire_dtype(byteorder)).astype(np.uint32)


class NormalPacker:
    """Pack and unpack normals with a fixed wire byte order."""

    def __init__(self, byteorder: str = DEFAULT_BYTEORDER):
        """
        Initialize the packer.

        Args:
            byteorder: Byte order of the wire format, "big" or "little"
        """
        self.byteorder = _check_byteorder(byteorder)
        logger.info(f"Initialized NormalPacker with byteorder={self.byteorder}")

    @classmethod
    def from_config(cls, config: Dict) -> "NormalPacker":
        """Create a packer from the ``codec`` section of a configuration."""
        codec_config = config.get("codec", {}) or {}
        return cls(byteorder=codec_config.get("byteorder", DEFAULT_BYTEORDER))

    def encode(self, value: Union[Sequence[float], np.ndarray]) -> Union[int, np.ndarray]:
        """
        Pack a single vector or an array of vectors.

        Args:
            value: Sequence of three floats, or numpy array of shape (..., 3)

        Returns:
            Packed word, or uint32 array of packed words
        """
        if isinstance(value, np.ndarray):
            return pack_array(value)
        return pack(value)

    def decode(self, encoded_value: Union[int, np.ndarray]) -> Union[Vector3, np.ndarray]:
        """
        Unpack a single word or an array of words.

        Args:
            encoded_value: Packed word, or integer numpy array of packed words

        Returns:
            Vector3, or float32 array of shape (..., 3)
        """
        if isinstance(encoded_value, np.ndarray):
            return unpack_array(encoded_value)
        return unpack(encoded_value)

    def encode_bytes(self, normals: Union[np.ndarray, Sequence[Sequence[float]]]) -> bytes:
        """Pack vectors straight to wire bytes."""
        return to_bytes(pack_array(normals), self.byteorder)

    def decode_bytes(self, data: bytes) -> np.ndarray:
        """Unpack wire bytes to an (N, 3) float32 array."""
        return unpack_array(from_bytes(data, self.byteorder))
