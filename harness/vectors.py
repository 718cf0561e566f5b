"""
Test vectors for the round-trip verification.

Vectors are float32 numpy arrays of shape (N, 3), matching the precision of
the components the packed format was designed for.
"""

import logging
import numpy as np
from typing import Optional, Sequence, Union

logger = logging.getLogger(__name__)

# Smallest length accepted before a vector is considered degenerate
MIN_LENGTH = 1e-12


def normalize(vectors: Union[np.ndarray, Sequence]) -> np.ndarray:
    """
    Rescale vectors to unit length.

    Args:
        vectors: Array-like of shape (3,) or (N, 3)

    Returns:
        float32 array of the same shape
    """
    array = np.asarray(vectors, dtype=np.float64)
    lengths = np.linalg.norm(array, axis=-1, keepdims=True)
    if np.any(lengths < MIN_LENGTH):
        raise ValueError("Cannot normalize a zero-length vector")
    return (array / lengths).astype(np.float32)


def axis_vectors() -> np.ndarray:
    """The six signed unit axes: +x, +y, +z, -x, -y, -z."""
    return np.array([
        [1.0, 0.0, 0.0],
        [0.0, 1.0, 0.0],
        [0.0, 0.0, 1.0],
        [-1.0, 0.0, 0.0],
        [0.0, -1.0, 0.0],
        [0.0, 0.0, -1.0],
    ], dtype=np.float32)


def single_zero_axis_vectors() -> np.ndarray:
    """Normalized vectors with exactly one zero component."""
    return normalize([
        [1.0, 1.0, 0.0],
        [1.0, 0.0, 1.0],
        [0.0, 1.0, 1.0],

        [-1.0, -1.0, 0.0],
        [-1.0, 0.0, -1.0],
        [0.0, -1.0, -1.0],

        [1.0, -1.0, 0.0],
        [-1.0, 1.0, 0.0],
        [1.0, 0.0, -1.0],
        [-1.0, 0.0, 1.0],
        [0.0, 1.0, -1.0],
        [0.0, -1.0, 1.0],
    ])


def random_normals(count: int, seed: Optional[int] = None) -> np.ndarray:
    """
    Generate random unit normals.

    Components are drawn uniformly from [-1, 1] and the result is
    normalized. Draws that are too short to normalize are drawn again.

    Args:
        count: Number of normals
        seed: Seed for the random state, None for a fresh one

    Returns:
        float32 array of shape (count, 3)
    """
    if count < 0:
        raise ValueError("count must be non-negative")

    rs = np.random.RandomState(seed)
    draws = rs.uniform(-1.0, 1.0, size=(count, 3))
    degenerate = np.linalg.norm(draws, axis=1) < MIN_LENGTH
    while np.any(degenerate):
        logger.debug(f"Redrawing {int(degenerate.sum())} degenerate vectors")
        draws[degenerate] = rs.uniform(-1.0, 1.0, size=(int(degenerate.sum()), 3))
        degenerate = np.linalg.norm(draws, axis=1) < MIN_LENGTH
    return normalize(draws)


def default_test_vectors(random_tests: int = 100, seed: Optional[int] = None) -> np.ndarray:
    """Axis vectors, then single-zero-axis vectors, then random normals."""
    return np.concatenate([
        axis_vectors(),
        single_zero_axis_vectors(),
        random_normals(random_tests, seed),
    ])
