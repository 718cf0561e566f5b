"""
Tests for test-vector generation.
"""

import unittest
import numpy as np
import sys
import os

# Add the project root to the path so we can import modules
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from harness.vectors import (
    normalize,
    axis_vectors,
    single_zero_axis_vectors,
    random_normals,
    default_test_vectors,
)


class TestVectors(unittest.TestCase):
    """Test generation of the verification vectors."""

    def test_axis_vectors(self):
        """Test the six signed unit axes."""
        axes = axis_vectors()
        self.assertEqual(axes.shape, (6, 3))
        self.assertEqual(axes.dtype, np.float32)
        np.testing.assert_array_equal(np.abs(axes).sum(axis=1), np.ones(6))

    def test_single_zero_axis_vectors(self):
        """Test the twelve unit vectors with one zero component."""
        vectors = single_zero_axis_vectors()
        self.assertEqual(vectors.shape, (12, 3))
        np.testing.assert_allclose(np.linalg.norm(vectors, axis=1), np.ones(12), atol=1e-6)
        np.testing.assert_array_equal((vectors == 0.0).sum(axis=1), np.ones(12))

    def test_normalize(self):
        """Test normalization and rejection of zero-length vectors."""
        np.testing.assert_allclose(normalize([3.0, 0.0, 4.0]), [0.6, 0.0, 0.8], atol=1e-7)
        with self.assertRaises(ValueError):
            normalize([0.0, 0.0, 0.0])

    def test_random_normals_are_unit_length(self):
        """Test that random normals have unit length."""
        normals = random_normals(100, seed=1)
        self.assertEqual(normals.shape, (100, 3))
        self.assertEqual(normals.dtype, np.float32)
        np.testing.assert_allclose(np.linalg.norm(normals, axis=1), np.ones(100), atol=1e-6)

    def test_random_normals_are_reproducible(self):
        """Test that a seed reproduces the same normals."""
        np.testing.assert_array_equal(random_normals(20, seed=8), random_normals(20, seed=8))
        self.assertFalse(np.array_equal(random_normals(20, seed=8), random_normals(20, seed=9)))

    def test_random_normals_count(self):
        """Test empty and negative counts."""
        self.assertEqual(random_normals(0).shape, (0, 3))
        with self.assertRaises(ValueError):
            random_normals(-1)

    def test_default_test_vectors(self):
        """Test the order and size of the default vector set."""
        vectors = default_test_vectors(random_tests=10, seed=4)
        self.assertEqual(vectors.shape, (28, 3))
        np.testing.assert_array_equal(vectors[:6], axis_vectors())
        np.testing.assert_array_equal(vectors[6:18], single_zero_axis_vectors())


if __name__ == '__main__':
    unittest.main()
