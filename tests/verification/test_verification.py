"""
Tests for the round-trip verification harness.
"""

import unittest
import numpy as np
import sys
import os

# Add the project root to the path so we can import modules
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from harness.verification import format_vector, check_round_trip, check_wire_format, run_verification
from harness.vectors import axis_vectors, single_zero_axis_vectors
from normals.packed_normal import NormalPacker, pack


class TestVerification(unittest.TestCase):
    """Test the verification harness."""

    def test_format_vector(self):
        """Test the bracketed vector format."""
        self.assertEqual(format_vector((1.0, -0.5, 0.0)), "[ 1 -0.5 0 ]")

    def test_check_round_trip_success(self):
        """Test a passing case and its SUCCESS log line."""
        with self.assertLogs("harness.verification", level="INFO") as logs:
            result = check_round_trip((1.0, 0.0, 0.0))

        self.assertTrue(result["passed"])
        self.assertEqual(result["packed"], 0xFFFF8000)
        self.assertEqual(len(result["output"]), 3)
        self.assertIn("SUCCESS: [ 1 0 0 ] --> 4294934528 -->", logs.output[0])

    def test_check_round_trip_failure(self):
        """Test a failing case and its FAIL log line."""
        # Not unit length: z is rebuilt as sqrt(0.5), not 0.5
        with self.assertLogs("harness.verification", level="WARNING") as logs:
            result = check_round_trip((0.5, 0.5, 0.5))

        self.assertFalse(result["passed"])
        self.assertIn(">>> FAIL", logs.output[0])

    def test_fixed_vectors_pass(self):
        """Test that every fixed vector passes the round trip."""
        for vector in np.concatenate([axis_vectors(), single_zero_axis_vectors()]):
            self.assertTrue(check_round_trip(vector)["passed"], msg=f"{vector} failed")

    def test_wire_format_check(self):
        """Test wire-format agreement in both byte orders and a mismatch."""
        vectors = single_zero_axis_vectors()
        words = [pack(v) for v in vectors]
        for byteorder in ("big", "little"):
            self.assertEqual(check_wire_format(vectors, words, NormalPacker(byteorder)), 0)

        wrong = list(words)
        wrong[0] ^= 1
        self.assertEqual(check_wire_format(vectors, wrong, NormalPacker()), 1)

    def test_run_verification_fixed_vectors(self):
        """Test a run over the fixed vectors only."""
        summary = run_verification({"verification": {"random_tests": 0}})

        self.assertEqual(summary["total"], 18)
        self.assertEqual(summary["errors"], 0)
        self.assertEqual(summary["epsilon"], 0.005)
        self.assertEqual(len(summary["results"]), 18)

    def test_run_verification_random_vectors(self):
        """Test that the error count matches the failing cases."""
        summary = run_verification({"verification": {"random_tests": 25, "seed": 123}})

        self.assertEqual(summary["total"], 43)
        failures = sum(1 for r in summary["results"] if not r["passed"])
        self.assertEqual(summary["errors"], failures)

    def test_run_verification_defaults(self):
        """Test a run with an empty configuration."""
        summary = run_verification({})
        self.assertEqual(summary["total"], 118)

    def test_run_verification_rejects_bad_config(self):
        """Test that invalid tolerance and counts are rejected."""
        with self.assertRaises(ValueError):
            run_verification({"verification": {"epsilon": 0}})
        with self.assertRaises(ValueError):
            run_verification({"verification": {"random_tests": -5}})


if __name__ == '__main__':
    unittest.main()
