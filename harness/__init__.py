"""
Verification harness for the packed normal codec.

This module generates test vectors and checks that they survive a
pack/unpack round trip within tolerance.
"""

from .vectors import (
    normalize,
    axis_vectors,
    single_zero_axis_vectors,
    random_normals,
    default_test_vectors,
)
from .verification import format_vector, check_round_trip, check_wire_format, run_verification

__all__ = [
    'normalize',
    'axis_vectors',
    'single_zero_axis_vectors',
    'random_normals',
    'default_test_vectors',
    'format_vector',
    'check_round_trip',
    'check_wire_format',
    'run_verification',
]
