"""
Metrics module for the packed normal codec.

This module collects round-trip error statistics from the verification
harness and writes them as JSON reports.
"""

from .error_metrics import RoundTripReport

__all__ = [
    'RoundTripReport'
]
