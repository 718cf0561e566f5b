"""
Round-trip error statistics for the packed normal codec.

This module collects the per-case results of the verification harness,
summarizes the error on each axis, and writes the summary and the failing
cases to a JSON report.
"""

import json
import os
from datetime import datetime
import numpy as np
from typing import Any, Dict, List

from normals.comparison import round_trip_error

AXES = ("x", "y", "z")


class RoundTripReport:
    """Accumulate round-trip results and report their error."""

    def __init__(self, save_dir: str = "reports"):
        """
        Initialize an empty report.

        Args:
            save_dir: Directory the JSON report is written to
        """
        self.save_dir = save_dir
        self.results: List[Dict[str, Any]] = []

    def add_results(self, results: List[Dict[str, Any]]) -> None:
        """Add per-case results produced by the verification harness."""
        self.results.extend(results)

    def summarize(self) -> Dict[str, Any]:
        """
        Compute error statistics over all recorded cases.

        Returns:
            Dictionary with the case and failure counts and, when there are
            cases, the max and mean absolute error per axis
        """
        failures = sum(1 for result in self.results if not result["passed"])
        summary = {
            "timestamp": datetime.now().isoformat(),
            "total": len(self.results),
            "failures": failures,
        }
        if not self.results:
            return summary

        errors = round_trip_error([r["input"] for r in self.results],
                                  [r["output"] for r in self.results])
        for i, axis in enumerate(AXES):
            summary[f"max_error_{axis}"] = float(np.max(errors[:, i]))
            summary[f"mean_error_{axis}"] = float(np.mean(errors[:, i]))
        summary["max_error"] = float(np.max(errors))
        return summary

    def save(self, filename: str = "round_trip_report.json") -> str:
        """
        Write the summary and the failing cases to a JSON file.

        Args:
            filename: Name of the report file inside ``save_dir``

        Returns:
            Path of the written file
        """
        os.makedirs(self.save_dir, exist_ok=True)
        report = {
            "summary": self.summarize(),
            "failures": [
                {"input": list(r["input"]), "packed": int(r["packed"]), "output": list(r["output"])}
                for r in self.results if not r["passed"]
            ],
        }
        filepath = os.path.join(self.save_dir, filename)
        with open(filepath, 'w') as f:
            json.dump(report, f, indent=4)
        return filepath

    def print_summary(self) -> None:
        """Print summary of round-trip errors."""
        if not self.results:
            print("No round-trip results available")
            return

        summary = self.summarize()
        print("\nRound-Trip Summary:")
        print(f"  Cases: {summary['total']}")
        print(f"  Failures: {summary['failures']}")
        for axis in AXES:
            print(f"  {axis}: max {summary[f'max_error_{axis}']:.6f}, mean {summary[f'mean_error_{axis}']:.6f}")
