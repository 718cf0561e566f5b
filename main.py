#!/usr/bin/env python3
"""
Packed normal round-trip verification.
Main entry point for the application.
"""

import logging
import os
import sys
import yaml
from utils.logging_utils import setup_logging
from utils.cli_utils import parse_arguments, apply_overrides
from harness.verification import run_verification
from metrics.error_metrics import RoundTripReport

logger = logging.getLogger(__name__)

# Largest value a process exit status can carry
MAX_EXIT_STATUS = 255


def load_config(config_path="config.yaml"):
    """Load configuration from YAML file."""
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
    with open(config_path, "r") as f:
        config = yaml.safe_load(f) or {}
    if not isinstance(config, dict):
        raise ValueError(f"Configuration in {config_path} must be a mapping")
    return config


def main(argv=None):
    """Main entry point for the application."""
    # Parse command line arguments
    args = parse_arguments(argv)

    # Load configuration and apply command line overrides
    config = apply_overrides(load_config(args.config), args)

    # Setup logging
    setup_logging(config.get("logging", {}) or {})

    summary = run_verification(config)

    report_config = config.get("report", {}) or {}
    report = RoundTripReport(save_dir=report_config.get("save_dir", "reports"))
    report.add_results(summary["results"])
    report.print_summary()
    if report_config.get("enabled", False):
        path = report.save()
        logger.info(f"Report written to {path}")

    print(f"\nErrors: {summary['errors']}")
    return min(summary["errors"], MAX_EXIT_STATUS)


if __name__ == "__main__":
    sys.exit(main())
