import argparse


def _positive_float(value):
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


def _non_negative_int(value):
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return number


def parse_arguments(argv=None):
    """Parse command line arguments for the packed normal verification."""
    parser = argparse.ArgumentParser(description="Packed normal round-trip verification")
    parser.add_argument("--config", type=str, default="config.yaml",
                        help="Path to configuration file")
    parser.add_argument("--random-tests", type=_non_negative_int, dest="random_tests",
                        help="Number of random normals to check")
    parser.add_argument("--seed", type=int, help="Seed for random normals")
    parser.add_argument("--epsilon", type=_positive_float,
                        help="Per-component round-trip tolerance")
    parser.add_argument("--report-dir", type=str, dest="report_dir",
                        help="Write a JSON error report to this directory")
    parser.add_argument("--log-level", type=str, dest="log_level",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level")

    return parser.parse_args(argv)


def _section(config, name):
    section = config.get(name) or {}
    config[name] = section
    return section


def apply_overrides(config, args):
    """Merge command line values into the configuration, in place."""
    verification = _section(config, "verification")
    if args.random_tests is not None:
        verification["random_tests"] = args.random_tests
    if args.seed is not None:
        verification["seed"] = args.seed
    if args.epsilon is not None:
        verification["epsilon"] = args.epsilon

    if args.report_dir is not None:
        report = _section(config, "report")
        report["enabled"] = True
        report["save_dir"] = args.report_dir

    if args.log_level is not None:
        _section(config, "logging")["level"] = args.log_level
    return config
