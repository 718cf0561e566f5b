# Root logger setup for the verification program: console and file handlers
# driven by the "logging" section of config.yaml.
import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(config):
    """Set up logging based on the provided configuration."""
    level = (config.get("level") or "INFO").upper()
    logfile = config.get("file", None)
    handlers = []

    # Console handler if requested
    if config.get("console", True):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(console_handler)

    # File handler if logfile is provided
    if logfile:
        file_handler = logging.FileHandler(logfile)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)

    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(level=getattr(logging, level), handlers=handlers, force=True)
    logging.info("Logging is set up with level {}".format(level))
