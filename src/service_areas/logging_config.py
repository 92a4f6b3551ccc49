"""
Structured logging configuration.

Console output for build runs, a detailed log file for debugging
suburb selection decisions.
"""

import logging
import sys
from pathlib import Path


def setup_logging(level: str = "INFO", log_file: str = "logs/service_areas.log") -> None:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to the log file
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    detailed_formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S",
    )

    # File handler gets every selection decision, DEBUG scoring included
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(detailed_formatter)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, level.upper(), logging.INFO))
    console_handler.setFormatter(console_formatter)

    root_logger = logging.getLogger("service_areas")
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    for noisy_logger in ["filelock", "numexpr"]:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)

    root_logger.info("Logging configured: level=%s, file=%s", level, log_file)


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger under the service_areas namespace.

    Usage:
        from service_areas.logging_config import get_logger
        logger = get_logger(__name__)
        logger.info("Loaded %d suburbs", count)

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    if name.startswith("service_areas."):
        return logging.getLogger(name)
    return logging.getLogger(f"service_areas.{name}")
