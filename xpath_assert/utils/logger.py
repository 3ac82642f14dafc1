"""Logging utilities for xpath_assert."""

import logging
import sys

from xpath_assert.config import get_config


def setup_logger(name: str = "xpath_assert") -> logging.Logger:
    """
    Set up and return a logger instance.

    Args:
        name: Logger name

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    config = get_config()
    logger.setLevel(config.logging_level)

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(config.logging_level)
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    # File handler
    if config.log_file is not None:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_format = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "xpath_assert") -> logging.Logger:
    """
    Return the configured logger, following the current config level.

    Handlers are attached on first use. The level is re-read on every
    call so reset_config() takes effect without re-importing.
    """
    logger = setup_logger(name)
    level = get_config().logging_level

    if logger.level != level:
        logger.setLevel(level)
        for handler in logger.handlers:
            # File handler keeps logging everything
            if not isinstance(handler, logging.FileHandler):
                handler.setLevel(level)

    return logger


def log_evaluation(expression: str, result_size: int):
    """Log an XPath evaluation."""
    get_logger().debug(f"xpath {expression!r} -> {result_size} result(s)")


def log_check_failure(kind: str, expression: str, message: str):
    """Log a failed check."""
    get_logger().info(f"✗ [{kind}] {expression} - {message}")
