"""Structured configuration for the XPath assertion helpers.

Values come from environment variables (a ``.env`` file is loaded if
present) and are validated once when the configuration is created.

Usage:
    from xpath_assert.config import get_config

    config = get_config()
    if config.normalize_whitespace:
        print("Whitespace is collapsed before comparing text")
"""

import logging
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AssertionConfig:
    """Assertion behaviour configuration (immutable)."""

    repr_max_length: int = 200
    normalize_whitespace: bool = False
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    def __post_init__(self):
        """Validate configuration values."""
        if self.repr_max_length <= 0:
            raise ValueError(
                f"repr_max_length must be positive, got {self.repr_max_length}"
            )
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")

    @property
    def logging_level(self) -> int:
        """Numeric level for the stdlib logging module."""
        return getattr(logging, self.log_level.upper())

    @classmethod
    def from_environment(cls) -> "AssertionConfig":
        """
        Create configuration from environment variables and defaults.

        Raises:
            ValueError: If a variable holds an invalid value
        """
        log_file = os.getenv("XPATH_ASSERT_LOG_FILE")
        return cls(
            repr_max_length=int(os.getenv("XPATH_ASSERT_REPR_LENGTH", "200")),
            normalize_whitespace=os.getenv(
                "XPATH_ASSERT_NORMALIZE_WHITESPACE", "false"
            ).lower() == "true",
            log_level=os.getenv("XPATH_ASSERT_LOG_LEVEL", "WARNING"),
            log_file=Path(log_file) if log_file else None,
        )


# Thread-safe singleton
_config: Optional[AssertionConfig] = None
_config_lock = threading.Lock()


def get_config() -> AssertionConfig:
    """
    Get the singleton configuration instance.

    Created on first access with double-checked locking.

    Returns:
        The assertion configuration
    """
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:
                _config = AssertionConfig.from_environment()
    return _config


def reset_config() -> None:
    """
    Reset the configuration singleton.

    Useful for testing with different configurations.
    """
    global _config
    with _config_lock:
        _config = None
