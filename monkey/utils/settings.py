"""
Configuration settings for Monkey.

This module contains default configuration values and the logging setup
used by the front end.
"""

import logging
from dataclasses import dataclass
from typing import List


@dataclass
class Settings:
    """Front-end settings and configuration.

    Attributes:
        log_level: Name of the logging level ("DEBUG", "INFO", ...)
        log_format: Format string passed to logging.basicConfig
        log_datefmt: Date format passed to logging.basicConfig
        trace_tokens: Log every token the parser pulls at DEBUG level
        valid_log_levels: List of accepted log level names
    """
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_datefmt: str = "%H:%M:%S"
    trace_tokens: bool = False
    valid_log_levels: List[str] = None

    def __post_init__(self):
        if self.valid_log_levels is None:
            self.valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    @property
    def level(self) -> int:
        """Get the numeric logging level.

        Raises:
            ValueError: If log_level is not one of valid_log_levels
        """
        name = self.log_level.upper()
        if name not in self.valid_log_levels:
            raise ValueError(
                f"Invalid log level: {self.log_level}. "
                f"Use one of {', '.join(self.valid_log_levels)}."
            )
        return getattr(logging, name)


def configure_logging(settings: Settings = None) -> None:
    """Configure root logging from settings.

    Args:
        settings: Settings to apply (defaults to DEFAULT_SETTINGS)
    """
    settings = settings or DEFAULT_SETTINGS
    logging.basicConfig(
        level=settings.level,
        format=settings.log_format,
        datefmt=settings.log_datefmt,
    )
    logging.getLogger("monkey").setLevel(settings.level)


# Global default settings instance
DEFAULT_SETTINGS = Settings()
