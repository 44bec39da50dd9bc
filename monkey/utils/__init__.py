"""
Utility modules for Monkey.

This package contains configuration helpers used throughout the front end.
"""

from .settings import Settings, DEFAULT_SETTINGS, configure_logging

__all__ = [
    "Settings",
    "DEFAULT_SETTINGS",
    "configure_logging",
]
