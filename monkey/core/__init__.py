"""
Core module for Monkey.

This module contains the orchestration layer that runs the front end.
"""

from .driver import Driver, ParseResult, parse

__all__ = [
    "Driver",
    "ParseResult",
    "parse",
]
