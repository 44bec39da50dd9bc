"""
Front-end orchestration module for Monkey.

This module provides the high-level Driver class that wires the lexer and
parser together and hands back the AST along with its diagnostics.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..ast import Program
from ..frontend.lexer import Lexer, tokenize
from ..frontend.parser import Parser, ParseError
from ..frontend.tokens import Token
from ..utils.settings import DEFAULT_SETTINGS, Settings

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Result of a parse operation.

    Attributes:
        program: The AST root (always present, possibly partial)
        errors: Diagnostics recorded while parsing
    """
    program: Program
    errors: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Whether the parse produced no diagnostics."""
        return not self.errors

    def raise_for_errors(self) -> Program:
        """Return the program, or raise if any diagnostic was recorded.

        Raises:
            ParseError: If errors is non-empty
        """
        if self.errors:
            raise ParseError(self.errors)
        return self.program


class Driver:
    """Front-end driver for Monkey.

    Example:
        >>> driver = Driver()
        >>> result = driver.parse("let x = 5;")
        >>> result.success
        True
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the driver.

        Args:
            settings: Settings passed on to the parser (defaults to DEFAULT_SETTINGS)
        """
        self._settings = settings or DEFAULT_SETTINGS

    @property
    def settings(self) -> Settings:
        return self._settings

    def tokenize(self, source: str) -> List[Token]:
        """Tokenize source code.

        Args:
            source: Monkey source code string

        Returns:
            List of Token objects, ending with EOF
        """
        self._check_source(source)
        return tokenize(source)

    def parse(self, source: str) -> ParseResult:
        """Parse source code into an AST.

        Args:
            source: Monkey source code string

        Returns:
            ParseResult: The program and any diagnostics
        """
        self._check_source(source)
        parser = Parser(Lexer(source), settings=self._settings)
        program = parser.parse_program()

        if parser.errors:
            logger.info("parse finished with %d error(s)", len(parser.errors))
        else:
            logger.debug("parsed %d statement(s)", len(program.statements))

        return ParseResult(program=program, errors=list(parser.errors))

    @staticmethod
    def _check_source(source) -> None:
        if not isinstance(source, str):
            raise TypeError(f"source must be str, not {type(source).__name__}")


def parse(source: str, settings: Optional[Settings] = None) -> ParseResult:
    """Convenience function to parse source code.

    Args:
        source: Monkey source code string
        settings: Optional settings

    Returns:
        ParseResult: The program and any diagnostics
    """
    return Driver(settings).parse(source)
