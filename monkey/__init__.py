"""
monkey - front end for the Monkey scripting language

A lexer and parser that turn Monkey source text into an abstract syntax
tree, collecting syntax diagnostics instead of stopping at the first one.

Example:
    >>> from monkey import Driver
    >>> result = Driver().parse("let x = 5;")
    >>> if result.success:
    ...     print(result.program.statements[0].name.value)
    x

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "monkey Team"

from .frontend import Lexer, Parser, ParseError, Token, TokenType
from .core import Driver, ParseResult, parse

__all__ = [
    "__version__",
    "__author__",
    "Lexer",
    "Parser",
    "ParseError",
    "Token",
    "TokenType",
    "Driver",
    "ParseResult",
    "parse",
]
