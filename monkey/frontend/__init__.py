"""
Frontend module for Monkey.

This module provides the lexer and parser components of the front end.
"""

from .tokens import Token, TokenType, KEYWORDS, lookup_ident, is_keyword
from .lexer import Lexer, tokenize
from .parser import Parser, ParseError

__all__ = [
    # Token components
    "Token",
    "TokenType",
    "KEYWORDS",
    "lookup_ident",
    "is_keyword",
    # Lexer components
    "Lexer",
    "tokenize",
    # Parser components
    "Parser",
    "ParseError",
]
