"""
Token definitions for the Monkey lexer.

This module defines the closed set of token types, the Token value type
and the keyword table consulted after an identifier has been scanned.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class TokenType(Enum):
    """Token types for the Monkey language.

    Member values are the display strings used in parser diagnostics.
    """
    # Special
    ILLEGAL = "ILLEGAL"  # Unknown character
    EOF = "EOF"          # End of input

    # Identifiers and literals
    IDENT = "IDENT"      # add, foobar, x, y
    INT = "INT"          # 1343456

    # Operators
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"

    LT = "<"
    GT = ">"

    EQ = "=="
    NOT_EQ = "!="

    # Delimiters
    COMMA = ","
    SEMICOLON = ";"

    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    FUNCTION = "FUNCTION"
    LET = "LET"
    TRUE = "TRUE"
    FALSE = "FALSE"
    IF = "IF"
    ELSE = "ELSE"
    RETURN = "RETURN"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """Represents a token in the source code.

    Attributes:
        type: The token type
        literal: The exact source text the token was scanned from
    """
    type: TokenType
    literal: str

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.literal!r})"


KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
})


def lookup_ident(ident: str) -> TokenType:
    """Resolve a scanned identifier to its keyword type, or IDENT.

    Args:
        ident: Identifier text

    Returns:
        The keyword's TokenType if ident is reserved, else TokenType.IDENT
    """
    return KEYWORDS.get(ident, TokenType.IDENT)


def is_keyword(ident: str) -> bool:
    """Check if a name is a reserved keyword."""
    return ident in KEYWORDS
