"""
AST node definitions for Monkey.

This module contains the data classes produced by the parser. Statement and
expression variants are each gathered into a closed Union; new variants are
added to the matching Union when the grammar grows.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from ..frontend.tokens import Token


# ==================== Expressions ====================

@dataclass(frozen=True)
class Identifier:
    """Identifier expression.

    Also used as the binding target of a let statement, where it does not
    produce a value.

    Attributes:
        token: The IDENT token
        value: The identifier name
    """
    token: Token
    value: str

    def token_literal(self) -> str:
        return self.token.literal


# Union type for all expressions
Expression = Union[
    Identifier,
]


# ==================== Statements ====================

@dataclass(frozen=True)
class LetStatement:
    """Let binding statement (let <name> = <value>;).

    Attributes:
        token: The LET token
        name: The bound identifier
        value: The bound expression; None until value expressions are parsed
    """
    token: Token
    name: Identifier
    value: Optional[Expression] = None

    def token_literal(self) -> str:
        return self.token.literal


# Union type for all statements
Statement = Union[
    LetStatement,
]


# ==================== Program ====================

@dataclass(frozen=True)
class Program:
    """Root node of every parse.

    Attributes:
        statements: Successfully parsed statements in source order
    """
    statements: List[Statement] = field(default_factory=list)

    def token_literal(self) -> str:
        """Return the literal of the first statement's token, or ''."""
        if self.statements:
            return self.statements[0].token_literal()
        return ""


Node = Union[Program, Statement, Expression]
