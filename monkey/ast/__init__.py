"""
Abstract syntax tree (AST) module for Monkey.

This module defines the node types built by the parser and handed to
later stages such as an evaluator.
"""

from .nodes import (
    # Expressions
    Identifier,
    Expression,
    # Statements
    LetStatement,
    Statement,
    # Root
    Program,
    Node,
)

__all__ = [
    # Expressions
    "Identifier",
    "Expression",
    # Statements
    "LetStatement",
    "Statement",
    # Root
    "Program",
    "Node",
]
