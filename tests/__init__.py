"""
Test suite for monkey.

This package contains tests for the Monkey front end including:
- Unit tests for the token model, lexer and parser
- Unit tests for AST nodes
- Driver and settings tests
- Performance checks on large generated inputs
"""

__version__ = "0.1.0"
