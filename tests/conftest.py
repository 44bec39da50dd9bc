"""
Pytest configuration and fixtures for monkey tests.
"""

import pytest


@pytest.fixture
def driver():
    """Provide a Driver instance."""
    from monkey import Driver
    return Driver()


@pytest.fixture
def make_parser():
    """Provide a factory building a Parser over a source string."""
    from monkey.frontend import Lexer, Parser

    def _make(source, settings=None):
        return Parser(Lexer(source), settings=settings)

    return _make


@pytest.fixture
def let_program_source():
    """Three well-formed let statements."""
    return "let x = 5;\nlet y = 10;\nlet foobar = x + y;"


@pytest.fixture
def malformed_let_source():
    """Three let statements, each missing an expected token."""
    return "let x 5;\nlet = 10;\nlet 838383;"
