"""
Parser module for Monkey.

This module provides a recursive descent parser driven by a two-token
lookahead window over the lexer. Syntax problems are recorded as
diagnostic strings and parsing continues; nothing is raised.
"""

import logging
from typing import List, Optional

from ..ast import Identifier, LetStatement, Program, Statement
from ..utils.settings import DEFAULT_SETTINGS, Settings
from .lexer import Lexer
from .tokens import Token, TokenType

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Exception carrying the diagnostics of a failed parse.

    The parser itself never raises this; it is raised by callers that
    choose to treat a non-empty diagnostic list as fatal.
    """

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.errors:
            return "parse failed"
        lines = [f"parser has {len(self.errors)} error(s)"]
        lines.extend(f"  {msg}" for msg in self.errors)
        return "\n".join(lines)


class Parser:
    """Parser for Monkey programs.

    Example:
        >>> parser = Parser(Lexer("let x = 5;"))
        >>> program = parser.parse_program()
        >>> program.statements[0].name.value
        'x'
        >>> parser.errors
        []
    """

    def __init__(self, lexer: Lexer, settings: Optional[Settings] = None):
        """Initialize the parser.

        Reads two tokens so that cur_token and peek_token are both set
        before parsing begins.

        Args:
            lexer: Lexer to pull tokens from; owned by this parser
            settings: Optional settings (defaults to DEFAULT_SETTINGS)
        """
        self._lexer = lexer
        self._settings = settings or DEFAULT_SETTINGS
        self._errors: List[str] = []
        self.cur_token: Optional[Token] = None
        self.peek_token: Optional[Token] = None

        self._next_token()
        self._next_token()

    @property
    def errors(self) -> List[str]:
        """Diagnostics recorded so far, in order."""
        return self._errors

    def parse_program(self) -> Program:
        """Parse the whole input.

        Returns:
            Program: The AST root. Statements that failed to parse are left
            out; check `errors` before using the result.
        """
        statements: List[Statement] = []

        while not self.cur_token_is(TokenType.EOF):
            stmt = self._parse_statement()
            if stmt is not None:
                statements.append(stmt)
            self._next_token()

        return Program(statements=statements)

    def _next_token(self) -> None:
        """Shift peek_token into cur_token and pull a new peek_token."""
        self.cur_token = self.peek_token
        self.peek_token = self._lexer.next_token()
        if self._settings.trace_tokens:
            logger.debug("token: %r", self.peek_token)

    def _parse_statement(self) -> Optional[Statement]:
        if self.cur_token.type is TokenType.LET:
            return self._parse_let_statement()
        return None

    def _parse_let_statement(self) -> Optional[LetStatement]:
        """Parse `let <IDENT> = <tokens...> ;`."""
        let_token = self.cur_token

        if not self.expect_peek(TokenType.IDENT):
            return None

        name = Identifier(token=self.cur_token, value=self.cur_token.literal)

        if not self.expect_peek(TokenType.ASSIGN):
            return None

        # TODO: parse the value expression once prefix/infix parsing lands;
        # until then the right-hand side is skipped.
        while not self.cur_token_is(TokenType.SEMICOLON):
            if self.cur_token_is(TokenType.EOF):
                break
            self._next_token()

        return LetStatement(token=let_token, name=name)

    def cur_token_is(self, token_type: TokenType) -> bool:
        """Check if the current token has the given type."""
        return self.cur_token.type is token_type

    def peek_token_is(self, token_type: TokenType) -> bool:
        """Check if the lookahead token has the given type."""
        return self.peek_token.type is token_type

    def expect_peek(self, token_type: TokenType) -> bool:
        """Advance if the lookahead token has the expected type.

        Args:
            token_type: Expected type of peek_token

        Returns:
            True if it matched (and the parser advanced one token), False if
            not (a diagnostic was recorded and the parser did not move)
        """
        if self.peek_token_is(token_type):
            self._next_token()
            return True
        self.peek_error(token_type)
        return False

    def peek_error(self, token_type: TokenType) -> None:
        """Record a diagnostic for an unexpected lookahead token."""
        msg = (
            f"expected next token to be {token_type}, "
            f"got {self.peek_token.type} instead"
        )
        logger.debug("parse error: %s", msg)
        self._errors.append(msg)
