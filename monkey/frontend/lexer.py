"""
Lexer module for Monkey.

This module provides a hand-written, pull-based scanner. Each call to
`Lexer.next_token()` consumes just enough characters of the source string
to produce one Token; no token list is built up front.
"""

from typing import Iterator, List

from .tokens import Token, TokenType, lookup_ident


# Sentinel character meaning "no character / end of input"
EOF_CHAR = ""

_WHITESPACE = frozenset(" \t\n\r")


def is_letter(ch: str) -> bool:
    """Check if a character may appear in an identifier (ASCII letters and '_')."""
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def is_digit(ch: str) -> bool:
    """Check if a character is an ASCII decimal digit."""
    return "0" <= ch <= "9"


class Lexer:
    """Lexer for tokenizing Monkey source code.

    The lexer keeps two cursors into the input: `position` points at the
    current character `ch`, and `read_position` points one character ahead.

    Example:
        >>> lexer = Lexer("let five = 5;")
        >>> lexer.next_token()
        Token(LET, 'let')
    """

    # Tokens made of exactly one character
    _SINGLE_CHAR_MAP = {
        "+": TokenType.PLUS,
        "-": TokenType.MINUS,
        "/": TokenType.SLASH,
        "*": TokenType.ASTERISK,
        "<": TokenType.LT,
        ">": TokenType.GT,
        ",": TokenType.COMMA,
        ";": TokenType.SEMICOLON,
        "{": TokenType.LBRACE,
        "}": TokenType.RBRACE,
        "(": TokenType.LPAREN,
        ")": TokenType.RPAREN,
    }

    # First character -> (single-char type, two-char type when followed by '=')
    _EQ_PAIRS = {
        "=": (TokenType.ASSIGN, TokenType.EQ),
        "!": (TokenType.BANG, TokenType.NOT_EQ),
    }

    def __init__(self, source: str):
        """Initialize the lexer and prime the first character.

        Args:
            source: Complete Monkey source code string
        """
        self._input = source
        self._position: int = 0
        self._read_position: int = 0
        self._ch: str = EOF_CHAR
        self._read_char()

    @property
    def input(self) -> str:
        return self._input

    @property
    def position(self) -> int:
        """Index of the current character."""
        return self._position

    @property
    def read_position(self) -> int:
        """Index of the next character to be read."""
        return self._read_position

    @property
    def ch(self) -> str:
        """The current character, or EOF_CHAR past the end of input."""
        return self._ch

    def next_token(self) -> Token:
        """Scan and return the next token.

        Once the end of input is reached every further call returns an
        EOF token.

        Returns:
            The next Token in the input
        """
        self._skip_whitespace()
        ch = self._ch

        if ch in self._EQ_PAIRS:
            single, double = self._EQ_PAIRS[ch]
            if self._peek_char() == "=":
                self._read_char()
                tok = Token(double, ch + self._ch)
            else:
                tok = Token(single, ch)
        elif ch in self._SINGLE_CHAR_MAP:
            tok = Token(self._SINGLE_CHAR_MAP[ch], ch)
        elif ch == EOF_CHAR:
            tok = Token(TokenType.EOF, "")
        elif is_letter(ch):
            # _read_identifier already moved past the lexeme
            literal = self._read_identifier()
            return Token(lookup_ident(literal), literal)
        elif is_digit(ch):
            return Token(TokenType.INT, self._read_number())
        else:
            tok = Token(TokenType.ILLEGAL, ch)

        self._read_char()
        return tok

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF token."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.type is TokenType.EOF:
                return

    def _read_char(self) -> None:
        """Advance both cursors by one character."""
        if self._read_position >= len(self._input):
            self._ch = EOF_CHAR
        else:
            self._ch = self._input[self._read_position]
        self._position = self._read_position
        self._read_position += 1

    def _peek_char(self) -> str:
        """Return the character after the current one without consuming it."""
        if self._read_position >= len(self._input):
            return EOF_CHAR
        return self._input[self._read_position]

    def _skip_whitespace(self) -> None:
        while self._ch in _WHITESPACE:
            self._read_char()

    def _read_identifier(self) -> str:
        start = self._position
        while is_letter(self._ch):
            self._read_char()
        return self._input[start:self._position]

    def _read_number(self) -> str:
        start = self._position
        while is_digit(self._ch):
            self._read_char()
        return self._input[start:self._position]


def tokenize(source: str) -> List[Token]:
    """Convenience function to tokenize source code.

    Args:
        source: Monkey source code string

    Returns:
        List of Token objects, ending with a single EOF token
    """
    return list(Lexer(source))
