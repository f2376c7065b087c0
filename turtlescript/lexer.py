"""
Lexer module for tokenizing turtle scripts.

This module splits a script into keyword, numeric literal and comma tokens,
skipping whitespace, which only ever separates tokens.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from turtlescript.exceptions import LexError

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Token types for the turtle script lexer."""

    # Keywords without parameters
    RESET = auto()
    PENUP = auto()
    PENDOWN = auto()
    PUSHLOC = auto()
    POPLOC = auto()
    PUSHROT = auto()
    POPROT = auto()

    # Keywords with an optional parameter
    TURN = auto()
    TURNLEFT = auto()
    TURNRIGHT = auto()
    FORWARD = auto()
    BACKWARD = auto()

    # Keywords with required parameters
    DIRECTION = auto()
    GO = auto()
    GOX = auto()
    GOY = auto()
    PENWIDTH = auto()
    PENCOLOR = auto()

    # Literals
    NUMBER = auto()  # -12, 3.25

    # Punctuation
    COMMA = auto()  # ,

    # Special
    EOF = auto()


# Keywords mapping, exact and case-sensitive
KEYWORDS = {
    "reset": TokenType.RESET,
    "penup": TokenType.PENUP,
    "pendown": TokenType.PENDOWN,
    "pushloc": TokenType.PUSHLOC,
    "poploc": TokenType.POPLOC,
    "pushrot": TokenType.PUSHROT,
    "poprot": TokenType.POPROT,
    "turn": TokenType.TURN,
    "turnleft": TokenType.TURNLEFT,
    "turnright": TokenType.TURNRIGHT,
    "forward": TokenType.FORWARD,
    "backward": TokenType.BACKWARD,
    "direction": TokenType.DIRECTION,
    "go": TokenType.GO,
    "gox": TokenType.GOX,
    "goy": TokenType.GOY,
    "penwidth": TokenType.PENWIDTH,
    "pencolor": TokenType.PENCOLOR,
}

WHITESPACE = " \t\r\n"
DIGITS = "0123456789"


@dataclass
class Token:
    """Represents a single token from the lexer."""

    type: TokenType
    value: str
    position: int  # starting position in the source string
    line: int = 1
    column: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, pos={self.position})"


class ScriptLexer:
    """
    Tokenizer for turtle scripts.

    Handles:
    - Keywords, matched against the whole word so that ``turnleft`` is never
      read as ``turn`` followed by ``left``
    - Numbers, preferring the decimal form over the integer form
    - Commas separating ``pencolor`` components
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 0
        self.length = len(source)

    def _current_char(self) -> str | None:
        """Return current character or None if at end."""
        if self.pos >= self.length:
            return None
        return self.source[self.pos]

    def _peek_char(self, offset: int = 1) -> str | None:
        """Peek at character at given offset from current position."""
        peek_pos = self.pos + offset
        if peek_pos >= self.length:
            return None
        return self.source[peek_pos]

    def _advance(self) -> str | None:
        """Advance position and return the character."""
        char = self._current_char()
        if char is not None:
            self.pos += 1
            if char == "\n":
                self.line += 1
                self.column = 0
            else:
                self.column += 1
        return char

    def _is_digit(self, char: str | None) -> bool:
        return char is not None and char in DIGITS

    def _is_word_char(self, char: str | None) -> bool:
        return char is not None and (char.isalnum() or char == "_")

    def _skip_whitespace(self) -> None:
        """Skip whitespace characters, newlines included."""
        while self._current_char() is not None and self._current_char() in WHITESPACE:
            self._advance()

    def _read_number(self) -> Token:
        """Read a numeric literal (integer or decimal)."""
        start_pos = self.pos
        start_line = self.line
        start_column = self.column
        chars: list[str] = []

        # Handle negative numbers
        if self._current_char() == "-":
            chars.append("-")
            self._advance()

        # Read integer part
        while self._is_digit(self._current_char()):
            chars.append(self._advance())  # type: ignore

        # The decimal form only applies when a digit follows the point
        if self._current_char() == "." and self._is_digit(self._peek_char()):
            chars.append(self._advance())  # type: ignore  # add decimal point
            while self._is_digit(self._current_char()):
                chars.append(self._advance())  # type: ignore

        return Token(
            type=TokenType.NUMBER,
            value="".join(chars),
            position=start_pos,
            line=start_line,
            column=start_column,
        )

    def _read_keyword(self) -> Token:
        """Read a whole word and resolve it to a keyword."""
        start_pos = self.pos
        start_line = self.line
        start_column = self.column
        chars: list[str] = []

        while self._is_word_char(self._current_char()):
            chars.append(self._advance())  # type: ignore

        value = "".join(chars)
        if value not in KEYWORDS:
            raise LexError(
                f"Unknown keyword {value!r}", start_pos, value, start_line, start_column
            )

        return Token(
            type=KEYWORDS[value],
            value=value,
            position=start_pos,
            line=start_line,
            column=start_column,
        )

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source string."""
        self.pos = 0
        self.line = 1
        self.column = 0
        tokens: list[Token] = []

        while self.pos < self.length:
            self._skip_whitespace()

            if self.pos >= self.length:
                break

            char = self._current_char()
            start_pos = self.pos
            start_line = self.line
            start_column = self.column

            # Numbers (including negative numbers)
            if self._is_digit(char) or (
                char == "-" and self._is_digit(self._peek_char())
            ):
                tokens.append(self._read_number())
                continue

            # Keywords
            if char.isalpha() or char == "_":  # type: ignore
                tokens.append(self._read_keyword())
                continue

            if char == ",":
                self._advance()
                tokens.append(
                    Token(TokenType.COMMA, ",", start_pos, start_line, start_column)
                )
                continue

            raise LexError(
                f"Unexpected character: {char!r}",
                start_pos,
                char,  # type: ignore
                start_line,
                start_column,
            )

        # Add EOF token
        tokens.append(Token(TokenType.EOF, "", self.pos, self.line, self.column))

        logger.debug("Tokenized %d characters into %d tokens", self.length, len(tokens))
        return tokens

    def tokenize_iter(self) -> Iterator[Token]:
        """Tokenize as an iterator over the finished token list."""
        for token in self.tokenize():
            yield token


def tokenize(source: str) -> list[Token]:
    """
    Tokenize a turtle script.

    Args:
        source: The script text

    Returns:
        List of tokens, always terminated by an EOF token

    Example:
        >>> [t.type.name for t in tokenize("go 1 -2.5")]
        ['GO', 'NUMBER', 'NUMBER', 'EOF']
    """
    return ScriptLexer(source).tokenize()
