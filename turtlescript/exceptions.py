"""
Exception classes for turtle script processing.

Both error kinds are terminal for the script being processed: the caller
gets either a complete program or one of these exceptions.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from turtlescript.lexer import Token


class TurtleScriptError(Exception):
    """Base exception for all turtle script errors."""

    pass


class LexError(TurtleScriptError):
    """Exception raised when the lexer meets text it cannot recognize."""

    def __init__(
        self, message: str, position: int, text: str, line: int = 1, column: int = 0
    ):
        self.position = position
        self.text = text
        self.line = line
        self.column = column
        super().__init__(f"{message} at line {line}, column {column}")


class ParseError(TurtleScriptError):
    """Exception raised when the token stream matches no grammar rule."""

    def __init__(self, message: str, token: "Token | None" = None):
        self.token = token
        self.position = token.position if token else None
        self.line = token.line if token else None
        self.column = token.column if token else None
        if token:
            super().__init__(f"{message} at position {token.position}")
        else:
            super().__init__(message)
