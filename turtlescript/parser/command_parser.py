"""
Script Parser - Recursive descent parser for turtle scripts.

This module parses a token stream into a program, handling:
- Parameterless commands (penup, pushloc, ...)
- Optional parameters with defaults (turnleft, forward, ...)
- Required parameters (direction, go, pencolor, ...)
"""

import logging
from typing import Callable

import numpy as np

from turtlescript.exceptions import ParseError
from turtlescript.lexer import ScriptLexer, Token, TokenType
from turtlescript.syntax_tree.nodes import (
    Command,
    Direction,
    Go,
    GoX,
    GoY,
    Move,
    PenColor,
    PenDown,
    PenUp,
    PenWidth,
    PopLoc,
    PopRot,
    Program,
    PushLoc,
    PushRot,
    Reset,
    Turn,
)

logger = logging.getLogger(__name__)

# Keywords that form a command on their own
PARAMETERLESS_COMMANDS: dict[TokenType, type[Command]] = {
    TokenType.RESET: Reset,
    TokenType.PENUP: PenUp,
    TokenType.PENDOWN: PenDown,
    TokenType.PUSHLOC: PushLoc,
    TokenType.POPLOC: PopLoc,
    TokenType.PUSHROT: PushRot,
    TokenType.POPROT: PopRot,
}


class ScriptParser:
    """
    Recursive descent parser for turtle scripts.

    Grammar:
        program     := command* EOF
        command     := RESET | PENUP | PENDOWN | PUSHLOC | POPLOC | PUSHROT | POPROT
                     | (TURN | TURNRIGHT | TURNLEFT) NUMBER?
                     | (FORWARD | BACKWARD) NUMBER?
                     | DIRECTION NUMBER
                     | GO NUMBER NUMBER
                     | (GOX | GOY) NUMBER
                     | PENWIDTH NUMBER
                     | PENCOLOR NUMBER COMMA NUMBER COMMA NUMBER

    An optional NUMBER directly after its keyword is always consumed by that
    keyword.
    """

    def __init__(self, source: str):
        self.source = source
        self.tokens: list[Token] = []
        self.pos = 0
        self._rules: dict[TokenType, Callable[[Token], Command]] = {
            TokenType.TURN: self._parse_turn,
            TokenType.TURNRIGHT: self._parse_turn,
            TokenType.TURNLEFT: self._parse_turnleft,
            TokenType.FORWARD: self._parse_forward,
            TokenType.BACKWARD: self._parse_backward,
            TokenType.DIRECTION: self._parse_direction,
            TokenType.GO: self._parse_go,
            TokenType.GOX: self._parse_gox,
            TokenType.GOY: self._parse_goy,
            TokenType.PENWIDTH: self._parse_penwidth,
            TokenType.PENCOLOR: self._parse_pencolor,
        }

    def parse(self) -> Program:
        """Parse the whole script into a program."""
        self.tokens = ScriptLexer(self.source).tokenize()
        self.pos = 0

        program: Program = []
        while not self._match(TokenType.EOF):
            program.append(self._parse_command())

        logger.debug("Parsed %d commands from %d tokens", len(program), len(self.tokens))
        return program

    def parse_command(self) -> Command:
        """Parse a script holding exactly one command."""
        self.tokens = ScriptLexer(self.source).tokenize()
        self.pos = 0

        command = self._parse_command()
        if not self._match(TokenType.EOF):
            raise ParseError(
                f"Unexpected {self._current_token().type.name} after command",
                self._current_token(),
            )
        return command

    def _current_token(self) -> Token:
        """Get the current token."""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return self.tokens[-1]  # Return EOF token

    def _advance(self) -> Token:
        """Advance and return the current token."""
        token = self._current_token()
        self.pos += 1
        return token

    def _expect(self, token_type: TokenType, context: str) -> Token:
        """Expect a specific token type, raise error if not found."""
        token = self._current_token()
        if token.type != token_type:
            raise ParseError(
                f"Expected {token_type.name} for {context}, got {token.type.name}", token
            )
        return self._advance()

    def _match(self, *token_types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self._current_token().type in token_types

    def _parse_command(self) -> Command:
        """Parse one command starting at the current token."""
        token = self._current_token()

        if token.type in PARAMETERLESS_COMMANDS:
            self._advance()
            return PARAMETERLESS_COMMANDS[token.type](position=token.position)

        rule = self._rules.get(token.type)
        if rule is None:
            if token.type == TokenType.EOF:
                raise ParseError("Expected command, got end of input", token)
            raise ParseError(f"Expected command, got {token.type.name}", token)

        self._advance()
        return rule(token)

    # Parameters

    def _convert(self, token: Token) -> float:
        """Convert numeric token text to float32 precision."""
        try:
            value = float(token.value)
        except ValueError:
            raise ParseError(f"Malformed number {token.value!r}", token)

        with np.errstate(over="ignore", under="ignore"):
            converted = np.float32(value)

        if not np.isfinite(converted):
            raise ParseError(f"Number {token.value!r} is out of range", token)
        if converted == 0 and value != 0:
            raise ParseError(f"Number {token.value!r} is too small to represent", token)
        return float(converted)

    def _number(self, context: str) -> float:
        """Parse a required numeric parameter."""
        return self._convert(self._expect(TokenType.NUMBER, context))

    def _optional_number(self, default: float, sign: float = 1.0) -> float:
        """
        Parse an optional numeric parameter.

        A present value is multiplied by sign; an absent one yields default
        as is.
        """
        if self._match(TokenType.NUMBER):
            return sign * self._convert(self._advance())
        return default

    # Command rules

    def _parse_turn(self, keyword: Token) -> Command:
        return Turn(self._optional_number(90.0), position=keyword.position)

    def _parse_turnleft(self, keyword: Token) -> Command:
        return Turn(self._optional_number(-90.0, sign=-1.0), position=keyword.position)

    def _parse_forward(self, keyword: Token) -> Command:
        return Move(self._optional_number(1.0), position=keyword.position)

    def _parse_backward(self, keyword: Token) -> Command:
        return Move(self._optional_number(-1.0, sign=-1.0), position=keyword.position)

    def _parse_direction(self, keyword: Token) -> Command:
        return Direction(self._number(keyword.value), position=keyword.position)

    def _parse_go(self, keyword: Token) -> Command:
        x = self._number(keyword.value)
        y = self._number(keyword.value)
        return Go(x, y, position=keyword.position)

    def _parse_gox(self, keyword: Token) -> Command:
        return GoX(self._number(keyword.value), position=keyword.position)

    def _parse_goy(self, keyword: Token) -> Command:
        return GoY(self._number(keyword.value), position=keyword.position)

    def _parse_penwidth(self, keyword: Token) -> Command:
        return PenWidth(self._number(keyword.value), position=keyword.position)

    def _parse_pencolor(self, keyword: Token) -> Command:
        """
        Parse pencolor components.
        Format: pencolor r, g, b
        """
        r = self._number(keyword.value)
        self._expect(TokenType.COMMA, keyword.value)
        g = self._number(keyword.value)
        self._expect(TokenType.COMMA, keyword.value)
        b = self._number(keyword.value)
        return PenColor(r, g, b, position=keyword.position)


def parse(source: str) -> Program:
    """
    Parse a turtle script into a program.

    Args:
        source: The script text

    Returns:
        The commands in source order; empty for a blank script

    Example:
        >>> parse("forward 10 turnleft")
        [Move(distance=10.0), Turn(angle=-90.0)]
    """
    return ScriptParser(source).parse()


def parse_command(source: str) -> Command:
    """Parse a script that must hold exactly one command."""
    return ScriptParser(source).parse_command()
