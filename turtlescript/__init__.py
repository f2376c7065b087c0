"""
turtlescript - A parser for a small turtle-graphics command language.

This package turns scripts such as ``forward 10 turnright pencolor 255,0,0``
into an ordered list of typed commands for a renderer to replay.

Usage:
    from turtlescript import parse

    program = parse("pendown forward 10 turnleft forward 10")
"""

from turtlescript.exceptions import LexError, ParseError, TurtleScriptError
from turtlescript.lexer import ScriptLexer, Token, TokenType, tokenize
from turtlescript.parser import ScriptParser, parse, parse_command
from turtlescript.syntax_tree import (
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


# Lazy import keeps pandas off the parsing path
def __getattr__(name: str):
    if name == "ProgramTransformer":
        from turtlescript.syntax_tree.transformer import ProgramTransformer
        return ProgramTransformer
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "Command",
    "Direction",
    "Go",
    "GoX",
    "GoY",
    "LexError",
    "Move",
    "ParseError",
    "PenColor",
    "PenDown",
    "PenUp",
    "PenWidth",
    "PopLoc",
    "PopRot",
    "Program",
    "ProgramTransformer",
    "PushLoc",
    "PushRot",
    "Reset",
    "ScriptLexer",
    "ScriptParser",
    "Token",
    "TokenType",
    "Turn",
    "TurtleScriptError",
    "parse",
    "parse_command",
    "tokenize",
]

__version__ = "0.1.0"
