"""
Syntax Tree module for parsed turtle scripts.

This module defines the command types that make up a parsed program
and provides transformation utilities.
"""

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

__all__ = [
    "Command",
    "Direction",
    "Go",
    "GoX",
    "GoY",
    "Move",
    "PenColor",
    "PenDown",
    "PenUp",
    "PenWidth",
    "PopLoc",
    "PopRot",
    "Program",
    "PushLoc",
    "PushRot",
    "Reset",
    "Turn",
]
