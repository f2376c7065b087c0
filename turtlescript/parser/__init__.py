"""
Parser module for turtle script syntax analysis.

This module provides the recursive descent parser for converting
tokenized scripts into programs.
"""

from .command_parser import ScriptParser, parse, parse_command

__all__ = [
    "ScriptParser",
    "parse",
    "parse_command",
]
