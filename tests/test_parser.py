"""
Tests for program-level parsing.
"""

import logging

import pytest

from turtlescript import (
    Direction,
    Go,
    GoX,
    GoY,
    LexError,
    Move,
    ParseError,
    PenColor,
    PenDown,
    PenUp,
    PenWidth,
    PopLoc,
    PopRot,
    PushLoc,
    PushRot,
    Reset,
    ScriptParser,
    Turn,
    TurtleScriptError,
    parse,
    parse_command,
)


class TestProgram:
    """Tests for whole scripts."""

    def test_empty_input(self):
        """Blank scripts parse to an empty program."""
        assert parse("") == []
        assert parse("   \n\t \n") == []

    def test_square(self, square_script):
        """Statements on separate lines keep source order."""
        program = parse(square_script)

        assert len(program) == 10
        assert program[0] == PenDown()
        assert program[1:3] == [Move(10.0), Turn(90.0)]
        assert program[-1] == PenUp()

    def test_every_family(self, branching_script):
        """A mixed script yields one command per statement in order."""
        assert parse(branching_script) == [
            Reset(),
            PenColor(0.0, 128.0, 0.0),
            PenWidth(2.5),
            Go(0.0, -50.0),
            Direction(90.0),
            PenDown(),
            Move(30.0),
            PushLoc(),
            PushRot(),
            Turn(-30.0),
            Move(15.0),
            PopRot(),
            PopLoc(),
            Turn(30.0),
            Move(-1.0),
            GoX(12.0),
            GoY(-3.0),
        ]

    def test_optional_arguments_between_commands(self):
        """Optional arguments are taken only when a number follows."""
        program = parse("turnright turnright 12.3 turnleft")

        assert len(program) == 3
        assert program[0] == Turn(90.0)
        assert program[1].angle == pytest.approx(12.3)
        assert program[2] == Turn(-90.0)

    def test_deterministic(self, branching_script):
        """Parsing the same input twice gives the same program."""
        assert parse(branching_script) == parse(branching_script)

    def test_positions(self):
        """Commands remember where their keyword starts."""
        program = parse("penup\n  forward 3 go 1 2")

        assert [c.position for c in program] == [0, 8, 18]

    def test_parser_instance_is_reusable(self):
        """Calling parse again restarts from the beginning."""
        parser = ScriptParser("forward turnleft")

        first = parser.parse()
        assert first == [Move(1.0), Turn(-90.0)]
        assert parser.parse() == first

    def test_parse_command_after_parse(self):
        """parse_command re-reads the source after a full parse."""
        parser = ScriptParser("penup")

        assert parser.parse() == [PenUp()]
        assert parser.parse_command() == PenUp()


class TestProgramErrors:
    """Tests for scripts that fail to parse."""

    def test_bare_number(self):
        """A number with no consuming keyword is an error."""
        with pytest.raises(ParseError) as exc_info:
            parse("penup 5")

        assert exc_info.value.position == 6
        assert "NUMBER" in str(exc_info.value)

    def test_leading_comma(self):
        """A comma cannot start a statement."""
        with pytest.raises(ParseError):
            parse(", penup")

    def test_lex_error_is_not_wrapped(self):
        """Unrecognized text surfaces as a LexError."""
        with pytest.raises(LexError):
            parse("penup jump")

    def test_common_base(self):
        """Both error kinds share a base class."""
        with pytest.raises(TurtleScriptError):
            parse("penup 5")
        with pytest.raises(TurtleScriptError):
            parse("penup ?")

    def test_error_after_valid_statements(self):
        """A late error fails the whole script."""
        with pytest.raises(ParseError) as exc_info:
            parse("forward 10\nturnleft\ngo 1")

        assert exc_info.value.token.line == 3


class TestSingleCommand:
    """Tests for parse_command."""

    def test_single_commands(self):
        """Each well-formed command parses on its own."""
        assert parse_command("penup") == PenUp()
        assert parse_command("turnleft 22.7").angle == pytest.approx(-22.7)
        assert parse_command("go 1 3") == Go(1.0, 3.0)
        assert parse_command("goy 44.2").y == pytest.approx(44.2)
        assert parse_command("pencolor 255,128 ,    128") == PenColor(255.0, 128.0, 128.0)

    def test_trailing_command(self):
        """Two commands are not one."""
        with pytest.raises(ParseError):
            parse_command("penup pendown")

    def test_trailing_number(self):
        """Parameterless commands leave numbers unconsumed."""
        with pytest.raises(ParseError) as exc_info:
            parse_command("pushloc 22")

        assert exc_info.value.position == 8

    def test_incomplete_pencolor(self):
        """Missing components are an error."""
        with pytest.raises(ParseError):
            parse_command("pencolor 255,128")

    def test_empty(self):
        """There must be a command."""
        with pytest.raises(ParseError):
            parse_command("")

    def test_unknown_word(self):
        """Unknown words fail in the lexer."""
        with pytest.raises(LexError):
            parse_command("bleh")


class TestLogging:
    """Tests for debug logging."""

    def test_debug_records(self, caplog):
        """Parsing reports token and command counts at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="turtlescript"):
            parse("forward 10 penup")

        messages = [r.getMessage() for r in caplog.records]
        assert "Parsed 2 commands from 4 tokens" in messages
        assert all(r.levelno == logging.DEBUG for r in caplog.records)
