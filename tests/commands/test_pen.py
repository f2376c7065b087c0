"""
Tests for pen style commands.

Commands tested: penwidth, pencolor
"""

import pytest

from turtlescript import ParseError, PenColor, PenWidth, parse


class TestPenWidth:
    """Tests for penwidth."""

    def test_penwidth(self):
        assert parse("penwidth 2") == [PenWidth(2.0)]

    def test_missing_width(self):
        """The width is required."""
        with pytest.raises(ParseError):
            parse("penwidth")


class TestPenColor:
    """Tests for pencolor."""

    def test_pencolor(self):
        assert parse("pencolor 255,0,128") == [PenColor(255.0, 0.0, 128.0)]

    def test_spacing_around_commas(self):
        """Whitespace around the commas is insignificant."""
        assert parse("pencolor 1 ,\n2,  3") == [PenColor(1.0, 2.0, 3.0)]

    def test_missing_component(self):
        """Three components are required."""
        with pytest.raises(ParseError):
            parse("pencolor 1,2")

    def test_missing_comma(self):
        """Commas are mandatory separators."""
        with pytest.raises(ParseError) as exc_info:
            parse("pencolor 1 2 3")

        assert "COMMA" in str(exc_info.value)

    def test_trailing_comma(self):
        with pytest.raises(ParseError):
            parse("pencolor 1,2,")

    def test_script_text(self):
        """Components render comma separated."""
        assert str(PenColor(255.0, 0.0, 128.0)) == "pencolor 255,0,128"
