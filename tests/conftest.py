"""
Pytest configuration and shared fixtures for turtlescript tests.
"""

import pytest

from turtlescript import ProgramTransformer


@pytest.fixture
def square_script():
    """
    Draws a 10x10 square, one statement per line.
    Contains: 10 statements
    """
    return """pendown
forward 10
turnright
forward 10
turnright
forward 10
turnright
forward 10
turnright
penup
"""


@pytest.fixture
def branching_script():
    """
    Tree-like script exercising every command family.
    Contains: 17 statements
    """
    return (
        "reset pencolor 0,128,0 penwidth 2.5\n"
        "go 0 -50 direction 90 pendown\n"
        "\tforward 30 pushloc pushrot\n"
        "  turnleft 30 forward 15 poprot poploc\n"
        "turnright 30 backward gox 12 goy -3"
    )


@pytest.fixture
def transformer():
    """Shared program transformer."""
    return ProgramTransformer()
