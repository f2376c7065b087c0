"""
Command definitions for parsed turtle scripts.

Each command is an immutable value. Parameters hold float32 precision and
are stored as the Python float equal to the rounded float32 value.
"""

from abc import ABC
from dataclasses import dataclass, field, fields
from typing import ClassVar

import numpy as np


def format_number(value: float) -> str:
    """Render a parameter as a literal the lexer accepts (no exponent)."""
    return np.format_float_positional(np.float32(value), trim="-")


class Command(ABC):
    """Base class for all commands."""

    keyword: ClassVar[str]
    position: int = 0  # Position of the keyword in the source string

    def __post_init__(self) -> None:
        # Parameters always hold float32 precision, however the command is built
        for f in fields(self):  # type: ignore[arg-type]
            if f.name != "position":
                object.__setattr__(self, f.name, float(np.float32(getattr(self, f.name))))

    def arguments(self) -> tuple[float, ...]:
        """Return the parameters in declaration order."""
        return tuple(
            getattr(self, f.name) for f in fields(self) if f.name != "position"  # type: ignore[arg-type]
        )

    def __str__(self) -> str:
        args = " ".join(format_number(arg) for arg in self.arguments())
        if args:
            return f"{self.keyword} {args}"
        return self.keyword


@dataclass(frozen=True)
class Reset(Command):
    """Return the turtle to its initial state."""

    keyword: ClassVar[str] = "reset"
    position: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class PenUp(Command):
    keyword: ClassVar[str] = "penup"
    position: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class PenDown(Command):
    keyword: ClassVar[str] = "pendown"
    position: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class PushLoc(Command):
    """Save the current location."""

    keyword: ClassVar[str] = "pushloc"
    position: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class PopLoc(Command):
    """Restore the most recently saved location."""

    keyword: ClassVar[str] = "poploc"
    position: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class PushRot(Command):
    """Save the current heading."""

    keyword: ClassVar[str] = "pushrot"
    position: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class PopRot(Command):
    """Restore the most recently saved heading."""

    keyword: ClassVar[str] = "poprot"
    position: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class Turn(Command):
    """Turn by a relative angle in degrees; positive is clockwise."""

    angle: float
    keyword: ClassVar[str] = "turn"
    position: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class Move(Command):
    """Move along the current heading; negative distances move backwards."""

    distance: float
    keyword: ClassVar[str] = "forward"
    position: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class Direction(Command):
    """Set the absolute heading in degrees."""

    angle: float
    keyword: ClassVar[str] = "direction"
    position: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class Go(Command):
    """Jump to an absolute position."""

    x: float
    y: float
    keyword: ClassVar[str] = "go"
    position: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class GoX(Command):
    x: float
    keyword: ClassVar[str] = "gox"
    position: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class GoY(Command):
    y: float
    keyword: ClassVar[str] = "goy"
    position: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class PenWidth(Command):
    width: float
    keyword: ClassVar[str] = "penwidth"
    position: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class PenColor(Command):
    """Set the pen color from red, green and blue components."""

    r: float
    g: float
    b: float
    keyword: ClassVar[str] = "pencolor"
    position: int = field(default=0, compare=False, repr=False)

    def __str__(self) -> str:
        return f"{self.keyword} " + ",".join(
            format_number(arg) for arg in self.arguments()
        )


# Ordered commands, replayed in sequence by the interpreter
Program = list[Command]
