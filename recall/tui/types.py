"""Recall TUI Data Types."""

from dataclasses import dataclass
from typing import Union


class TerminalError(RuntimeError):
    """Raised when the terminal cannot be put into (or kept in) interactive mode."""


@dataclass(frozen=True)
class Viewport:
    """Visible terminal area in character cells."""

    width: int
    height: int


@dataclass(frozen=True)
class KeyEvent:
    """A single key press, named like ``q``, ``left`` or ``ctrl+c``."""

    key: str


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal changed size."""

    width: int
    height: int

    @property
    def viewport(self) -> Viewport:
        return Viewport(self.width, self.height)


TerminalEvent = Union[KeyEvent, ResizeEvent]
