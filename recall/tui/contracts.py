"""Typed terminal contract used by the render loop."""

from __future__ import annotations

from typing import Protocol

from rich.console import RenderableType

from .types import TerminalEvent, Viewport


class Terminal(Protocol):
    """An exclusively owned terminal device.

    ``enter`` switches to raw mode and the alternate screen; ``restore``
    undoes that and is called exactly once per successful ``enter``.
    """

    def enter(self) -> None: ...

    def restore(self) -> None: ...

    def size(self) -> Viewport: ...

    def read_event(self) -> TerminalEvent: ...

    def write_frame(self, frame: RenderableType) -> None: ...
