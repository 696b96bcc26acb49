"""Immutable page/entry model shared by the loader and the terminal UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

DEFAULT_PRIMARY_COLOR = 15
DEFAULT_HIGHLIGHT_COLOR = 14


@dataclass(frozen=True)
class Entry:
    """One documented shortcut: the keys pressed together and what they do."""

    id: str
    keys: Tuple[str, ...]
    description: str = ""


@dataclass(frozen=True)
class Page:
    """A named, ordered group of entries."""

    name: str
    entries: Tuple[Entry, ...] = ()


@dataclass(frozen=True)
class Config:
    """Validated pages plus the two display colors (ANSI table indices)."""

    pages: Tuple[Page, ...]
    primary_color: int = DEFAULT_PRIMARY_COLOR
    highlight_color: int = DEFAULT_HIGHLIGHT_COLOR

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def page_names(self) -> Tuple[str, ...]:
        return tuple(page.name for page in self.pages)
