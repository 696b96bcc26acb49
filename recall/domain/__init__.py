"""Domain-level shared models."""

from .models import (
    DEFAULT_HIGHLIGHT_COLOR,
    DEFAULT_PRIMARY_COLOR,
    Config,
    Entry,
    Page,
)

__all__ = [
    "Config",
    "Entry",
    "Page",
    "DEFAULT_PRIMARY_COLOR",
    "DEFAULT_HIGHLIGHT_COLOR",
]
