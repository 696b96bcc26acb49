"""Shared Textual widgets for Recall TUI."""

from .page_view import PageView

__all__ = ["PageView"]
