"""Recall TUI consoles for regular output and error reporting."""

from rich.console import Console

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)
