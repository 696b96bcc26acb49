"""Runtime facade for selecting and bootstrapping Recall interfaces."""

from __future__ import annotations

from ..domain import Config
from .navigation import QuitReason


def run_rich(config: Config) -> QuitReason:
    """Run the hand-driven render loop on the controlling terminal."""
    from .render_loop import run_session
    from .terminal import PosixTerminal

    return run_session(config, PosixTerminal())


def run_textual(config: Config) -> QuitReason:
    """Run the Textual runtime."""
    from recall.tui.textual_app import RecallTextualApp

    app = RecallTextualApp(config)
    reason = app.run()
    if app.return_code:
        raise RuntimeError(f"Textual runtime exited with code {app.return_code}")
    return reason or QuitReason.INTERRUPT


def run_tui(config: Config, ui: str = "rich") -> QuitReason:
    """Run selected TUI runtime."""
    if ui == "textual":
        return run_textual(config)
    return run_rich(config)
