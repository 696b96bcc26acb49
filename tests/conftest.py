"""
Pytest configuration and fixtures for Recall tests.
"""

import io
from collections import deque

import pytest
from rich.console import Console

from recall.domain import Config, Entry, Page
from recall.tui.types import KeyEvent, ResizeEvent, Viewport


class FakeTerminal:
    """Scripted terminal: replays events and records frames and lifecycle calls."""

    def __init__(self, events, viewport=Viewport(80, 24), fail_on_write=None):
        self.events = deque(events)
        self.viewport = viewport
        self.fail_on_write = fail_on_write
        self.frames = []
        self.enter_calls = 0
        self.restore_calls = 0
        self.calls = []

    def enter(self):
        self.enter_calls += 1
        self.calls.append("enter")

    def restore(self):
        self.restore_calls += 1
        self.calls.append("restore")

    def size(self):
        return self.viewport

    def read_event(self):
        if not self.events:
            raise AssertionError("event script exhausted before the session ended")
        event = self.events.popleft()
        if isinstance(event, BaseException):
            raise event
        if isinstance(event, ResizeEvent):
            self.viewport = event.viewport
        return event

    def write_frame(self, frame):
        if self.fail_on_write is not None and len(self.frames) == self.fail_on_write:
            raise OSError("write failed")
        self.frames.append(frame)
        self.calls.append("write")


def keys(*names):
    return [KeyEvent(name) for name in names]


@pytest.fixture
def fake_terminal_factory():
    return FakeTerminal


@pytest.fixture
def key_events():
    return keys


@pytest.fixture
def render_text():
    """Render a frame to plain text at a fixed terminal size."""

    def _render(frame, width=80, height=24):
        console = Console(
            file=io.StringIO(),
            width=width,
            height=height,
            color_system=None,
            record=True,
            legacy_windows=False,
        )
        console.print(frame)
        return console.export_text()

    return _render


@pytest.fixture
def general_bash_config():
    """Two pages: ``general`` with one entry and ``bash`` with a few."""
    return Config(
        pages=(
            Page(
                name="general",
                entries=(Entry(id="RecallClose", keys=("q",), description="Closes recall"),),
            ),
            Page(
                name="bash",
                entries=(
                    Entry(id="clear", keys=("Ctrl", "L"), description="Clears the screen"),
                    Entry(id="search", keys=("Ctrl", "R"), description="Searches history"),
                    Entry(id="tty2", keys=("Ctrl", "Alt", "F2"), description="Switches to TTY 2"),
                ),
            ),
        ),
    )


@pytest.fixture
def empty_page_config():
    return Config(pages=(Page(name="empty_page"),))


@pytest.fixture
def recorded_events(monkeypatch):
    """Capture structured events emitted by the render loop."""
    events = []
    monkeypatch.setattr(
        "recall.tui.render_loop.log_tui_event",
        lambda event, **payload: events.append((event, payload)),
    )
    return events


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep tests away from the real user config and log directories."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config-home"))
    monkeypatch.delenv("RECALL_CONFIG_PATH", raising=False)
    monkeypatch.delenv("RECALL_UI", raising=False)
    monkeypatch.delenv("RECALL_LOG_LEVEL", raising=False)
    monkeypatch.setattr("recall.tui.__main__.configure_logging", lambda: None)
