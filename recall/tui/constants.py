"""Recall TUI Constants."""

import os

TITLE = "Recall"
VERSION = "0.1.0"
LOG_LEVEL = "INFO"

# Paths
STATE_HOME = os.environ.get("XDG_STATE_HOME") or os.path.join("~", ".local", "state")
LOG_PATH = os.path.join(STATE_HOME, "recall", "recall.log")

# Bottom border legend: (key hint, label)
LEGEND = (
    ("<Left>", "Previous Page"),
    ("<Right>", "Next Page"),
    ("<q>", "Close"),
)
