"""Annotated example config written by ``recall init``."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import List, Union

from ..domain import (
    DEFAULT_HIGHLIGHT_COLOR,
    DEFAULT_PRIMARY_COLOR,
    Config,
    Entry,
    Page,
)
from .config_loader import RECALL_TABLE_NAME, ConfigError

EXAMPLE_CONFIG = Config(
    pages=(
        Page(
            name="General",
            entries=(
                Entry(
                    id="Copy",
                    keys=("Ctrl", "C"),
                    description="Copies the current selection.",
                ),
                Entry(id="RecallClose", keys=("q",), description="Closes recall"),
            ),
        ),
        Page(name="EmptyPage"),
    ),
    primary_color=DEFAULT_PRIMARY_COLOR,
    highlight_color=DEFAULT_HIGHLIGHT_COLOR,
)

_BARE_KEY = re.compile(r"^[A-Za-z0-9_-]+$")


def _toml_key(name: str) -> str:
    return name if _BARE_KEY.match(name) else json.dumps(name, ensure_ascii=False)


def _toml_string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def render_example_config(config: Config) -> str:
    """Serialize ``config`` to TOML, explaining each feature the first time it appears."""
    lines: List[str] = [
        "# Global settings for recall",
        f"[{RECALL_TABLE_NAME}]",
        "# Colors are numbers from the 256-color ANSI table (0-255)",
        f"primary_color = {config.primary_color}",
        f"highlight_color = {config.highlight_color}",
        "",
    ]

    hints_given = set()

    def hint(name: str, *text: str) -> None:
        if name not in hints_given:
            lines.extend(text)
            hints_given.add(name)

    for page in config.pages:
        hint(
            "subtable",
            "# Each subtable defines a new page",
            "# The name of the page is the name of the subtable",
        )
        lines.append(f"[{_toml_key(page.name)}]")

        for entry in page.entries:
            hint(
                "content",
                '# "content" takes an array of strings used as keys needed for a shortcut',
            )
            if entry.description:
                hint(
                    "description",
                    '# "description" takes a string used as a description for this entry',
                )
            content = ", ".join(_toml_string(key) for key in entry.keys)
            lines.append(
                f"{_toml_key(entry.id)} = {{content = [{content}], "
                f"description = {_toml_string(entry.description)}}}"
            )

        if not page.entries:
            hint("empty", "# Empty tables are also allowed (but useless)")
        lines.append("")

    return "\n".join(lines)


def init_config(path: Union[str, Path], config: Config = EXAMPLE_CONFIG) -> str:
    """Write the example config to ``path``; refuses to overwrite an existing file."""
    config_path = Path(path).expanduser()
    if config_path.exists():
        raise ConfigError(f"Path '{config_path}' already exists!")

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(render_example_config(config), encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to write example config to '{config_path}'.") from exc

    return f"Created example config in {config_path}"
