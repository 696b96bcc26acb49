"""TOML config loading and validation for Recall pages.

The file is a set of tables. Each table is a page whose keys are entry ids;
the optional ``[recall]`` table holds global display settings::

    [recall]
    primary_color = 15
    highlight_color = 14

    [General]
    Copy = {content = ["Ctrl", "C"], description = "Copies the current selection."}
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..config.settings import settings
from ..domain import (
    DEFAULT_HIGHLIGHT_COLOR,
    DEFAULT_PRIMARY_COLOR,
    Config,
    Entry,
    Page,
)

RECALL_TABLE_NAME = "recall"
CONFIG_DIR_NAME = "recall"
CONFIG_FILE_NAME = "config.toml"


class ConfigError(RuntimeError):
    """Raised when a config file is missing, unreadable or malformed."""


class RecallSettingsSchema(BaseModel):
    """Global options from the ``[recall]`` table."""

    model_config = ConfigDict(extra="forbid")

    primary_color: int = Field(default=DEFAULT_PRIMARY_COLOR, ge=0, le=255)
    highlight_color: int = Field(default=DEFAULT_HIGHLIGHT_COLOR, ge=0, le=255)


class EntrySchema(BaseModel):
    """A single entry: the keys of the shortcut and its description."""

    model_config = ConfigDict(extra="forbid")

    content: List[str] = Field(min_length=1)
    description: str

    @field_validator("content", mode="before")
    @classmethod
    def accept_single_key(cls, v):
        if isinstance(v, str):
            return [v]
        return v


def default_config_path() -> Path:
    """Return the config path from settings, or the per-user default."""
    if settings.config_path:
        return Path(settings.config_path).expanduser()
    config_home = os.environ.get("XDG_CONFIG_HOME") or "~/.config"
    return Path(config_home).expanduser() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


def _build_page(name: str, table: Any) -> Page:
    if not isinstance(table, dict):
        raise ConfigError(f"Page '{name}' must be a table of entries.")

    entries = []
    for entry_id, raw_entry in table.items():
        if not isinstance(raw_entry, dict):
            raise ConfigError(
                f"Entry '{entry_id}' in page '{name}' must be a table "
                "with 'content' and 'description'."
            )
        try:
            schema = EntrySchema.model_validate(raw_entry)
        except ValidationError as exc:
            raise ConfigError(
                f"Invalid entry '{entry_id}' in page '{name}' ({_first_error(exc)})."
            ) from exc
        entries.append(
            Entry(
                id=entry_id,
                keys=tuple(schema.content),
                description=schema.description,
            )
        )
    return Page(name=name, entries=tuple(entries))


def parse_config(text: str, *, source: str = "<string>") -> Config:
    """Parse TOML text into a validated ``Config``."""
    try:
        table: Dict[str, Any] = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Config '{source}' is not valid TOML: {exc}") from exc

    recall_table = table.pop(RECALL_TABLE_NAME, {})
    if not isinstance(recall_table, dict):
        raise ConfigError(f"'[{RECALL_TABLE_NAME}]' in '{source}' must be a table.")
    try:
        recall_settings = RecallSettingsSchema.model_validate(recall_table)
    except ValidationError as exc:
        raise ConfigError(
            f"Invalid recall settings in '{source}' ({_first_error(exc)})."
        ) from exc

    pages = tuple(_build_page(name, value) for name, value in table.items())
    if not pages:
        raise ConfigError(f"Config '{source}' defines no pages.")

    return Config(
        pages=pages,
        primary_color=recall_settings.primary_color,
        highlight_color=recall_settings.highlight_color,
    )


def read_config(path: Union[str, Path]) -> Config:
    """Read and validate the config file at ``path``."""
    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise ConfigError(
            f"Config file is missing at '{config_path}'. "
            "Run `recall init` to create an example."
        )
    if not config_path.is_file():
        raise ConfigError(f"Config path '{config_path}' is not a file.")

    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read config from '{config_path}'.") from exc

    return parse_config(text, source=str(config_path))
