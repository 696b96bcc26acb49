"""Tests for the annotated example config written by ``recall init``."""

from pathlib import Path

import pytest

from recall.domain import Config, Entry, Page
from recall.services.config_loader import ConfigError, parse_config, read_config
from recall.services.example_config import (
    EXAMPLE_CONFIG,
    init_config,
    render_example_config,
)


def test_example_config_loads_back_to_the_same_pages():
    assert parse_config(render_example_config(EXAMPLE_CONFIG)) == EXAMPLE_CONFIG


def test_each_hint_is_written_once():
    config = Config(
        pages=(
            Page(name="One", entries=(Entry(id="a", keys=("a",), description="first"),)),
            Page(name="Two", entries=(Entry(id="b", keys=("b",), description="second"),)),
            Page(name="Empty1"),
            Page(name="Empty2"),
        )
    )

    text = render_example_config(config)

    assert text.count("# Each subtable defines a new page") == 1
    assert text.count('# "content" takes an array') == 1
    assert text.count('# "description" takes a string') == 1
    assert text.count("# Empty tables are also allowed") == 1


def test_names_that_are_not_bare_keys_are_quoted():
    config = Config(
        pages=(
            Page(
                name="Vim motions",
                entries=(Entry(id="go to top", keys=("g", "g"), description='Say "hi"'),),
            ),
        )
    )

    assert parse_config(render_example_config(config)) == config


def test_init_writes_example_and_creates_parent(tmp_path: Path):
    path = tmp_path / "nested" / "config.toml"

    message = init_config(path)

    assert message == f"Created example config in {path}"
    assert read_config(path) == EXAMPLE_CONFIG


def test_init_refuses_to_overwrite(tmp_path: Path):
    path = tmp_path / "config.toml"
    path.write_text("[keep]\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="already exists"):
        init_config(path)

    assert path.read_text(encoding="utf-8") == "[keep]\n"
