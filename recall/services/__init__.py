"""Config loading and CLI support services."""

from .config_loader import ConfigError, default_config_path, parse_config, read_config
from .error_mapper import ErrorMapping, map_exception
from .example_config import EXAMPLE_CONFIG, init_config, render_example_config

__all__ = [
    "ConfigError",
    "default_config_path",
    "parse_config",
    "read_config",
    "ErrorMapping",
    "map_exception",
    "EXAMPLE_CONFIG",
    "init_config",
    "render_example_config",
]
