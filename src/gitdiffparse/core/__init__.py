"""Core module for gitdiffparse."""

from gitdiffparse.core.config import (
    Config,
    ConfigError,
    find_config_file,
    load_config,
    merge_cli_args,
)

__all__ = [
    "Config",
    "ConfigError",
    "load_config",
    "find_config_file",
    "merge_cli_args",
]
