"""Configuration loading and validation for gitdiffparse."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from gitdiffparse.logging import LOG_FORMATS

CONFIG_FILENAMES = (".gitdiffparse.yaml", ".gitdiffparse.yml")
OUTPUT_FORMATS = {"text", "json"}
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(Exception):
    """Error in configuration."""

    pass


@dataclass
class Config:
    """Full application configuration."""

    output_format: str = "text"
    include_patch: bool = False
    log_level: str = "WARNING"
    log_format: str = "console"

    def __post_init__(self) -> None:
        validate_config(self)


def validate_config(config: Config) -> None:
    """Validate configuration values.

    Raises:
        ConfigError: If any values are invalid.
    """
    if config.output_format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"output_format must be one of {sorted(OUTPUT_FORMATS)}, got {config.output_format}"
        )

    if not isinstance(config.include_patch, bool):
        raise ConfigError(f"include_patch must be a boolean, got {config.include_patch!r}")

    if str(config.log_level).upper() not in LOG_LEVELS:
        raise ConfigError(
            f"log_level must be one of {sorted(LOG_LEVELS)}, got {config.log_level}"
        )

    if config.log_format not in LOG_FORMATS:
        raise ConfigError(
            f"log_format must be one of {list(LOG_FORMATS)}, got {config.log_format}"
        )


def find_config_file(start_path: Optional[str] = None) -> Optional[str]:
    """Find .gitdiffparse.yaml in current directory or parents.

    Args:
        start_path: Starting directory (defaults to cwd).

    Returns:
        Path to config file if found, None otherwise.
    """
    if start_path:
        current = Path(start_path).resolve()
    else:
        current = Path.cwd()

    while True:
        for name in CONFIG_FILENAMES:
            config_path = current / name
            if config_path.exists():
                return str(config_path)

        # Stop at git root
        if (current / ".git").exists():
            break

        # Stop at filesystem root
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config(path: Optional[str] = None) -> Config:
    """Load configuration from file.

    Args:
        path: Path to config file. If None, searches for .gitdiffparse.yaml.

    Returns:
        Config object with loaded or default values.

    Raises:
        ConfigError: If the config file is invalid.
    """
    if path is None:
        path = find_config_file()

    if path is None:
        return Config()

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file: {e}") from e

    if raw is None:
        return Config()

    if not isinstance(raw, dict):
        raise ConfigError("Config file must contain a mapping")

    return _parse_config(raw)


def _parse_config(raw: dict) -> Config:
    """Parse raw YAML dict into Config object."""
    output = raw.get("output", {})
    if output is None:
        output = {}

    logging_section = raw.get("logging", {})
    if logging_section is None:
        logging_section = {}

    return Config(
        output_format=output.get("format", "text"),
        include_patch=output.get("include_patch", False),
        log_level=str(logging_section.get("level", "WARNING")).upper(),
        log_format=logging_section.get("format", "console"),
    )


def merge_cli_args(config: Config, **kwargs: Any) -> Config:
    """Merge CLI arguments into configuration.

    CLI args take precedence over config file values; None means "not given".

    Args:
        config: Base configuration.
        **kwargs: CLI arguments (output_format, include_patch, log_level).

    Returns:
        New Config with merged values.
    """
    output_format = config.output_format
    include_patch = config.include_patch
    log_level = config.log_level

    if kwargs.get("output_format") is not None:
        output_format = kwargs["output_format"]

    if kwargs.get("include_patch") is not None:
        include_patch = kwargs["include_patch"]

    if kwargs.get("log_level") is not None:
        log_level = kwargs["log_level"]

    return Config(
        output_format=output_format,
        include_patch=include_patch,
        log_level=log_level,
        log_format=config.log_format,
    )
