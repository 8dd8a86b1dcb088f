"""Output formatters for gitdiffparse."""

from gitdiffparse.output.base import Formatter
from gitdiffparse.output.json import JSONFormatter
from gitdiffparse.output.text import TextFormatter

_FORMATTERS: dict[str, type[Formatter]] = {
    "text": TextFormatter,
    "json": JSONFormatter,
}


def get_formatter(name: str) -> Formatter:
    """Get a formatter by name.

    Args:
        name: Formatter name (text, json).

    Returns:
        Formatter instance.

    Raises:
        ValueError: If formatter name is unknown.
    """
    if name not in _FORMATTERS:
        raise ValueError(f"Unknown formatter: {name}")
    return _FORMATTERS[name]()


__all__ = [
    "Formatter",
    "TextFormatter",
    "JSONFormatter",
    "get_formatter",
]
