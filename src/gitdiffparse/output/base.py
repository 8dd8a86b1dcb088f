"""Base formatter interface for gitdiffparse."""

from abc import ABC, abstractmethod

from gitdiffparse.diff.types import ParsedDiff


class Formatter(ABC):
    """Abstract base class for output formatters."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for this formatter."""
        pass

    @abstractmethod
    def format(
        self,
        diff: ParsedDiff,
        target: str,
        include_patch: bool = False,
    ) -> str:
        """Format parsed diff records.

        Args:
            diff: The parsed diff to format.
            target: Where the diff text came from (file path or "-").
            include_patch: Whether to include patch bodies.

        Returns:
            Formatted output as a string.
        """
        pass
