"""JSON output formatter for gitdiffparse."""

import json

from gitdiffparse import __version__
from gitdiffparse.diff.types import ParsedDiff
from gitdiffparse.output.base import Formatter


class JSONFormatter(Formatter):
    """JSON formatter for machine-readable output."""

    @property
    def name(self) -> str:
        return "json"

    def format(
        self,
        diff: ParsedDiff,
        target: str,
        include_patch: bool = False,
    ) -> str:
        """Format parsed diff records as JSON.

        Args:
            diff: The parsed diff to format.
            target: Where the diff text came from.
            include_patch: Whether to include patch bodies.

        Returns:
            Formatted JSON string.
        """
        output = {
            "version": __version__,
            "target": target,
            "summary": diff.summary,
            "records": [],
        }

        for record in diff:
            record_dict = record.to_dict()
            if not include_patch:
                record_dict.pop("patch_body", None)
            output["records"].append(record_dict)

        return json.dumps(output, indent=2)
