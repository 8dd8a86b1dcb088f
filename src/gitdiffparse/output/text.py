"""Text output formatter for gitdiffparse."""

from gitdiffparse.diff.types import ChangeType, DiffRecord, ParsedDiff
from gitdiffparse.output.base import Formatter


# Status letters as git prints them in --name-status output
STATUS_LETTERS = {
    ChangeType.ADDED: "A",
    ChangeType.DELETED: "D",
    ChangeType.RENAMED: "R",
    ChangeType.MODE_CHANGED: "M",
    ChangeType.MODIFIED: "M",
}


class TextFormatter(Formatter):
    """Human-readable text formatter for terminal output."""

    @property
    def name(self) -> str:
        return "text"

    def format(
        self,
        diff: ParsedDiff,
        target: str,
        include_patch: bool = False,
    ) -> str:
        """Format parsed diff records as name-status style text.

        Args:
            diff: The parsed diff to format.
            target: Where the diff text came from.
            include_patch: Whether to include patch bodies.

        Returns:
            Formatted text output.
        """
        lines: list[str] = [f"Target: {target}"]

        if not diff.records:
            lines.append("No changes.")
            return "\n".join(lines)

        lines.append(f"{len(diff)} changed file(s)")
        lines.append("")

        for record in diff:
            lines.append(self._format_record(record))
            if include_patch and record.patch_body is not None:
                lines.extend(f"    {line}" for line in record.patch_lines())

        return "\n".join(lines)

    def _format_record(self, record: DiffRecord) -> str:
        """Format a single record as one status line."""
        status = STATUS_LETTERS[record.change_type]
        if record.change_type is ChangeType.RENAMED:
            status = f"{status}{record.similarity_index:03d}"
            path = f"{record.path_before} -> {record.path_after}"
        else:
            path = record.path

        line = f"{status:<5}{path}"
        if record.has_mode_change:
            line += f" ({record.mode_before} -> {record.mode_after})"
        elif record.is_new and record.mode_after:
            line += f" ({record.mode_after})"
        return line
