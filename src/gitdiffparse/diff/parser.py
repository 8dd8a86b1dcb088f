"""Parsers for git diff output."""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple, Optional

from gitdiffparse.diff.blob import BlobResolver, LazyBlobResolver
from gitdiffparse.diff.errors import MalformedHeader, MissingIndexLine, ParseError
from gitdiffparse.diff.types import DiffRecord, ParsedDiff
from gitdiffparse.logging import get_logger

logger = get_logger(__name__)


# Regex patterns for parsing
DIFF_GIT_HEADER = re.compile(r"^diff --git a/(.+?) b/(.+)$")
OLD_MODE = re.compile(r"^old mode (\d+)")
NEW_MODE = re.compile(r"^new mode (\d+)")
NEW_FILE_MODE = re.compile(r"^new file mode (.+)$")
DELETED_FILE_MODE = re.compile(r"^deleted file mode (.+)$")
SIMILARITY_INDEX = re.compile(r"^similarity index (.*)%")
INDEX_LINE = re.compile(r"^index ([0-9A-Fa-f]+)\.\.([0-9A-Fa-f]+) ?(.+)?$")


class ChangeMarker(NamedTuple):
    """A line that says what kind of change a block describes."""

    name: str
    pattern: re.Pattern


# Tried in this order; the formats are textually distinct so at most one matches.
CHANGE_MARKERS = (
    ChangeMarker("new", NEW_FILE_MODE),
    ChangeMarker("deleted", DELETED_FILE_MODE),
    ChangeMarker("renamed", SIMILARITY_INDEX),
)


class _LineCursor:
    """Forward-only cursor over the lines of a diff."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = lines
        self._pos = 0

    @property
    def line_number(self) -> int:
        """1-based number of the line under the cursor."""
        return self._pos + 1

    def at_end(self) -> bool:
        return self._pos >= len(self._lines)

    def peek(self) -> Optional[str]:
        if self.at_end():
            return None
        return self._lines[self._pos]

    def advance(self) -> Optional[str]:
        line = self.peek()
        if line is not None:
            self._pos += 1
        return line

    def take(self, pattern: re.Pattern) -> Optional[re.Match]:
        """Consume the next line if it matches pattern."""
        line = self.peek()
        if line is None:
            return None
        match = pattern.match(line)
        if match:
            self._pos += 1
        return match

    def take_until(self, prefix: str) -> list[str]:
        """Consume lines up to (not including) the next one starting with prefix."""
        taken: list[str] = []
        while not self.at_end() and not self._lines[self._pos].startswith(prefix):
            taken.append(self._lines[self._pos])
            self._pos += 1
        return taken


@dataclass
class _BlockHeader:
    """Fields collected from the header lines of one diff block."""

    path_before: str
    path_after: str
    mode_before: Optional[str] = None
    mode_after: Optional[str] = None
    is_new: bool = False
    is_deleted: bool = False
    is_renamed: bool = False
    similarity_index: int = 0


def parse_diff(content: str, resolver: Optional[BlobResolver] = None) -> ParsedDiff:
    """Parse verbose ``git diff`` output.

    Args:
        content: Diff text made of ``diff --git`` blocks.
        resolver: Blob resolver for index hashes. Defaults to a
            LazyBlobResolver that records identity only.

    Returns:
        ParsedDiff with one record per ``diff --git`` block, in input order.

    Raises:
        MalformedHeader: If a block does not start with a valid header.
        MissingIndexLine: If a block lacks its mandatory index line.
        UnresolvableBlob: If the resolver cannot resolve a hash.
    """
    if not content or not content.strip():
        return ParsedDiff(records=())

    if resolver is None:
        resolver = LazyBlobResolver()

    cursor = _LineCursor(_split_lines(content))
    records: list[DiffRecord] = []

    while not cursor.at_end():
        record = _parse_block(cursor, resolver)
        logger.debug(
            "diff_block_parsed",
            path=record.path,
            change_type=record.change_type.value,
            body_lines=len(record.patch_lines()),
        )
        records.append(record)

    return ParsedDiff(records=tuple(records))


def parse_quick_diff(content: str) -> ParsedDiff:
    """Parse name-status output (``<status>\\t<path>`` per line).

    Only the first character of the status is significant: ``A`` marks the
    file as new, ``D`` as deleted, anything else as neither.

    Raises:
        MalformedHeader: If a non-empty line has no tab separator.
    """
    records: list[DiffRecord] = []

    for number, line in enumerate(_split_lines(content), start=1):
        if not line.strip():
            continue
        parts = line.split("\t")
        if len(parts) < 2:
            raise MalformedHeader("Expected '<status>\\t<path>'", number, line)
        # Renames and copies list a destination as a third field; it is not kept.
        path = parts[1]
        code = parts[0].strip()[:1]
        records.append(
            DiffRecord(
                path_before=path,
                path_after=path,
                is_new=code == "A",
                is_deleted=code == "D",
            )
        )

    logger.debug("quick_diff_parsed", records=len(records))
    return ParsedDiff(records=tuple(records))


def parse_diff_file(
    path: str,
    resolver: Optional[BlobResolver] = None,
    quick: bool = False,
) -> ParsedDiff:
    """Parse diff output stored in a file.

    Args:
        path: Path to the diff/patch file.
        resolver: Blob resolver passed to parse_diff.
        quick: Parse the file as name-status output instead.

    Returns:
        ParsedDiff of the file's records.

    Raises:
        ParseError: If the file cannot be read or parsed.
        FileNotFoundError: If the file does not exist.
    """
    filepath = Path(path)
    if not filepath.exists():
        raise FileNotFoundError(f"Diff file not found: {path}")

    try:
        content = filepath.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        try:
            content = filepath.read_text(encoding="latin-1")
        except OSError as e:
            raise ParseError(f"Cannot read diff file: {e}") from e
    except OSError as e:
        raise ParseError(f"Cannot read diff file: {e}") from e

    if quick:
        return parse_quick_diff(content)
    return parse_diff(content, resolver)


def _split_lines(content: str) -> list[str]:
    """Split on newlines, dropping trailing empty lines."""
    lines = content.split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def _parse_block(cursor: _LineCursor, resolver: BlobResolver) -> DiffRecord:
    """Parse one ``diff --git`` block starting at the cursor."""
    header = _expect_header(cursor)
    has_mode_pair = _take_mode_pair(cursor, header)

    next_line = cursor.peek()
    if next_line is None or next_line.startswith("diff --git"):
        return _mode_only_record(header, None)

    marker = _take_change_marker(cursor, header)

    index_match = cursor.take(INDEX_LINE)
    if index_match is None:
        if has_mode_pair and marker is None:
            # Mode-only block with stray lines before the next header.
            return _mode_only_record(header, _collect_body(cursor))
        raise MissingIndexLine(
            "Expected 'index <hash>..<hash>' line",
            cursor.line_number,
            cursor.peek(),
        )

    sha_before, sha_after, index_mode = index_match.groups()
    if index_mode:
        header.mode_after = index_mode.strip()

    return DiffRecord.from_hashes(
        path_before=header.path_before,
        path_after=header.path_after,
        sha_before=sha_before,
        sha_after=sha_after,
        resolver=resolver,
        mode_before=header.mode_before,
        mode_after=header.mode_after,
        is_new=header.is_new,
        is_deleted=header.is_deleted,
        is_renamed=header.is_renamed,
        similarity_index=header.similarity_index,
        patch_body=_collect_body(cursor),
    )


def _expect_header(cursor: _LineCursor) -> _BlockHeader:
    line_number = cursor.line_number
    line = cursor.peek()
    match = cursor.take(DIFF_GIT_HEADER)
    if match is None:
        raise MalformedHeader("Expected 'diff --git a/<path> b/<path>'", line_number, line)
    return _BlockHeader(match.group(1), match.group(2))


def _take_mode_pair(cursor: _LineCursor, header: _BlockHeader) -> bool:
    """Consume an ``old mode``/``new mode`` pair if one follows the header."""
    old_match = cursor.take(OLD_MODE)
    if old_match is None:
        return False

    new_match = cursor.take(NEW_MODE)
    if new_match is None:
        raise MalformedHeader(
            "Expected 'new mode' after 'old mode'",
            cursor.line_number,
            cursor.peek(),
        )

    header.mode_before = old_match.group(1)
    header.mode_after = new_match.group(1)
    return True


def _take_change_marker(cursor: _LineCursor, header: _BlockHeader) -> Optional[str]:
    """Consume a new/deleted/similarity line, returning the marker name."""
    line_number = cursor.line_number
    for marker in CHANGE_MARKERS:
        match = cursor.take(marker.pattern)
        if match is None:
            continue

        if marker.name == "new":
            header.is_new = True
            header.mode_before = None
            header.mode_after = match.group(1)
        elif marker.name == "deleted":
            header.is_deleted = True
            header.mode_before = match.group(1)
            header.mode_after = None
        else:
            header.is_renamed = True
            header.similarity_index = _parse_similarity(match.group(1), line_number)
            # rename from / rename to (or copy from / copy to)
            cursor.advance()
            cursor.advance()
        return marker.name

    return None


def _parse_similarity(value: str, line_number: int) -> int:
    if not value.isdigit() or not value.isascii():
        raise MalformedHeader(f"Similarity index is not a number: {value!r}", line_number)
    similarity = int(value)
    if similarity > 100:
        raise MalformedHeader(f"Similarity index out of range: {similarity}", line_number)
    return similarity


def _collect_body(cursor: _LineCursor) -> Optional[str]:
    body_lines = cursor.take_until("diff")
    if not body_lines:
        return None
    return "\n".join(body_lines)


def _mode_only_record(header: _BlockHeader, body: Optional[str]) -> DiffRecord:
    return DiffRecord(
        path_before=header.path_before,
        path_after=header.path_after,
        mode_before=header.mode_before,
        mode_after=header.mode_after,
        patch_body=body,
    )
