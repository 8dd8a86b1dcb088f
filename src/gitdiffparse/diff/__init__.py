"""Diff parsing module for gitdiffparse."""

from gitdiffparse.diff.blob import (
    NULL_SHA,
    Blob,
    BlobResolver,
    LazyBlobResolver,
    MappingBlobResolver,
)
from gitdiffparse.diff.errors import (
    DiffError,
    MalformedHeader,
    MissingIndexLine,
    ParseError,
    UnresolvableBlob,
)
from gitdiffparse.diff.parser import parse_diff, parse_diff_file, parse_quick_diff
from gitdiffparse.diff.types import ChangeType, DiffRecord, ParsedDiff

__all__ = [
    "NULL_SHA",
    "Blob",
    "BlobResolver",
    "LazyBlobResolver",
    "MappingBlobResolver",
    "ChangeType",
    "DiffRecord",
    "ParsedDiff",
    "parse_diff",
    "parse_quick_diff",
    "parse_diff_file",
    "DiffError",
    "ParseError",
    "MalformedHeader",
    "MissingIndexLine",
    "UnresolvableBlob",
]
