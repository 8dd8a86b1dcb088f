"""Diff data structures for gitdiffparse."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from gitdiffparse.diff.blob import Blob, BlobResolver, LazyBlobResolver


class ChangeType(Enum):
    """Kind of change a record describes."""

    ADDED = "added"
    DELETED = "deleted"
    RENAMED = "renamed"
    MODE_CHANGED = "mode_changed"
    MODIFIED = "modified"


@dataclass(frozen=True)
class DiffRecord:
    """Changes to a single file.

    Every field has a default so sparse records can be built by naming only
    the fields they carry. Use ``from_hashes`` to build a record from the
    index line of a full diff.
    """

    path_before: str
    path_after: str
    blob_before: Optional[Blob] = None
    blob_after: Optional[Blob] = None
    mode_before: Optional[str] = None
    mode_after: Optional[str] = None
    is_new: bool = False
    is_deleted: bool = False
    is_renamed: bool = False
    similarity_index: int = 0
    patch_body: Optional[str] = None

    def __post_init__(self) -> None:
        if not 0 <= self.similarity_index <= 100:
            raise ValueError(
                f"similarity_index must be between 0 and 100, got {self.similarity_index}"
            )

        # A record that carries any blob is hash-backed: a missing side means
        # the file did not exist there.
        if self.blob_before is not None or self.blob_after is not None:
            object.__setattr__(self, "is_new", self.is_new or self.blob_before is None)
            object.__setattr__(self, "is_deleted", self.is_deleted or self.blob_after is None)

    @classmethod
    def from_hashes(
        cls,
        path_before: str,
        path_after: str,
        sha_before: str,
        sha_after: str,
        resolver: Optional[BlobResolver] = None,
        mode_before: Optional[str] = None,
        mode_after: Optional[str] = None,
        is_new: bool = False,
        is_deleted: bool = False,
        is_renamed: bool = False,
        similarity_index: int = 0,
        patch_body: Optional[str] = None,
    ) -> "DiffRecord":
        """Build a record from the two hashes of an index line.

        A side whose hash is the all-zero sentinel has no blob, which marks
        the file as new (before side) or deleted (after side) regardless of
        the explicit flags.

        Raises:
            UnresolvableBlob: If the resolver cannot resolve a hash.
        """
        if resolver is None:
            resolver = LazyBlobResolver()
        blob_before = resolver.resolve(sha_before)
        blob_after = resolver.resolve(sha_after)
        return cls(
            path_before=path_before,
            path_after=path_after,
            blob_before=blob_before,
            blob_after=blob_after,
            mode_before=mode_before,
            mode_after=mode_after,
            is_new=is_new or blob_before is None,
            is_deleted=is_deleted or blob_after is None,
            is_renamed=is_renamed,
            similarity_index=similarity_index,
            patch_body=patch_body,
        )

    @property
    def path(self) -> str:
        """Return the current path (path_after unless the file was deleted)."""
        if self.is_deleted:
            return self.path_before
        return self.path_after

    @property
    def has_mode_change(self) -> bool:
        """Check if the file mode changed without the file being added or removed."""
        return (
            self.mode_before is not None
            and self.mode_after is not None
            and self.mode_before != self.mode_after
        )

    @property
    def change_type(self) -> ChangeType:
        """Classify the record (added, deleted, renamed, mode change, modified)."""
        if self.is_new:
            return ChangeType.ADDED
        if self.is_deleted:
            return ChangeType.DELETED
        if self.is_renamed:
            return ChangeType.RENAMED
        if self.has_mode_change and self.patch_body is None:
            return ChangeType.MODE_CHANGED
        return ChangeType.MODIFIED

    def patch_lines(self) -> tuple[str, ...]:
        """Return the patch body split into lines (empty if there is no body)."""
        if self.patch_body is None:
            return ()
        return tuple(self.patch_body.split("\n"))

    def to_dict(self) -> dict:
        """Convert record to dictionary."""
        return {
            "path_before": self.path_before,
            "path_after": self.path_after,
            "blob_before": self.blob_before.id if self.blob_before else None,
            "blob_after": self.blob_after.id if self.blob_after else None,
            "mode_before": self.mode_before,
            "mode_after": self.mode_after,
            "is_new": self.is_new,
            "is_deleted": self.is_deleted,
            "is_renamed": self.is_renamed,
            "similarity_index": self.similarity_index,
            "change_type": self.change_type.value,
            "patch_body": self.patch_body,
        }


@dataclass(frozen=True)
class ParsedDiff:
    """An ordered sequence of records, in the order the diff listed them."""

    records: tuple[DiffRecord, ...]

    def __iter__(self) -> Iterator[DiffRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, index: int) -> DiffRecord:
        return self.records[index]

    def get_record(self, path: str) -> Optional[DiffRecord]:
        """Get the first record touching path (matches path_before or path_after)."""
        for record in self.records:
            if record.path_after == path or record.path_before == path:
                return record
        return None

    @property
    def changed_paths(self) -> list[str]:
        """List of all changed file paths."""
        return [record.path for record in self.records]

    @property
    def added(self) -> list[DiffRecord]:
        return [record for record in self.records if record.is_new]

    @property
    def deleted(self) -> list[DiffRecord]:
        return [record for record in self.records if record.is_deleted]

    @property
    def renamed(self) -> list[DiffRecord]:
        return [record for record in self.records if record.is_renamed]

    @property
    def summary(self) -> dict:
        """Generate summary statistics."""
        by_change_type: dict[str, int] = {}
        for record in self.records:
            kind = record.change_type.value
            by_change_type[kind] = by_change_type.get(kind, 0) + 1

        return {
            "total": len(self.records),
            "by_change_type": by_change_type,
        }
