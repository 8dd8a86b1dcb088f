"""Blob handles and the resolvers that produce them."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Optional

from gitdiffparse.diff.errors import UnresolvableBlob

# Hash git prints for the missing side of an added or deleted file.
NULL_SHA = "0" * 40


def is_null_sha(sha: Optional[str]) -> bool:
    """Check whether a hash is the all-zero "no content" sentinel."""
    return sha == NULL_SHA


@dataclass(frozen=True)
class Blob:
    """Handle to a content object identified by its hash.

    Content is fetched on first access of ``data`` through ``loader``; the
    handle itself only carries identity, so records can share it freely.
    """

    id: str
    loader: Optional[Callable[[str], bytes]] = field(default=None, compare=False, repr=False)

    @property
    def data(self) -> bytes:
        """Return the blob content.

        Raises:
            UnresolvableBlob: If no loader is attached or the loader fails.
        """
        if self.loader is None:
            raise UnresolvableBlob(self.id, "no content source attached")
        try:
            return self.loader(self.id)
        except UnresolvableBlob:
            raise
        except (KeyError, OSError) as e:
            raise UnresolvableBlob(self.id, str(e)) from e

    @property
    def short_id(self) -> str:
        """Abbreviated hash, as git prints it by default."""
        return self.id[:7]


class BlobResolver(ABC):
    """Maps a content hash to a blob handle."""

    def resolve(self, sha: str) -> Optional[Blob]:
        """Resolve a hash, returning None for the all-zero sentinel.

        Raises:
            UnresolvableBlob: If the hash cannot be resolved.
        """
        if is_null_sha(sha):
            return None
        return self._resolve(sha)

    @abstractmethod
    def _resolve(self, sha: str) -> Blob:
        """Resolve a non-null hash."""
        pass


class LazyBlobResolver(BlobResolver):
    """Resolver that only records identity; content is never fetched."""

    def _resolve(self, sha: str) -> Blob:
        return Blob(id=sha)


class MappingBlobResolver(BlobResolver):
    """Resolver backed by an in-memory table of blob contents.

    Args:
        objects: Mapping of hash to content bytes.
        strict: Raise UnresolvableBlob for unknown hashes instead of
            returning a content-less handle.
    """

    def __init__(self, objects: Mapping[str, bytes], strict: bool = True) -> None:
        self._objects = objects
        self.strict = strict

    def _resolve(self, sha: str) -> Blob:
        if sha in self._objects:
            return Blob(id=sha, loader=self._load)
        if self.strict:
            raise UnresolvableBlob(sha, "not present in object table")
        return Blob(id=sha)

    def _load(self, sha: str) -> bytes:
        return self._objects[sha]
