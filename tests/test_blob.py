"""Tests for blob handles and resolvers."""

import pytest

from gitdiffparse.diff.blob import (
    NULL_SHA,
    Blob,
    LazyBlobResolver,
    MappingBlobResolver,
    is_null_sha,
)
from gitdiffparse.diff.errors import DiffError, UnresolvableBlob


SHA = "3b18e512dba79e4c8300dd08aeb37f8e728b8dad"


class TestBlob:
    """Tests for Blob handle."""

    def test_identity(self):
        """Blobs compare by id only."""
        assert Blob(id=SHA) == Blob(id=SHA, loader=lambda sha: b"")
        assert Blob(id=SHA).short_id == "3b18e51"

    def test_data_without_loader(self):
        """A handle without a loader cannot produce content."""
        with pytest.raises(UnresolvableBlob) as exc_info:
            Blob(id=SHA).data
        assert exc_info.value.blob_id == SHA

    def test_data_loader_key_error(self):
        """Loader lookup failures surface as UnresolvableBlob."""
        blob = Blob(id=SHA, loader=lambda sha: {}[sha])
        with pytest.raises(UnresolvableBlob):
            blob.data

    def test_data_is_fetched_lazily(self):
        """Content is only loaded when requested."""
        calls = []

        def loader(sha: str) -> bytes:
            calls.append(sha)
            return b"content"

        blob = Blob(id=SHA, loader=loader)
        assert calls == []
        assert blob.data == b"content"
        assert calls == [SHA]


class TestResolvers:
    """Tests for blob resolvers."""

    def test_is_null_sha(self):
        """Only the 40-character zero hash is the sentinel."""
        assert is_null_sha(NULL_SHA)
        assert not is_null_sha("0000000")
        assert not is_null_sha(SHA)

    def test_lazy_resolver(self):
        """Lazy resolver returns identity-only handles."""
        resolver = LazyBlobResolver()
        assert resolver.resolve(NULL_SHA) is None
        assert resolver.resolve(SHA) == Blob(id=SHA)

    def test_mapping_resolver(self):
        """Mapping resolver serves content from its table."""
        resolver = MappingBlobResolver({SHA: b"hello\n"})
        assert resolver.resolve(SHA).data == b"hello\n"
        assert resolver.resolve(NULL_SHA) is None

    def test_mapping_resolver_strict(self):
        """Unknown hashes fail immediately in strict mode."""
        resolver = MappingBlobResolver({})
        with pytest.raises(UnresolvableBlob, match="not present"):
            resolver.resolve(SHA)

    def test_mapping_resolver_lenient(self):
        """Unknown hashes yield content-less handles when not strict."""
        resolver = MappingBlobResolver({}, strict=False)
        blob = resolver.resolve(SHA)
        assert blob == Blob(id=SHA)
        with pytest.raises(UnresolvableBlob):
            blob.data

    def test_unresolvable_is_diff_error(self):
        """UnresolvableBlob shares the package error base."""
        assert issubclass(UnresolvableBlob, DiffError)
