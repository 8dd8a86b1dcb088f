"""Tests for package initialization."""


def test_version_accessible():
    """Verify version is accessible from package."""
    from gitdiffparse import __version__

    assert __version__ == "0.1.0"


def test_package_imports():
    """Verify package imports without error."""
    import gitdiffparse
    import gitdiffparse.cli
    import gitdiffparse.core
    import gitdiffparse.diff
    import gitdiffparse.logging
    import gitdiffparse.output

    # If we get here, imports succeeded
    assert gitdiffparse is not None


def test_public_diff_api():
    """Verify the diff package re-exports its entry points."""
    from gitdiffparse.diff import (
        DiffRecord,
        MalformedHeader,
        MissingIndexLine,
        UnresolvableBlob,
        parse_diff,
        parse_quick_diff,
    )

    assert callable(parse_diff)
    assert callable(parse_quick_diff)
    assert DiffRecord.__name__ == "DiffRecord"
    assert issubclass(MalformedHeader, Exception)
    assert issubclass(MissingIndexLine, Exception)
    assert issubclass(UnresolvableBlob, Exception)
