"""Exceptions raised while parsing diff output."""

from typing import Optional


class DiffError(Exception):
    """Base class for all diff errors."""

    pass


class ParseError(DiffError):
    """Error parsing diff content."""

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ) -> None:
        self.message = message
        self.line_number = line_number
        self.line = line
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        if self.line is None:
            return f"{self.message} (line {self.line_number})"
        return f"{self.message} (line {self.line_number}: {self.line!r})"


class MalformedHeader(ParseError):
    """A block header is missing or does not match its pattern."""

    pass


class MissingIndexLine(ParseError):
    """A block requires an index line but none was found."""

    pass


class UnresolvableBlob(DiffError):
    """A blob id could not be resolved to content."""

    def __init__(self, blob_id: str, reason: Optional[str] = None) -> None:
        self.blob_id = blob_id
        self.reason = reason
        message = f"Cannot resolve blob {blob_id}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
