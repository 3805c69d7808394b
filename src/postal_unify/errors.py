from __future__ import annotations


class PostalDataError(ValueError):
    """Base error for input that cannot be converted."""

    def __init__(self, message: str, *, source: str = "<stream>", line: int | None = None) -> None:
        self.source = source
        self.line = line
        location = f"{source}:{line}" if line is not None else source
        super().__init__(f"{location}: {message}")


class MalformedInputError(PostalDataError):
    """Undecodable bytes or broken CSV quoting."""


class MalformedRowError(PostalDataError):
    """A row whose column count does not match its schema."""
