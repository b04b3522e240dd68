"""Domain exceptions for rankcache.

All library errors inherit from RankcacheError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pathlib import Path


class RankcacheError(Exception):
    """Base class for all rankcache exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class SourceError(RankcacheError):
    """Base class for errors reading a source (local file, URL, resource).

    Attributes:
        source: The path/URL that caused the error.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        source: str,
        cause: Exception | None = None,
    ) -> None:
        self.source = source
        self.cause = cause
        super().__init__(message)


class NotFoundError(SourceError):
    """Raised when a local file or embedded resource is missing or unreadable."""

    @property
    def recovery_hint(self) -> str:
        """Suggest verifying the path."""
        return f"Verify the source path exists and is readable: {self.source}"


class FetchError(SourceError):
    """Raised when an HTTP(S) download fails.

    Attributes:
        status_code: HTTP status of the response, if one was received.
    """

    def __init__(
        self,
        message: str,
        source: str,
        cause: Exception | None = None,
        status_code: int | None = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(message, source=source, cause=cause)

    @property
    def recovery_hint(self) -> str:
        """Suggest checking the URL or connectivity."""
        if self.status_code is not None:
            return f"Server answered {self.status_code}; check the URL: {self.source}"
        return "Check network connectivity and retry"


class CacheWriteError(RankcacheError):
    """Raised when a fetched file cannot be written into the cache.

    Attributes:
        path: The cache path that could not be written.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        path: Path,
        cause: Exception | None = None,
    ) -> None:
        self.path = path
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest fixing permissions or disabling the cache."""
        return (
            f"Check that {self.path.parent} is writable, or set "
            "TIKTOKEN_CACHE_DIR to an empty value to disable caching"
        )


class CacheReadError(RankcacheError):
    """Raised when an existing cache entry cannot be read.

    Attributes:
        path: The cache entry that could not be read.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        path: Path,
        cause: Exception | None = None,
    ) -> None:
        self.path = path
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest removing the broken entry."""
        return f"Delete {self.path} and load the source again"


class ParseError(RankcacheError):
    """Raised when rank-table text is malformed.

    Attributes:
        line_number: 1-based line number of the bad record (None if the
            whole payload could not be decoded).
        line: Content of the bad line.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        line: str = "",
        cause: Exception | None = None,
    ) -> None:
        self.line_number = line_number
        self.line = line
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Point at the offending line."""
        if self.line_number is not None:
            return f"Each line must be '<base64-token> <rank>'; check line {self.line_number}"
        return "Rank tables must be UTF-8 text"
