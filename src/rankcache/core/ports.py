"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The core domain
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from pathlib import Path

    from rankcache.core.models import SourceLocation

ProgressCallback = Callable[[int, int], None]


@runtime_checkable
class SourceReader(Protocol):
    """Reads the raw bytes behind a source location (local file, URL)."""

    def read(self, location: SourceLocation) -> bytes:
        """Read the full contents of a source.

        Args:
            location: Where to read from.

        Returns:
            The complete payload.

        Raises:
            NotFoundError: If a local path is missing or unreadable.
            FetchError: If a remote download fails.
        """
        ...


@runtime_checkable
class CachePort(Protocol):
    """Content-addressed byte cache keyed by source identifier."""

    def get_or_fetch(self, identifier: str) -> bytes:
        """Return cached bytes for identifier, fetching and storing on a miss."""
        ...

    def path_for(self, identifier: str) -> Path | None:
        """Return the cache path for identifier, or None if caching is disabled."""
        ...


@runtime_checkable
class ResourceSet(Protocol):
    """Read-only collection of bundled files addressed by path string."""

    def open(self, path: str) -> bytes:
        """Return the bytes of a bundled file.

        Raises:
            NotFoundError: If path is not part of the set.
        """
        ...


@runtime_checkable
class ProgressReporter(Protocol):
    """Reports download progress to the user.

    This protocol defines the contract for progress display adapters.
    The core domain uses this to report progress without depending
    on any specific UI library.
    """

    def start_task(self, name: str, total: int) -> ProgressCallback:
        """Start tracking a download task.

        Args:
            name: Human-readable name for the task (source identifier).
            total: Total bytes to download, 0 if unknown.

        Returns:
            A ProgressCallback to call with (bytes_downloaded, total_bytes).
        """
        ...

    def finish_task(self, name: str) -> None:
        """Mark a task as complete.

        Args:
            name: The task name passed to start_task().
        """
        ...


class NullProgressReporter:
    """A ProgressReporter that produces no output.

    Used as the default when no progress reporting is desired.
    """

    def start_task(self, name: str, total: int) -> ProgressCallback:  # noqa: ARG002
        """Return a no-op callback."""
        return lambda _downloaded, _total: None

    def finish_task(self, name: str) -> None:
        """Do nothing."""
        _ = name  # Unused but required by protocol
