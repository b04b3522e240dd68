"""RouterReader composite adapter for dispatching on source location type."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rankcache.core.models import LocalPath, RemoteURL, parse_source


if TYPE_CHECKING:
    import requests

    from rankcache.core.models import SourceLocation
    from rankcache.core.ports import ProgressReporter, SourceReader


class RouterReader:
    """Source reader that routes to backends based on location type.

    Implements SourceReader by delegating to type-specific adapters.
    """

    def __init__(self, backends: dict[type, SourceReader]) -> None:
        """Initialize with location-type-to-adapter mapping.

        Args:
            backends: Mapping of SourceLocation class (LocalPath, RemoteURL)
                to the reader that handles it.
        """
        self._backends = backends

    def _get_backend(self, location: SourceLocation) -> SourceReader:
        """Get the reader registered for a location's type."""
        try:
            return self._backends[type(location)]
        except KeyError:
            raise ValueError(
                f"No source reader registered for {type(location).__name__}"
            ) from None

    def read(self, location: SourceLocation) -> bytes:
        """Read a source by delegating to the appropriate backend."""
        return self._get_backend(location).read(location)

    def read_identifier(self, identifier: str) -> bytes:
        """Resolve a path or URL string, then read it."""
        return self.read(parse_source(identifier))


def create_reader(
    session: requests.Session | None = None,
    progress: ProgressReporter | None = None,
    timeout: float | None = None,
) -> RouterReader:
    """Create a RouterReader with default backends.

    Args:
        session: Optional requests session for HTTP downloads.
        progress: Optional progress reporter for HTTP downloads.
        timeout: Optional HTTP timeout in seconds.

    Returns:
        RouterReader configured with FilesystemReader and HttpReader.
    """
    from rankcache.adapters.sources import FilesystemReader, HttpReader

    return RouterReader(
        backends={
            LocalPath: FilesystemReader(),
            RemoteURL: HttpReader(session=session, progress=progress, timeout=timeout),
        }
    )
