"""Filesystem source adapter for local rank files."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rankcache.core.exceptions import NotFoundError


if TYPE_CHECKING:
    from rankcache.core.models import LocalPath


class FilesystemReader:
    """Source reader for local filesystem paths.

    Implements the SourceReader protocol for LocalPath locations.
    """

    def read(self, location: LocalPath) -> bytes:
        """Read a local file fully.

        Args:
            location: Path to the file (absolute or relative to cwd).

        Returns:
            The file contents.

        Raises:
            NotFoundError: If the file does not exist or cannot be read.
        """
        source = location.path
        try:
            return Path(source).read_bytes()
        except FileNotFoundError as e:
            raise NotFoundError(
                f"File not found: {source}",
                source=source,
                cause=e,
            ) from e
        except OSError as e:
            raise NotFoundError(
                f"File not readable: {source} ({e.strerror or e})",
                source=source,
                cause=e,
            ) from e
