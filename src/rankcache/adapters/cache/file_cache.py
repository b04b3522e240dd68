"""File-based cache adapter implementing CachePort."""

from __future__ import annotations

import contextlib
import logging
import os
import uuid
from typing import TYPE_CHECKING

from rankcache.core.exceptions import CacheReadError, CacheWriteError
from rankcache.core.models import cache_key, parse_source


if TYPE_CHECKING:
    from pathlib import Path

    from rankcache.core.models import CacheConfig
    from rankcache.core.ports import SourceReader


logger = logging.getLogger(__name__)

_TMP_SUFFIX = ".tmp"


class FileCache:
    """Flat, content-addressed local file cache.

    Each entry is a file named by the SHA-1 hex digest of its source
    identifier. Entries are populated by writing a uniquely named temporary
    file next to the final path and renaming it into place, so readers never
    see a partially written entry. There are no metadata sidecars, no
    staleness checks and no eviction.

    Attributes:
        config: Cache location; a config without a directory disables caching.
    """

    def __init__(self, config: CacheConfig, reader: SourceReader) -> None:
        """Initialize the cache.

        Args:
            config: Where cached files are stored.
            reader: Reader used to fetch sources on a cache miss.
        """
        self.config = config
        self._reader = reader

    def path_for(self, identifier: str) -> Path | None:
        """Get the final cache path for a source, or None if caching is disabled."""
        if self.config.directory is None:
            return None
        return self.config.directory / cache_key(identifier)

    def contains(self, identifier: str) -> bool:
        """Whether a completed cache entry exists for identifier."""
        path = self.path_for(identifier)
        return path is not None and path.exists()

    def get_or_fetch(self, identifier: str) -> bytes:
        """Return the bytes for a source, reading through the cache.

        On a hit the cached file is returned as-is and the reader is never
        called. On a miss the source is read and stored before returning.

        Args:
            identifier: Local path or http(s):// URL.

        Returns:
            The source contents.

        Raises:
            CacheReadError: If an existing entry cannot be read.
            NotFoundError: If a local source is missing (miss path only).
            FetchError: If a download fails (miss path only).
            CacheWriteError: If the fetched bytes cannot be stored. The bytes
                are discarded and not returned.
        """
        location = parse_source(identifier)
        path = self.path_for(identifier)
        if path is None:
            logger.debug("Caching disabled, reading %s directly", identifier)
            return self._reader.read(location)

        if path.exists():
            logger.debug("Cache hit for %s at %s", identifier, path)
            try:
                return path.read_bytes()
            except OSError as e:
                raise CacheReadError(
                    f"Failed to read cache entry {path}",
                    path=path,
                    cause=e,
                ) from e

        logger.debug("Cache miss for %s", identifier)
        contents = self._reader.read(location)
        self._store(path, contents)
        return contents

    def _store(self, path: Path, contents: bytes) -> None:
        """Atomically write contents to path via a temporary sibling file."""
        tmp_path = path.with_name(f"{path.name}.{uuid.uuid4().hex}{_TMP_SUFFIX}")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(contents)
            os.replace(tmp_path, path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise CacheWriteError(
                f"Failed to write cache entry {path}",
                path=path,
                cause=e,
            ) from e
        logger.debug("Cached %d bytes at %s", len(contents), path)

    def statistics(self) -> dict[str, int]:
        """Get cache statistics for completed entries.

        In-flight temporary files are not counted.

        Returns:
            Dictionary with 'total_size' (bytes) and 'file_count' (number of files).
        """
        total_size = 0
        file_count = 0

        directory = self.config.directory
        if directory is None or not directory.is_dir():
            return {"total_size": 0, "file_count": 0}

        for file_path in directory.iterdir():
            if file_path.name.endswith(_TMP_SUFFIX) or not file_path.is_file():
                continue
            with contextlib.suppress(OSError):
                total_size += file_path.stat().st_size
                file_count += 1

        return {"total_size": total_size, "file_count": file_count}
