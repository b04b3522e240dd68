"""Core domain models for rankcache.

These models are pure Python dataclasses with no I/O dependencies.
They describe where a rank table comes from and where it is cached.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Self

from rankcache.core.exceptions import NotFoundError


if TYPE_CHECKING:
    from collections.abc import Mapping


RankTable = dict[bytes, int]

_REMOTE_PREFIXES = ("http://", "https://")


@dataclass(frozen=True, slots=True)
class LocalPath:
    """A source read from the local filesystem.

    Attributes:
        path: Filesystem path exactly as the caller supplied it.
    """

    path: str

    @property
    def identifier(self) -> str:
        """The original source identifier."""
        return self.path


@dataclass(frozen=True, slots=True)
class RemoteURL:
    """A source downloaded over HTTP(S).

    Attributes:
        url: The http:// or https:// URL.
    """

    url: str

    @property
    def identifier(self) -> str:
        """The original source identifier."""
        return self.url


SourceLocation = LocalPath | RemoteURL


def parse_source(identifier: str) -> SourceLocation:
    """Resolve a source identifier into a SourceLocation.

    Only identifiers starting with ``http://`` or ``https://`` are remote.
    Everything else, including other URI schemes, is a local path.

    Args:
        identifier: Filesystem path or HTTP(S) URL.

    Returns:
        RemoteURL for HTTP(S) identifiers, LocalPath otherwise.

    Raises:
        NotFoundError: If identifier is empty. An empty path names no file.

    Example:
        >>> parse_source("https://example.com/r50k_base.tiktoken")
        RemoteURL(url='https://example.com/r50k_base.tiktoken')
        >>> parse_source("/data/cl100k_base.tiktoken")
        LocalPath(path='/data/cl100k_base.tiktoken')
    """
    if not identifier:
        raise NotFoundError("Source identifier cannot be empty", source=identifier)
    if identifier.startswith(_REMOTE_PREFIXES):
        return RemoteURL(identifier)
    return LocalPath(identifier)


def cache_key(identifier: str) -> str:
    """Derive the cache filename for a source identifier.

    The key is the SHA-1 hex digest of the UTF-8 identifier: 40 lowercase
    hex characters, stable across processes and platforms.

    Example:
        >>> len(cache_key("https://example.com/a.tiktoken"))
        40
    """
    return hashlib.sha1(identifier.encode("utf-8")).hexdigest()


@dataclass(frozen=True, slots=True)
class CacheConfig:
    """Where cached rank files live.

    Attributes:
        directory: Cache directory, or None to disable caching.
    """

    directory: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether cache reads and writes happen at all."""
        return self.directory is not None

    @classmethod
    def disabled(cls) -> Self:
        """Return a config with caching turned off."""
        return cls(directory=None)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Resolve the cache directory from the environment.

        Priority: TIKTOKEN_CACHE_DIR, then DATA_GYM_CACHE_DIR, then
        ``<tempdir>/data-gym-cache``. A variable that is set but empty
        disables caching.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            The resolved CacheConfig.
        """
        from rankcache.config import resolve_cache_dir

        return cls(directory=resolve_cache_dir(environ))
