"""Core domain services for rankcache."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rankcache.core.models import CacheConfig
from rankcache.core.parser import parse_rank_table


if TYPE_CHECKING:
    from rankcache.core.models import RankTable
    from rankcache.core.ports import CachePort, ProgressReporter, ResourceSet


logger = logging.getLogger(__name__)


class RankLoader:
    """Loads rank tables through the cache, or straight from a resource set."""

    def __init__(self, cache: CachePort) -> None:
        self._cache = cache

    @classmethod
    def from_env(
        cls,
        progress: ProgressReporter | None = None,
        timeout: float | None = None,
    ) -> RankLoader:
        """Create a RankLoader with environment configuration and default adapters.

        Args:
            progress: Optional progress reporter for HTTP downloads.
            timeout: Optional HTTP timeout in seconds.

        Returns:
            RankLoader backed by FileCache and the default source router.
        """
        return cls.from_config(CacheConfig.from_env(), progress=progress, timeout=timeout)

    @classmethod
    def from_config(
        cls,
        config: CacheConfig,
        progress: ProgressReporter | None = None,
        timeout: float | None = None,
    ) -> RankLoader:
        """Create a RankLoader for an explicit cache configuration."""
        from rankcache.adapters.cache import FileCache
        from rankcache.adapters.sources import create_reader

        reader = create_reader(progress=progress, timeout=timeout)
        return cls(cache=FileCache(config, reader))

    @property
    def cache(self) -> CachePort:
        """The cache this loader reads through."""
        return self._cache

    def load(self, identifier: str) -> RankTable:
        """Load a rank table from a path or URL, using the cache.

        Args:
            identifier: Local path or http(s):// URL.

        Returns:
            Freshly parsed mapping from token bytes to rank.

        Raises:
            NotFoundError: If a local source is missing.
            FetchError: If a download fails.
            CacheReadError: If the cached copy cannot be read.
            CacheWriteError: If the fetched file cannot be cached.
            ParseError: If the contents are malformed.
        """
        contents = self._cache.get_or_fetch(identifier)
        ranks = parse_rank_table(contents)
        logger.debug("Loaded %d ranks from %s", len(ranks), identifier)
        return ranks

    def load_embedded(self, resources: ResourceSet, path: str) -> RankTable:
        """Load a rank table from a bundled resource, bypassing cache and network.

        Args:
            resources: Read-only resource collection.
            path: Resource path within the collection.

        Returns:
            Freshly parsed mapping from token bytes to rank.

        Raises:
            NotFoundError: If path is absent from resources.
            ParseError: If the contents are malformed.
        """
        return load_from_embedded(resources, path)


def load_from_cache(identifier: str, config: CacheConfig | None = None) -> RankTable:
    """Load a rank table from a path or URL through the on-disk cache.

    Args:
        identifier: Local path or http(s):// URL.
        config: Cache configuration. If None, resolved from the environment
            on every call.

    Returns:
        Freshly parsed mapping from token bytes to rank.
    """
    if config is None:
        config = CacheConfig.from_env()
    return RankLoader.from_config(config).load(identifier)


def load_from_embedded(resources: ResourceSet, path: str) -> RankTable:
    """Load a rank table from a bundled resource set without caching.

    Args:
        resources: Read-only resource collection.
        path: Resource path within the collection.

    Returns:
        Freshly parsed mapping from token bytes to rank.

    Raises:
        NotFoundError: If path is absent from resources.
        ParseError: If the contents are malformed.
    """
    ranks = parse_rank_table(resources.open(path))
    logger.debug("Loaded %d ranks from embedded resource %s", len(ranks), path)
    return ranks
