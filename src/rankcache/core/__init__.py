"""Core domain module for rankcache.

This module contains pure Python domain models, port definitions and the
rank-table format. Only the services reach adapters, and only lazily.
"""

from rankcache.core.models import (
    CacheConfig,
    LocalPath,
    RankTable,
    RemoteURL,
    SourceLocation,
    cache_key,
    parse_source,
)
from rankcache.core.parser import dump_rank_table, parse_rank_table
from rankcache.core.ports import CachePort, ProgressCallback, ResourceSet, SourceReader


__all__ = [
    "CacheConfig",
    "CachePort",
    "LocalPath",
    "ProgressCallback",
    "RankTable",
    "RemoteURL",
    "ResourceSet",
    "SourceLocation",
    "SourceReader",
    "cache_key",
    "dump_rank_table",
    "parse_rank_table",
    "parse_source",
]
