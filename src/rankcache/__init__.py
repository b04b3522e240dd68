"""rankcache - Cached loading of BPE rank tables for tokenizers.

This library fetches rank files from local paths or HTTP(S) URLs, caches
them on disk under a hash of their source, and parses them into a
``dict[bytes, int]`` mapping tokens to merge ranks.

Example:
    >>> from rankcache import load_from_cache
    >>> ranks = load_from_cache(
    ...     "https://openaipublic.blob.core.windows.net/encodings/r50k_base.tiktoken"
    ... )
    >>> ranks[b"!"]
    0
"""

from rankcache.adapters.cache import FileCache
from rankcache.adapters.resources import (
    DirectoryResources,
    MappingResources,
    PackageResources,
)
from rankcache.adapters.sources import (
    FilesystemReader,
    HttpReader,
    RouterReader,
    create_reader,
)
from rankcache.config import resolve_cache_dir
from rankcache.core.exceptions import (
    CacheReadError,
    CacheWriteError,
    FetchError,
    NotFoundError,
    ParseError,
    RankcacheError,
    SourceError,
)
from rankcache.core.models import (
    CacheConfig,
    LocalPath,
    RankTable,
    RemoteURL,
    SourceLocation,
    cache_key,
    parse_source,
)
from rankcache.core.parser import dump_rank_table, parse_rank_table, write_rank_table
from rankcache.core.ports import (
    CachePort,
    NullProgressReporter,
    ProgressCallback,
    ProgressReporter,
    ResourceSet,
    SourceReader,
)
from rankcache.core.services import RankLoader, load_from_cache, load_from_embedded
from rankcache.progress import RichProgressReporter


__version__ = "0.1.0"

__all__ = [
    "CacheConfig",
    "CachePort",
    "CacheReadError",
    "CacheWriteError",
    "DirectoryResources",
    "FetchError",
    "FileCache",
    "FilesystemReader",
    "HttpReader",
    "LocalPath",
    "MappingResources",
    "NotFoundError",
    "NullProgressReporter",
    "PackageResources",
    "ParseError",
    "ProgressCallback",
    "ProgressReporter",
    "RankLoader",
    "RankTable",
    "RankcacheError",
    "RemoteURL",
    "ResourceSet",
    "RichProgressReporter",
    "RouterReader",
    "SourceError",
    "SourceLocation",
    "SourceReader",
    "__version__",
    "cache_key",
    "create_reader",
    "dump_rank_table",
    "load_from_cache",
    "load_from_embedded",
    "parse_rank_table",
    "parse_source",
    "resolve_cache_dir",
    "write_rank_table",
]
