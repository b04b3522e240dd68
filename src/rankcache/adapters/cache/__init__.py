"""Cache adapters."""

from rankcache.adapters.cache.file_cache import FileCache


__all__ = ["FileCache"]
