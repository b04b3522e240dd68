"""Source reader adapters."""

from rankcache.adapters.sources.filesystem import FilesystemReader
from rankcache.adapters.sources.http import HttpReader
from rankcache.adapters.sources.router import RouterReader, create_reader


__all__ = ["FilesystemReader", "HttpReader", "RouterReader", "create_reader"]
