"""Embedded resource set adapters."""

from rankcache.adapters.resources.bundled import (
    DirectoryResources,
    MappingResources,
    PackageResources,
)


__all__ = ["DirectoryResources", "MappingResources", "PackageResources"]
