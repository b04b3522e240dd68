"""Read-only resource sets for rank tables shipped alongside code."""

from __future__ import annotations

from importlib import resources
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from rankcache.core.exceptions import NotFoundError


if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import ModuleType


def _split_resource_path(path: str) -> tuple[str, ...]:
    """Split a '/'-separated relative path, rejecting anything that escapes."""
    pure = PurePosixPath(path)
    if pure.is_absolute() or ".." in pure.parts or not pure.parts:
        return ()
    return pure.parts


class MappingResources:
    """In-memory resource set backed by a path -> bytes mapping."""

    def __init__(self, files: Mapping[str, bytes]) -> None:
        self._files = dict(files)

    def open(self, path: str) -> bytes:
        """Return the bytes stored under path."""
        try:
            return self._files[path]
        except KeyError:
            raise NotFoundError(f"Resource not found: {path}", source=path) from None


class PackageResources:
    """Resource set backed by data files inside an importable package.

    Example:
        ranks = load_from_embedded(PackageResources("mypkg.encodings"), "r50k.tiktoken")
    """

    def __init__(self, package: str | ModuleType) -> None:
        self._package = package

    def open(self, path: str) -> bytes:
        """Return the bytes of a file bundled in the package."""
        parts = _split_resource_path(path)
        if not parts:
            raise NotFoundError(f"Resource not found: {path}", source=path)
        try:
            return resources.files(self._package).joinpath(*parts).read_bytes()
        except (ModuleNotFoundError, OSError) as e:
            raise NotFoundError(
                f"Resource not found: {path}",
                source=path,
                cause=e,
            ) from e


class DirectoryResources:
    """Resource set backed by a directory tree, read-only.

    Paths are '/'-separated and relative to root. Paths that would leave
    root are reported as missing.
    """

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def open(self, path: str) -> bytes:
        """Return the bytes of root/path."""
        parts = _split_resource_path(path)
        if not parts:
            raise NotFoundError(f"Resource not found: {path}", source=path)
        try:
            return self.root.joinpath(*parts).read_bytes()
        except OSError as e:
            raise NotFoundError(
                f"Resource not found: {path}",
                source=path,
                cause=e,
            ) from e
