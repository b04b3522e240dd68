"""Configuration utilities for rankcache.

This module resolves the cache directory from the process environment.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Mapping


CACHE_DIR_ENV = "TIKTOKEN_CACHE_DIR"
LEGACY_CACHE_DIR_ENV = "DATA_GYM_CACHE_DIR"
DEFAULT_CACHE_SUBDIR = "data-gym-cache"


def default_cache_dir() -> Path:
    """Platform default: a subfolder of the system temp directory."""
    return Path(tempfile.gettempdir()) / DEFAULT_CACHE_SUBDIR


def resolve_cache_dir(environ: Mapping[str, str] | None = None) -> Path | None:
    """Resolve the cache directory, or None if caching is disabled.

    Checks in priority order:
    1. TIKTOKEN_CACHE_DIR - Primary override
    2. DATA_GYM_CACHE_DIR - Legacy override
    3. <tempdir>/data-gym-cache - Platform default

    A variable that is present but empty disables caching. It does not fall
    through to the next candidate.

    Args:
        environ: Environment mapping to read. If None, uses os.environ.

    Returns:
        The cache directory, or None when caching is disabled.

    Example:
        >>> resolve_cache_dir({"TIKTOKEN_CACHE_DIR": "/srv/cache"})
        PosixPath('/srv/cache')
        >>> resolve_cache_dir({"TIKTOKEN_CACHE_DIR": ""}) is None
        True
    """
    env = os.environ if environ is None else environ

    for name in (CACHE_DIR_ENV, LEGACY_CACHE_DIR_ENV):
        if name in env:
            value = env[name]
            return Path(value) if value else None

    return default_cache_dir()
