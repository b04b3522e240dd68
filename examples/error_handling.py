"""Error handling patterns with recovery hints.

This example demonstrates how to handle common errors and use
the recovery_hint property to provide actionable guidance.
"""

from rankcache import (
    CacheConfig,
    CacheWriteError,
    FetchError,
    NotFoundError,
    ParseError,
    RankcacheError,
    RankLoader,
    RankTable,
)


loader = RankLoader.from_env(timeout=30.0)


# Pattern 1: Handle missing local files
def load_or_none(source: str) -> RankTable | None:
    """Load a rank table, returning None if a local file doesn't exist."""
    try:
        return loader.load(source)
    except NotFoundError as e:
        print(f"Rank file not found: {e.source}")
        print(f"Hint: {e.recovery_hint}")
        return None


# Pattern 2: Retry downloads yourself; the library never retries
def load_with_retries(url: str, attempts: int = 3) -> RankTable:
    """Load a URL, retrying transport failures but not 4xx responses."""
    for attempt in range(1, attempts + 1):
        try:
            return loader.load(url)
        except FetchError as e:
            if e.status_code is not None and e.status_code < 500:
                raise
            if attempt == attempts:
                raise
            print(f"Attempt {attempt} failed: {e}")
    raise AssertionError("unreachable")


# Pattern 3: Fall back to uncached loading when the cache dir is read-only
def load_ignoring_cache_failures(source: str) -> RankTable:
    """Load through the cache, or directly if the cache cannot be written."""
    try:
        return loader.load(source)
    except CacheWriteError as e:
        print(f"Cache not writable ({e.path}); loading without cache")
        return RankLoader.from_config(CacheConfig.disabled()).load(source)


# Pattern 4: Catch-all for any library error
def load_safe(source: str) -> RankTable | None:
    """Load a rank table with comprehensive error handling."""
    try:
        return loader.load(source)
    except ParseError as e:
        print(f"Malformed rank file at line {e.line_number}: {e.line!r}")
        return None
    except RankcacheError as e:
        # Catch any other library errors
        print(f"Unexpected error: {e}")
        print(f"Hint: {e.recovery_hint}")
        return None


# Example usage
if __name__ == "__main__":
    load_or_none("./does-not-exist.tiktoken")
