"""Loading rank tables shipped inside your own package.

Rank files bundled with an application never need the network or the
cache. Any object with an open(path) -> bytes method works; three are
provided.
"""

from rankcache import (
    DirectoryResources,
    MappingResources,
    NotFoundError,
    PackageResources,
    dump_rank_table,
    load_from_embedded,
)


# In-memory resources, handy in tests
resources = MappingResources(
    {"encodings/tiny.tiktoken": dump_rank_table({b"a": 0, b"b": 1, b"ab": 2})}
)
ranks = load_from_embedded(resources, "encodings/tiny.tiktoken")
print(ranks)  # {b'a': 0, b'b': 1, b'ab': 2}

# Files installed as package data, e.g. mypackage/encodings/*.tiktoken
bundled = PackageResources("mypackage")

# A read-only directory tree
local = DirectoryResources("./assets")


def load_bundled_or_none(name: str) -> dict[bytes, int] | None:
    """Return a bundled rank table, or None if it was not shipped."""
    try:
        return load_from_embedded(bundled, f"encodings/{name}.tiktoken")
    except NotFoundError:
        return None
