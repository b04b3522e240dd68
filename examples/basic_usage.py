"""Basic rank-table loading example.

This example shows the simplest usage pattern: load a BPE rank table from
a URL. The first call downloads and caches the file; later calls (in this
process or any other) read it from disk.
"""

from pathlib import Path

from rankcache import CacheConfig, RankLoader, load_from_cache


R50K_URL = "https://openaipublic.blob.core.windows.net/encodings/r50k_base.tiktoken"

# Option 1: Module function (recommended for most cases)
# Cache directory comes from TIKTOKEN_CACHE_DIR / DATA_GYM_CACHE_DIR or
# <tempdir>/data-gym-cache, re-read on every call
ranks = load_from_cache(R50K_URL)
print(f"Loaded {len(ranks)} ranks")

# Option 2: Explicit configuration (full control over the cache location)
loader = RankLoader.from_config(CacheConfig(directory=Path("./data/encodings")))
ranks = loader.load(R50K_URL)

# Cache entries are named by the SHA-1 of the source string
print(f"Cached at: {loader.cache.path_for(R50K_URL)}")

# Option 3: No caching at all
ranks = RankLoader.from_config(CacheConfig.disabled()).load(R50K_URL)
