"""Rendered image cache

Provides the abstract cache interface and the in-memory TTL implementation.
"""

from radarchart.cache.base import ImageCacheBase
from radarchart.cache.memory_cache import (
    MemoryImageCache,
    CacheEntry,
    DEFAULT_TTL_SECONDS,
    DEFAULT_SWEEP_INTERVAL_SECONDS,
)

__all__ = [
    "ImageCacheBase",
    "MemoryImageCache",
    "CacheEntry",
    "DEFAULT_TTL_SECONDS",
    "DEFAULT_SWEEP_INTERVAL_SECONDS",
]
