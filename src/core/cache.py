"""
In-memory cache for scanned catalog trees, keyed by Sources directory, with TTL support.
"""
from typing import Dict, List, Optional, Tuple
from cachetools import TTLCache

from src.core.models import Category


class ScanCache:
    def __init__(self, maxsize: int = 8, ttl: int = 300):
        """
        Initialize the cache with a maximum size and TTL in seconds.

        Args:
            maxsize: Maximum number of Sources directories to remember
            ttl: Seconds before a scanned tree is considered stale (default: 5 minutes)
        """
        self.cache = TTLCache(maxsize=maxsize, ttl=ttl)
        self.cache_hits = 0
        self.cache_misses = 0

    def get(self, sources_path: str) -> Tuple[Optional[List[Category]], bool]:
        """
        Get the cached tree for a Sources directory.

        Returns:
            Tuple of (categories, is_hit) where is_hit is True if the path was found.
        """
        try:
            value = self.cache[sources_path]
            self.cache_hits += 1
            return value, True
        except KeyError:
            self.cache_misses += 1
            return None, False

    def set(self, sources_path: str, categories: List[Category]) -> None:
        self.cache[sources_path] = categories

    def invalidate(self, sources_path: Optional[str] = None) -> None:
        """Drop one Sources directory, or everything when no path is given."""
        if sources_path is None:
            self.cache.clear()
        else:
            self.cache.pop(sources_path, None)

    def stats(self) -> Dict[str, int]:
        return {
            'hits': self.cache_hits,
            'misses': self.cache_misses,
            'size': len(self.cache),
            'max_size': self.cache.maxsize,
            'ttl': self.cache.ttl
        }
