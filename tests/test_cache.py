"""
Unit tests for ScanCache
"""

from conftest import make_category
from src.core.cache import ScanCache


def test_miss_then_hit():
    cache = ScanCache()
    assert cache.get("/sources") == (None, False)

    tree = [make_category("Tools")]
    cache.set("/sources", tree)

    assert cache.get("/sources") == (tree, True)
    assert cache.stats()["hits"] == 1
    assert cache.stats()["misses"] == 1


def test_empty_tree_is_a_hit():
    """Test that a cached empty scan is not mistaken for a miss"""
    cache = ScanCache()
    cache.set("/sources", [])
    assert cache.get("/sources") == ([], True)


def test_invalidate():
    cache = ScanCache()
    cache.set("/a", [])
    cache.set("/b", [])

    cache.invalidate("/a")
    assert cache.get("/a")[1] is False
    assert cache.get("/b")[1] is True

    cache.invalidate()
    assert cache.stats()["size"] == 0
