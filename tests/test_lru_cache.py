import pytest

from drillbook.lru_cache import LRUCache


def test_worked_example():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) == -1
    cache.put(4, 4)
    assert cache.get(1) == -1
    assert cache.get(3) == 3
    assert cache.get(4) == 4


def test_missing_key_returns_minus_one():
    cache = LRUCache(1)
    assert cache.get(42) == -1


def test_update_existing_key_keeps_size_and_refreshes():
    cache = LRUCache(2)
    cache.put(1, 10)
    cache.put(2, 20)
    cache.put(1, 11)
    assert len(cache) == 2
    cache.put(3, 30)
    assert cache.get(1) == 11
    assert cache.get(2) == -1
    assert cache.get(3) == 30


def test_size_never_exceeds_capacity():
    cache = LRUCache(3)
    for key in range(10):
        cache.put(key, key * 2)
        assert len(cache) <= 3
    assert len(cache) == 3
    assert [cache.get(k) for k in (7, 8, 9)] == [14, 16, 18]


def test_get_refreshes_recency():
    cache = LRUCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.get("a")
    cache.put("c", 3)
    assert "a" in cache
    assert "b" not in cache


def test_str_lists_most_recent_first():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert str(cache) == "Current_size = 2\n2:2<->1:1"
    cache.get(1)
    assert str(cache) == "Current_size = 2\n1:1<->2:2"


@pytest.mark.parametrize("capacity", [0, -3])
def test_non_positive_capacity_rejected(capacity):
    with pytest.raises(ValueError):
        LRUCache(capacity)