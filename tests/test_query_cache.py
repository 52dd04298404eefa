import pytest

from services.query_cache import QueryCache


class Counter:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.calls


def test_fetch_deduplicates(cache):
    loader = Counter()
    assert cache.fetch(("clients",), loader) == 1
    assert cache.fetch(("clients",), loader) == 1
    assert loader.calls == 1


def test_invalidate_by_prefix(cache):
    cache.fetch(("clients",), lambda: [])
    cache.fetch(("clients", "c1"), lambda: {})
    cache.fetch(("scheduled-workouts", 2025, 3), lambda: [])
    assert cache.invalidate(("clients",)) == 2
    assert ("clients", "c1") not in cache
    assert ("scheduled-workouts", 2025, 3) in cache
    assert len(cache) == 1


def test_invalidated_key_refetches(cache):
    loader = Counter()
    cache.fetch(("clients", "c1"), loader)
    cache.invalidate(("clients",))
    assert cache.fetch(("clients", "c1"), loader) == 2


def test_invalidate_specific_key_leaves_siblings(cache):
    cache.fetch(("clients",), lambda: [])
    cache.fetch(("clients", "c1"), lambda: {})
    cache.fetch(("clients", "c2"), lambda: {})
    assert cache.invalidate(("clients", "c1")) == 1
    assert ("clients", "c2") in cache
    assert ("clients",) in cache


def test_failed_loads_are_not_cached(cache):
    def boom():
        raise RuntimeError("down")

    with pytest.raises(RuntimeError):
        cache.fetch(("dashboard",), boom)
    assert ("dashboard",) not in cache
    assert cache.fetch(("dashboard",), lambda: "ok") == "ok"


def test_clear_forgets_scope(cache):
    loader = Counter()
    cache.fetch(("x",), loader)
    cache.clear()
    assert len(cache) == 0
    assert cache.fetch(("x",), loader) == 2


def test_scopes_do_not_share_answers(cache):
    other = QueryCache(ttl_seconds=cache.ttl_seconds, scope=cache.scope + "-other")
    assert cache.fetch(("clients",), lambda: ["mine"]) == ["mine"]
    assert other.fetch(("clients",), lambda: ["theirs"]) == ["theirs"]
    assert cache.fetch(("clients",), lambda: ["stale"]) == ["mine"]


def test_same_scope_shares_answers_and_invalidation(cache):
    # Two tabs of the same user
    tab = QueryCache(ttl_seconds=cache.ttl_seconds, scope=cache.scope)
    loader = Counter()
    cache.fetch(("clients",), loader)
    assert tab.fetch(("clients",), loader) == 1
    cache.invalidate(("clients",))
    assert ("clients",) not in tab
    assert tab.fetch(("clients",), loader) == 2


def test_clear_leaves_other_scopes(cache):
    other = QueryCache(ttl_seconds=cache.ttl_seconds, scope=cache.scope + "-other")
    other.fetch(("clients",), lambda: ["theirs"])
    cache.fetch(("clients",), lambda: ["mine"])
    cache.clear()
    assert ("clients",) in other
