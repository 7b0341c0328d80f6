from __future__ import annotations

from unittest.mock import patch

from recipe_recs.preferences.aggregator import build_profile
from recipe_recs.preferences.cache import clear_cache, get_cache_stats, get_or_build_profile
from recipe_recs.preferences.models import Recipe

CATALOG = [
    Recipe(id="1", tags=["Indian", "Spicy"], cooking_time="30 minutes"),
    Recipe(id="2", tags=["Western"], cookware="Grill"),
]


def test_cache_miss_then_hit():
    clear_cache()
    first = get_or_build_profile(["1"], [], ["2"], CATALOG, "v1")
    second = get_or_build_profile(["1"], [], ["2"], CATALOG, "v1")

    stats = get_cache_stats()
    assert stats["misses"] == 1
    assert stats["hits"] == 1
    assert stats["hit_rate"] == 50.0
    assert second is first


def test_cached_profile_matches_uncached_build():
    clear_cache()
    cached = get_or_build_profile(["1"], [CATALOG[1]], [], CATALOG, "v1")

    assert cached == build_profile(["1"], [CATALOG[1]], [], CATALOG)


def test_cache_key_ignores_id_order():
    clear_cache()
    get_or_build_profile(["1", "2"], [], [], CATALOG, "v1")
    get_or_build_profile(["2", "1"], [], [], CATALOG, "v1")

    assert get_cache_stats()["hits"] == 1


def test_catalog_version_change_misses():
    clear_cache()
    get_or_build_profile(["1"], [], [], CATALOG, "v1")
    get_or_build_profile(["1"], [], [], CATALOG, "v2")

    stats = get_cache_stats()
    assert stats["misses"] == 2
    assert stats["hits"] == 0
    assert stats["size"] == 2


def test_expired_entry_is_rebuilt():
    clear_cache()
    with patch("recipe_recs.preferences.cache.time.time", return_value=1000.0):
        get_or_build_profile(["1"], [], [], CATALOG, "v1")
    with patch("recipe_recs.preferences.cache.time.time", return_value=1000.0 + 10_000):
        get_or_build_profile(["1"], [], [], CATALOG, "v1")

    stats = get_cache_stats()
    assert stats["misses"] == 2
    assert stats["size"] == 1


def test_clear_cache_resets_stats():
    get_or_build_profile(["1"], [], [], CATALOG, "v1")
    clear_cache()

    assert get_cache_stats() == {"size": 0, "hits": 0, "misses": 0, "evictions": 0, "hit_rate": 0.0}


def test_storing_a_profile_evicts_other_expired_entries():
    clear_cache()
    with patch("recipe_recs.preferences.cache.time.time", return_value=1000.0):
        get_or_build_profile(["1"], [], [], CATALOG, "v1")
        get_or_build_profile(["2"], [], [], CATALOG, "v1")
    with patch("recipe_recs.preferences.cache.time.time", return_value=1000.0 + 10_000):
        get_or_build_profile([], [], ["1"], CATALOG, "v1")

    stats = get_cache_stats()
    assert stats["size"] == 1
    assert stats["evictions"] == 2


def test_fresh_entries_survive_eviction():
    clear_cache()
    with patch("recipe_recs.preferences.cache.time.time", return_value=1000.0):
        get_or_build_profile(["1"], [], [], CATALOG, "v1")
    with patch("recipe_recs.preferences.cache.time.time", return_value=1010.0):
        get_or_build_profile(["2"], [], [], CATALOG, "v1")
        get_or_build_profile(["1"], [], [], CATALOG, "v1")

    stats = get_cache_stats()
    assert stats["size"] == 2
    assert stats["evictions"] == 0
    assert stats["hits"] == 1
