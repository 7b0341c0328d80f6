from __future__ import annotations

import hashlib
import json
import time
from collections.abc import Iterable
from typing import Any

from ..config import (
    DEFAULT_AGGREGATION_CONFIG,
    DEFAULT_CACHE_CONFIG,
    AggregationConfig,
    CacheConfig,
)
from .aggregator import build_profile
from .models import PreferenceProfile, Recipe

_cache: dict[str, dict[str, Any]] = {}
_hits: int = 0
_misses: int = 0
_evictions: int = 0


def _make_key(
    liked_ids: set[str],
    favorited_ids: set[str],
    tried_ids: set[str],
    catalog_version: str,
    config: AggregationConfig,
) -> str:
    normalized = json.dumps(
        {
            "liked": sorted(liked_ids),
            "favorited": sorted(favorited_ids),
            "tried": sorted(tried_ids),
            "catalog_version": catalog_version,
            "weights": [config.weights.tried, config.weights.favorited, config.weights.liked],
        },
        sort_keys=True,
    )
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


def _evict_expired(now: float, ttl_seconds: float) -> None:
    global _evictions
    expired = [k for k, e in _cache.items() if now - e["created_at"] >= ttl_seconds]
    for key in expired:
        del _cache[key]
    _evictions += len(expired)


def get_or_build_profile(
    liked_ids: Iterable[str],
    favorited_recipes: Iterable[Recipe],
    tried_ids: Iterable[str],
    catalog: Iterable[Recipe],
    catalog_version: str,
    config: AggregationConfig = DEFAULT_AGGREGATION_CONFIG,
    cache_config: CacheConfig = DEFAULT_CACHE_CONFIG,
) -> PreferenceProfile:
    """
    Memoized ``build_profile``.

    The caller owns ``catalog_version`` and must change it whenever the
    catalog changes; the catalog itself is not hashed. Expired entries for
    any user are dropped whenever a new profile is stored.
    """
    global _hits, _misses
    liked = set(liked_ids)
    favorited = list(favorited_recipes)
    tried = set(tried_ids)
    key = _make_key(liked, {r.id for r in favorited}, tried, catalog_version, config)

    now = time.time()
    entry = _cache.get(key)
    if entry and now - entry["created_at"] < cache_config.ttl_seconds:
        _hits += 1
        return entry["value"]
    _misses += 1

    profile = build_profile(liked, favorited, tried, catalog, config=config)
    _evict_expired(now, cache_config.ttl_seconds)
    _cache[key] = {"value": profile, "created_at": now}
    return profile


def get_cache_stats() -> dict:
    lookups = _hits + _misses
    return {
        "size": len(_cache),
        "hits": _hits,
        "misses": _misses,
        "evictions": _evictions,
        "hit_rate": round(_hits / lookups * 100, 1) if lookups else 0.0,
    }


def clear_cache() -> None:
    global _hits, _misses, _evictions
    _cache.clear()
    _hits = _misses = _evictions = 0
