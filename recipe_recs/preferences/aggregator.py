from __future__ import annotations

import logging
from collections.abc import Iterable

from ..config import DEFAULT_AGGREGATION_CONFIG, AggregationConfig
from .models import PreferenceProfile, Recipe
from .normalize import extract_cuisines, normalize_cooking_time, normalize_servings

logger = logging.getLogger(__name__)


def _add_unique(values: list[str], value: str) -> None:
    if value and value not in values:
        values.append(value)


def build_profile(
    liked_ids: Iterable[str],
    favorited_recipes: Iterable[Recipe],
    tried_ids: Iterable[str],
    catalog: Iterable[Recipe],
    config: AggregationConfig = DEFAULT_AGGREGATION_CONFIG,
) -> PreferenceProfile:
    """
    Aggregate a user's interactions into a weighted preference profile.

    Every recipe touched by at least one signal contributes the sum of the
    weights of all its signals to each of its tags and ingredients. IDs that
    are not in the catalog still count towards ``total_interactions`` but
    contribute nothing else.
    """
    liked = set(liked_ids)
    favorited = {r.id for r in favorited_recipes}
    tried = set(tried_ids)
    interacted = liked | favorited | tried

    weights = config.weights
    preferred_tags: dict[str, float] = {}
    preferred_ingredients: dict[str, float] = {}
    cooking_times: list[str] = []
    cookware: list[str] = []
    servings: list[str] = []
    cuisines: list[str] = []

    resolved: set[str] = set()
    for recipe in catalog:
        if recipe.id not in interacted:
            continue
        resolved.add(recipe.id)

        recipe_weight = 0.0
        if recipe.id in tried:
            recipe_weight += weights.tried
        if recipe.id in favorited:
            recipe_weight += weights.favorited
        if recipe.id in liked:
            recipe_weight += weights.liked

        for tag in recipe.tags or []:
            key = tag.lower()
            preferred_tags[key] = preferred_tags.get(key, 0.0) + recipe_weight

        for ingredient in recipe.ingredients or []:
            key = ingredient.name.lower().strip()
            preferred_ingredients[key] = preferred_ingredients.get(key, 0.0) + recipe_weight

        _add_unique(cooking_times, normalize_cooking_time(recipe.cooking_time))
        if recipe.cookware:
            _add_unique(cookware, recipe.cookware.lower())
        _add_unique(servings, normalize_servings(recipe.servings))
        for cuisine in extract_cuisines(recipe.tags):
            _add_unique(cuisines, cuisine)

    missing = len(interacted - resolved)
    if missing:
        logger.debug("Dropped %d interacted recipe ids not present in the catalog", missing)
    logger.debug(
        "Built preference profile: %d interactions, %d tags, %d ingredients",
        len(interacted),
        len(preferred_tags),
        len(preferred_ingredients),
    )

    return PreferenceProfile(
        preferred_tags=preferred_tags,
        preferred_cooking_times=cooking_times,
        preferred_cookware=cookware,
        preferred_ingredients=preferred_ingredients,
        preferred_servings=servings,
        preferred_cuisines=cuisines,
        total_interactions=len(interacted),
    )


def has_enough_data(
    profile: PreferenceProfile,
    config: AggregationConfig = DEFAULT_AGGREGATION_CONFIG,
) -> bool:
    """True once the user has interacted with enough recipes to personalize."""
    return profile.total_interactions >= config.min_interactions


def _top(weighted: dict[str, float], n: int) -> list[str]:
    # sorted() is stable, so equal weights keep insertion order
    ranked = sorted(weighted.items(), key=lambda item: item[1], reverse=True)
    return [name for name, _ in ranked[: max(n, 0)]]


def top_tags(profile: PreferenceProfile, n: int = 10) -> list[str]:
    return _top(profile.preferred_tags, n)


def top_ingredients(profile: PreferenceProfile, n: int = 10) -> list[str]:
    return _top(profile.preferred_ingredients, n)
