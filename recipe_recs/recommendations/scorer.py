"""
Recommendation scoring.

Each candidate gets five sub-scores in [0, 100], combined with weights that
sum to 1.0:

* tag match         - share of matched tags scaled by their average weight
* cooking time      - 100 when the time bucket is one the user cooks
* cookware          - 100 when the user has used the same cookware
* ingredient match  - same formula as tags, over ingredient names
* servings          - 100 when the servings bucket matches (never explained)
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping

from ..config import DEFAULT_SCORING_CONFIG, ScoringConfig
from ..preferences.aggregator import has_enough_data
from ..preferences.models import PreferenceProfile, Recipe
from ..preferences.normalize import normalize_cooking_time, normalize_servings
from .models import RecipeStats, RecommendationScore

DEFAULT_REASON = "Recommended based on your preferences"


def _weighted_overlap_score(
    names: list[str],
    keys: list[str],
    preferred: dict[str, float],
    normalizer: float,
) -> tuple[float, list[str]]:
    """Score how well ``keys`` (lookup forms of ``names``) hit ``preferred``.

    Returns the sub-score and the matched names in their original spelling.
    """
    if not names or not preferred:
        return 0.0, []

    matched: list[str] = []
    total_weight = 0.0
    for name, key in zip(names, keys):
        weight = preferred.get(key)
        if weight:
            matched.append(name)
            total_weight += weight

    if not matched:
        return 0.0, []

    ratio = len(matched) / max(len(preferred), len(names))
    average_weight = total_weight / len(matched)
    return min(100.0, ratio * 100 * (average_weight / normalizer)), matched


def _tag_score(
    recipe: Recipe, profile: PreferenceProfile, config: ScoringConfig, reasons: list[str]
) -> float:
    tags = recipe.tags or []
    score, matched = _weighted_overlap_score(
        tags, [t.lower() for t in tags], profile.preferred_tags, config.weight_normalizer
    )
    if score > config.reason_threshold:
        reasons.append(f"Matches your interests: {', '.join(matched[:2])}")
    return score


def _cooking_time_score(
    recipe: Recipe, profile: PreferenceProfile, config: ScoringConfig, reasons: list[str]
) -> float:
    if not recipe.cooking_time or not profile.preferred_cooking_times:
        return 0.0
    category = normalize_cooking_time(recipe.cooking_time)
    if category and category in profile.preferred_cooking_times:
        reasons.append("Matches your preferred cooking time")
        return 100.0
    return 0.0


def _cookware_score(
    recipe: Recipe, profile: PreferenceProfile, config: ScoringConfig, reasons: list[str]
) -> float:
    if not recipe.cookware or not profile.preferred_cookware:
        return 0.0
    if recipe.cookware.lower() in profile.preferred_cookware:
        reasons.append(f"Uses your preferred cookware: {recipe.cookware}")
        return 100.0
    return 0.0


def _ingredient_score(
    recipe: Recipe, profile: PreferenceProfile, config: ScoringConfig, reasons: list[str]
) -> float:
    names = [i.name for i in recipe.ingredients or []]
    score, matched = _weighted_overlap_score(
        names,
        [n.lower().strip() for n in names],
        profile.preferred_ingredients,
        config.weight_normalizer,
    )
    if score > config.reason_threshold:
        reasons.append(f"Uses your favorite ingredients: {', '.join(matched[:2])}")
    return score


def _servings_score(
    recipe: Recipe, profile: PreferenceProfile, config: ScoringConfig, reasons: list[str]
) -> float:
    if not recipe.servings or not profile.preferred_servings:
        return 0.0
    category = normalize_servings(recipe.servings)
    if category and category in profile.preferred_servings:
        return 100.0
    return 0.0


def score_recipe(
    recipe: Recipe,
    profile: PreferenceProfile,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> RecommendationScore:
    w = config.weights
    reasons: list[str] = []
    total = 0.0
    total += _tag_score(recipe, profile, config, reasons) * w.tag
    total += _cooking_time_score(recipe, profile, config, reasons) * w.cooking_time
    total += _cookware_score(recipe, profile, config, reasons) * w.cookware
    total += _ingredient_score(recipe, profile, config, reasons) * w.ingredients
    total += _servings_score(recipe, profile, config, reasons) * w.servings

    return RecommendationScore(
        recipe=recipe,
        # float rounding can push a perfect match a hair over 100
        score=min(total, 100.0),
        reasons=reasons[: config.max_reasons],
    )


def sort_by_recommendation(
    recipes: Iterable[Recipe],
    profile: PreferenceProfile,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> list[Recipe]:
    """Return ``recipes`` best match first; equal scores keep their input order."""
    scored = [score_recipe(recipe, profile, config) for recipe in recipes]
    scored.sort(key=lambda s: s.score, reverse=True)
    return [s.recipe for s in scored]


def recommendation_reason(
    recipe: Recipe,
    profile: PreferenceProfile,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> str:
    reasons = score_recipe(recipe, profile, config).reasons
    return reasons[0] if reasons else DEFAULT_REASON


def is_highly_recommended(
    recipe: Recipe,
    profile: PreferenceProfile,
    threshold: float | None = None,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> bool:
    if threshold is None:
        threshold = config.highly_recommended_threshold
    return score_recipe(recipe, profile, config).score >= threshold


def popularity(stats: RecipeStats | None) -> int:
    if stats is None:
        return 0
    return stats.likes + stats.favorites + stats.views + stats.tried


def rank_scored(
    recipes: Iterable[Recipe],
    profile: PreferenceProfile,
    stats: Mapping[str, RecipeStats] | None = None,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> list[RecommendationScore]:
    """
    Personalized ranking, falling back to popularity on cold start.

    Users without enough interactions have no meaningful profile, so their
    candidates are ordered by likes + favorites + views + tried counts.
    Every recipe is scored exactly once; ties keep their input order.
    """
    scored = [score_recipe(recipe, profile, config) for recipe in recipes]
    if has_enough_data(profile, config.aggregation):
        scored.sort(key=lambda s: s.score, reverse=True)
    else:
        stats = stats or {}
        scored.sort(key=lambda s: popularity(stats.get(s.recipe.id)), reverse=True)
    return scored


def rank_recipes(
    recipes: Iterable[Recipe],
    profile: PreferenceProfile,
    stats: Mapping[str, RecipeStats] | None = None,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> list[Recipe]:
    return [s.recipe for s in rank_scored(recipes, profile, stats, config)]
