"""
Recommendation scoring.

Responsibilities:
- Score candidate recipes against a preference profile.
- Explain the strongest matches in short human-readable reasons.
- Rank candidates, falling back to popularity for cold-start users.
"""
from .models import RecipeStats, RecommendationScore
from .scorer import (
    DEFAULT_REASON,
    is_highly_recommended,
    popularity,
    rank_recipes,
    rank_scored,
    recommendation_reason,
    score_recipe,
    sort_by_recommendation,
)

__all__ = [
    "DEFAULT_REASON",
    "RecipeStats",
    "RecommendationScore",
    "is_highly_recommended",
    "popularity",
    "rank_recipes",
    "rank_scored",
    "recommendation_reason",
    "score_recipe",
    "sort_by_recommendation",
]
