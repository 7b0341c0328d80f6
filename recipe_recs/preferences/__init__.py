"""
Preference aggregation.

Responsibilities:
- Model the recipes supplied by the surrounding app.
- Bucket free-text cooking times and servings into fixed categories.
- Fold liked / favorited / tried interactions into a weighted profile.
"""
from .aggregator import build_profile, has_enough_data, top_ingredients, top_tags
from .models import Ingredient, PreferenceProfile, Recipe
from .normalize import CUISINE_TAGS, extract_cuisines, normalize_cooking_time, normalize_servings

__all__ = [
    "CUISINE_TAGS",
    "Ingredient",
    "PreferenceProfile",
    "Recipe",
    "build_profile",
    "extract_cuisines",
    "has_enough_data",
    "normalize_cooking_time",
    "normalize_servings",
    "top_ingredients",
    "top_tags",
]
