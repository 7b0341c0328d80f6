from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..preferences.models import PreferenceProfile, Recipe


class RecommendationScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    recipe: Recipe
    score: float = Field(..., ge=0.0, le=100.0)
    reasons: list[str] = Field(default_factory=list)


class RecipeStats(BaseModel):
    likes: int = Field(default=0, ge=0)
    favorites: int = Field(default=0, ge=0)
    views: int = Field(default=0, ge=0)
    tried: int = Field(default=0, ge=0)


class InteractionPayload(BaseModel):
    liked_ids: list[str] = Field(default_factory=list)
    favorited_recipes: list[Recipe] = Field(default_factory=list)
    tried_ids: list[str] = Field(default_factory=list)
    catalog: list[Recipe] = Field(default_factory=list)
    catalog_version: str | None = Field(
        default=None,
        description="Opaque catalog revision; when set, built profiles are memoized",
    )


class ProfileRequest(InteractionPayload):
    top_n: int = Field(default=10, ge=1, le=50)


class ProfileResponse(BaseModel):
    profile: PreferenceProfile
    has_enough_data: bool
    top_tags: list[str]
    top_ingredients: list[str]


class RankRequest(InteractionPayload):
    candidates: list[Recipe] | None = Field(
        default=None, description="Recipes to rank; defaults to the catalog"
    )
    stats: dict[str, RecipeStats] = Field(
        default_factory=dict, description="Popularity counters used on cold start"
    )
    limit: int | None = Field(default=None, ge=1, le=200)


class RankedRecipe(BaseModel):
    recipe: Recipe
    score: float
    reason: str
    highly_recommended: bool


class RankResponse(BaseModel):
    recommendations: list[RankedRecipe]
    total_candidates: int
    personalized: bool
