from __future__ import annotations

from fastapi import FastAPI

from .config import DEFAULT_SCORING_CONFIG
from .preferences.aggregator import build_profile, has_enough_data, top_ingredients, top_tags
from .preferences.cache import get_cache_stats, get_or_build_profile
from .preferences.models import PreferenceProfile
from .recommendations.models import (
    InteractionPayload,
    ProfileRequest,
    ProfileResponse,
    RankedRecipe,
    RankRequest,
    RankResponse,
)
from .recommendations.scorer import DEFAULT_REASON, rank_scored

app = FastAPI(title="Recipe Recommendation API", version="1.0.0")


def _profile_for(body: InteractionPayload) -> PreferenceProfile:
    if body.catalog_version:
        return get_or_build_profile(
            body.liked_ids,
            body.favorited_recipes,
            body.tried_ids,
            body.catalog,
            body.catalog_version,
        )
    return build_profile(body.liked_ids, body.favorited_recipes, body.tried_ids, body.catalog)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/profile", response_model=ProfileResponse)
def profile(body: ProfileRequest) -> ProfileResponse:
    prefs = _profile_for(body)
    return ProfileResponse(
        profile=prefs,
        has_enough_data=has_enough_data(prefs),
        top_tags=top_tags(prefs, body.top_n),
        top_ingredients=top_ingredients(prefs, body.top_n),
    )


@app.post("/recommendations", response_model=RankResponse)
def recommendations(body: RankRequest) -> RankResponse:
    prefs = _profile_for(body)
    candidates = body.candidates if body.candidates is not None else body.catalog
    personalized = has_enough_data(prefs)

    ranked = rank_scored(candidates, prefs, body.stats)
    if body.limit:
        ranked = ranked[: body.limit]

    items: list[RankedRecipe] = []
    for scored in ranked:
        items.append(RankedRecipe(
            recipe=scored.recipe,
            score=round(scored.score, 4),
            reason=scored.reasons[0] if scored.reasons else DEFAULT_REASON,
            highly_recommended=scored.score >= DEFAULT_SCORING_CONFIG.highly_recommended_threshold,
        ))

    return RankResponse(
        recommendations=items,
        total_candidates=len(candidates),
        personalized=personalized,
    )


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_cache_stats()
