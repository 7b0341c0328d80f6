from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


@dataclass(frozen=True)
class InteractionWeights:
    """Weight each interaction signal adds to a recipe's contribution."""

    tried: float = 2.0
    favorited: float = 1.5
    liked: float = 1.0

    def __post_init__(self) -> None:
        for name in ("tried", "favorited", "liked"):
            if getattr(self, name) <= 0:
                raise ValueError(f"Interaction weight '{name}' must be positive")


@dataclass(frozen=True)
class ScoringWeights:
    tag: float = 0.40
    cooking_time: float = 0.20
    cookware: float = 0.15
    ingredients: float = 0.15
    servings: float = 0.10

    def __post_init__(self) -> None:
        for name in ("tag", "cooking_time", "cookware", "ingredients", "servings"):
            if getattr(self, name) < 0:
                raise ValueError(f"Scoring weight '{name}' must not be negative")
        total = self.tag + self.cooking_time + self.cookware + self.ingredients + self.servings
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"Scoring weights must sum to 1.0, got {total}")


@dataclass(frozen=True)
class AggregationConfig:
    weights: InteractionWeights = field(default_factory=InteractionWeights)
    min_interactions: int = 1


@dataclass(frozen=True)
class ScoringConfig:
    weights: ScoringWeights = field(default_factory=ScoringWeights)
    reason_threshold: float = 20.0
    weight_normalizer: float = 2.0
    highly_recommended_threshold: float = float(
        os.getenv("RECIPE_RECS_HIGHLY_RECOMMENDED_THRESHOLD", "30")
    )
    max_reasons: int = 3
    aggregation: AggregationConfig = field(default_factory=AggregationConfig)

    def __post_init__(self) -> None:
        if self.weight_normalizer <= 0:
            raise ValueError("weight_normalizer must be positive")


@dataclass(frozen=True)
class CacheConfig:
    ttl_seconds: float = float(os.getenv("RECIPE_RECS_PROFILE_CACHE_TTL", "300"))


DEFAULT_AGGREGATION_CONFIG = AggregationConfig()
DEFAULT_SCORING_CONFIG = ScoringConfig()
DEFAULT_CACHE_CONFIG = CacheConfig()
