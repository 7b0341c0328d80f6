from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Ingredient(BaseModel):
    name: str
    amount: float | None = None
    unit: str | None = None


class Recipe(BaseModel):
    """A catalog recipe as supplied by the caller. Only the fields used for
    matching are modelled; anything else on the payload is ignored."""

    # The app sends camelCase ("cookingTime"); snake_case is accepted too.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., min_length=1)
    title: str = ""
    tags: list[str] | None = None
    cooking_time: str | None = None
    cookware: str | None = None
    ingredients: list[Ingredient] | None = None
    servings: str | None = None

    @field_validator("cooking_time", "servings", mode="before")
    @classmethod
    def _stringify_numbers(cls, value):
        # Servings and times are free text, but some sources store plain numbers.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class PreferenceProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    preferred_tags: dict[str, float] = Field(default_factory=dict)
    preferred_cooking_times: list[str] = Field(default_factory=list)
    preferred_cookware: list[str] = Field(default_factory=list)
    preferred_ingredients: dict[str, float] = Field(default_factory=dict)
    preferred_servings: list[str] = Field(default_factory=list)
    preferred_cuisines: list[str] = Field(default_factory=list)
    total_interactions: int = Field(default=0, ge=0)
