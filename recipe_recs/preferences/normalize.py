"""
Heuristic bucketing of free-text recipe fields.

Cooking times and servings are typed by hand ("30 minutes", "4 servings",
"< 15 min") so they are classified by substring checks, evaluated in a fixed
order where the first matching bucket wins. The checks are deliberately plain
substring tests: "150 minutes" classifies as quick because it contains "15".
"""
from __future__ import annotations

CUISINE_TAGS: list[str] = [
    "italian", "chinese", "japanese", "thai", "indian", "mexican",
    "french", "mediterranean", "american", "asian", "korean", "vietnamese",
    "greek", "spanish", "middle eastern", "latin", "caribbean",
]

_COOKING_TIME_BUCKETS: list[tuple[str, tuple[str, ...]]] = [
    ("quick", ("< 15", "15", "10", "quick")),
    ("medium", ("20", "25", "30", "medium")),
    ("long", ("35", "40", "45", "50", "60", ">", "long")),
]

_SERVINGS_BUCKETS: list[tuple[str, tuple[str, ...]]] = [
    ("1-2", ("1", "2")),
    ("3-4", ("3", "4")),
    ("5+", ("5", "6", "+")),
]


def _classify(text: str | int | float | None, buckets: list[tuple[str, tuple[str, ...]]]) -> str:
    if text is None or text == "":
        return ""
    lowered = str(text).lower()
    for label, needles in buckets:
        if any(needle in lowered for needle in needles):
            return label
    return ""


def normalize_cooking_time(text: str | int | float | None) -> str:
    """Return ``quick``, ``medium``, ``long`` or ``""`` when unclassifiable."""
    return _classify(text, _COOKING_TIME_BUCKETS)


def normalize_servings(text: str | int | float | None) -> str:
    """Return ``1-2``, ``3-4``, ``5+`` or ``""`` when unclassifiable."""
    return _classify(text, _SERVINGS_BUCKETS)


def extract_cuisines(tags: list[str] | None) -> list[str]:
    cuisines: list[str] = []
    for tag in tags or []:
        lower_tag = tag.lower()
        for cuisine in CUISINE_TAGS:
            if cuisine in lower_tag and cuisine not in cuisines:
                cuisines.append(cuisine)
    return cuisines
