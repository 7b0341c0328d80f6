from recipe_recs.preferences.normalize import (
    extract_cuisines,
    normalize_cooking_time,
    normalize_servings,
)


def test_cooking_time_buckets():
    assert normalize_cooking_time("< 15 min") == "quick"
    assert normalize_cooking_time("10 minutes") == "quick"
    assert normalize_cooking_time("Quick weeknight") == "quick"
    assert normalize_cooking_time("30 minutes") == "medium"
    assert normalize_cooking_time("Medium") == "medium"
    assert normalize_cooking_time("45 minutes") == "long"
    assert normalize_cooking_time("> 1 hour") == "long"
    assert normalize_cooking_time("LONG braise") == "long"


def test_cooking_time_first_bucket_wins():
    # "15-30 minutes" hits both quick and medium; quick is checked first
    assert normalize_cooking_time("15-30 minutes") == "quick"


def test_cooking_time_keeps_substring_heuristic():
    assert normalize_cooking_time("150 minutes") == "quick"
    assert normalize_cooking_time("120 minutes") == "medium"


def test_cooking_time_unclassified():
    assert normalize_cooking_time("") == ""
    assert normalize_cooking_time(None) == ""
    assert normalize_cooking_time("overnight") == ""


def test_servings_buckets():
    assert normalize_servings("2 servings") == "1-2"
    assert normalize_servings("4 servings") == "3-4"
    assert normalize_servings("6 people") == "5+"
    assert normalize_servings("Serves 8+") == "5+"
    assert normalize_servings(3) == "3-4"


def test_servings_unclassified():
    assert normalize_servings("") == ""
    assert normalize_servings(None) == ""
    assert normalize_servings("a crowd") == ""
    assert normalize_servings("8") == ""


def test_extract_cuisines_by_substring():
    cuisines = extract_cuisines(["North Indian", "Spicy", "Asian Fusion", "indian"])
    assert cuisines == ["indian", "asian"]


def test_extract_cuisines_matches_several_entries_in_one_tag():
    assert extract_cuisines(["Latin American"]) == ["american", "latin"]


def test_extract_cuisines_empty():
    assert extract_cuisines([]) == []
    assert extract_cuisines(None) == []
