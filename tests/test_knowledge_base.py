"""Tests for the food knowledge base."""

import pytest

from athlete_nutrition.domain.food_categories import FOOD_CATEGORIES, FoodCategory
from athlete_nutrition.domain.models import QualityTier
from athlete_nutrition.services.knowledge_base import (
    KnowledgeBaseError,
    build_knowledge_base,
    load_knowledge_base,
)


def test_lookup_category_is_case_insensitive(knowledge_base) -> None:
    assert knowledge_base.lookup_category("Salmon") is QualityTier.EXCELLENT
    assert knowledge_base.lookup_category("milk") is QualityTier.GOOD
    assert knowledge_base.lookup_category("  BAGEL ") is QualityTier.FAIR
    assert knowledge_base.lookup_category("pizza") is QualityTier.POOR


def test_lookup_category_requires_exact_keyword(knowledge_base) -> None:
    assert knowledge_base.lookup_category("grilled") is None
    assert knowledge_base.lookup_category("spaghetti") is None


def test_all_keywords_covers_every_tier(knowledge_base) -> None:
    keywords = knowledge_base.all_keywords()

    assert {"grilled chicken", "rice", "bagel", "chips"} <= keywords
    assert len(keywords) == sum(len(c.keywords) for c in FOOD_CATEGORIES)


def test_search_returns_substring_matches_in_order(knowledge_base) -> None:
    assert knowledge_base.search("chicken") == ["grilled chicken", "chicken"]
    assert knowledge_base.search("BERR") == [
        "berries",
        "nordic berries",
        "lingonberry",
        "blueberry",
    ]


def test_search_empty_query_returns_nothing(knowledge_base) -> None:
    assert knowledge_base.search("") == []
    assert knowledge_base.search("   ") == []


def test_matches_uses_substring_containment(knowledge_base) -> None:
    matches = knowledge_base.matches("A Grilled Chicken Sandwich")

    assert matches == [
        ("grilled chicken", QualityTier.EXCELLENT),
        ("chicken", QualityTier.GOOD),
        ("sandwich", QualityTier.GOOD),
    ]


def test_duplicate_keyword_across_tiers_fails_to_load() -> None:
    categories = (
        FoodCategory(name="good", keywords=("milk",), description=""),
        FoodCategory(name="poor", keywords=("Milk",), description=""),
    )

    with pytest.raises(KnowledgeBaseError, match="milk"):
        build_knowledge_base(categories, "test")


def test_repeated_keyword_in_one_tier_fails_to_load() -> None:
    categories = (
        FoodCategory(name="excellent", keywords=("salmon", " Salmon"), description=""),
    )

    with pytest.raises(KnowledgeBaseError, match="listed twice"):
        build_knowledge_base(categories, "test")


def test_unknown_tier_fails_to_load() -> None:
    categories = (FoodCategory(name="great", keywords=("kale",), description=""),)

    with pytest.raises(KnowledgeBaseError, match="great"):
        build_knowledge_base(categories, "test")


def test_empty_keyword_fails_to_load() -> None:
    categories = (FoodCategory(name="good", keywords=("  ",), description=""),)

    with pytest.raises(KnowledgeBaseError):
        build_knowledge_base(categories, "test")


def test_load_knowledge_base_loads_once() -> None:
    first = load_knowledge_base()
    second = load_knowledge_base()

    assert first is second
    assert first.version
