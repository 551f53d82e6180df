"""Read-only food knowledge base with load-time validation."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from functools import cache

from athlete_nutrition.domain.food_categories import (
    FOOD_CATEGORIES,
    KNOWLEDGE_BASE_VERSION,
    FoodCategory,
)
from athlete_nutrition.domain.models import QualityTier

_logger = logging.getLogger(__name__)


class KnowledgeBaseError(ValueError):
    """Raised when knowledge base data is malformed."""


@dataclass(frozen=True)
class KnowledgeBase:
    """Immutable keyword index over the food categories."""

    version: str
    entries: tuple[tuple[str, QualityTier], ...]

    def lookup_category(self, keyword: str) -> QualityTier | None:
        """Return the tier of an exact (case-insensitive) keyword."""
        needle = keyword.strip().lower()
        for candidate, tier in self.entries:
            if candidate == needle:
                return tier
        return None

    def all_keywords(self) -> set[str]:
        """Return every known keyword."""
        return {keyword for keyword, _ in self.entries}

    def search(self, query: str) -> list[str]:
        """Return keywords containing the query, in knowledge base order."""
        needle = query.strip().lower()
        if not needle:
            return []
        return [keyword for keyword, _ in self.entries if needle in keyword]

    def matches(self, description: str) -> list[tuple[str, QualityTier]]:
        """Return every keyword contained in the description with its tier."""
        text = description.lower()
        return [(keyword, tier) for keyword, tier in self.entries if keyword in text]


def build_knowledge_base(
    categories: Iterable[FoodCategory], version: str
) -> KnowledgeBase:
    """Validate categories and index their keywords."""
    entries: list[tuple[str, QualityTier]] = []
    seen: dict[str, QualityTier] = {}
    for category in categories:
        try:
            tier = QualityTier(category.name)
        except ValueError as exc:
            raise KnowledgeBaseError(
                f"Unknown quality tier '{category.name}'"
            ) from exc
        for raw_keyword in category.keywords:
            keyword = raw_keyword.strip().lower()
            if not keyword:
                raise KnowledgeBaseError(f"Empty keyword in tier '{tier}'")
            owner = seen.get(keyword)
            if owner is not None:
                raise KnowledgeBaseError(
                    f"Keyword '{keyword}' appears in both '{owner}' and '{tier}'"
                    if owner != tier
                    else f"Keyword '{keyword}' is listed twice in '{tier}'"
                )
            seen[keyword] = tier
            entries.append((keyword, tier))
    return KnowledgeBase(version=version, entries=tuple(entries))


@cache
def load_knowledge_base() -> KnowledgeBase:
    """Load the bundled knowledge base once per process."""
    knowledge_base = build_knowledge_base(FOOD_CATEGORIES, KNOWLEDGE_BASE_VERSION)
    _logger.info(
        "Loaded food knowledge base: version=%s keywords=%s",
        knowledge_base.version,
        len(knowledge_base.entries),
    )
    return knowledge_base
