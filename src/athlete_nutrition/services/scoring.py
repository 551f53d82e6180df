"""Keyword classification and context adjustment of meal scores."""

import math
from collections.abc import Iterable

from athlete_nutrition.domain.analysis import Adjustment, Classification
from athlete_nutrition.domain.models import AgeGroup, MealTiming
from athlete_nutrition.services.knowledge_base import KnowledgeBase

NEUTRAL_SCORE = 50.0
MIN_SCORE = 0
MAX_SCORE = 100
DEFAULT_TIMING_SCORE = 100

PRE_GAME_FUEL = ("pasta", "rice", "bread")
PRE_GAME_HEAVY = ("heavy", "fried", "cream")
POST_GAME_RECOVERY = ("protein", "shake", "milk")
POST_GAME_HYDRATION = ("water", "fruit")

KIDS_SCALE = 1.10
YOUNG_ADULTS_SCALE = 0.95

# age group -> (keywords, flat bonus)
_AGE_BONUSES: dict[AgeGroup, tuple[tuple[str, ...], int]] = {
    AgeGroup.KIDS: (("milk", "yogurt", "cheese"), 15),
    AgeGroup.YOUNG_TEENS: (("protein", "meat", "eggs"), 10),
    AgeGroup.OLDER_TEENS: (("lean", "grilled", "whole"), 10),
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    # Float noise such as 24.499999999999996 still counts as a half.
    return math.floor(round(value, 9) + 0.5)


def clamp(value: float, low: float = MIN_SCORE, high: float = MAX_SCORE) -> float:
    """Clamp a value into [low, high]."""
    return max(low, min(high, value))


def contains_any(text: str, words: Iterable[str]) -> bool:
    """Return True when any word occurs in text."""
    return any(word in text for word in words)


def classify(description: str, knowledge_base: KnowledgeBase) -> Classification:
    """Average the tier weights of every keyword found in the description."""
    matches = knowledge_base.matches(description)
    if not matches:
        return Classification(
            base_score=NEUTRAL_SCORE, matched_keywords=(), match_count=0
        )
    total = sum(tier.points for _, tier in matches)
    return Classification(
        base_score=total / len(matches),
        matched_keywords=tuple(keyword for keyword, _ in matches),
        match_count=len(matches),
    )


def timing_multiplier(description: str, timing: MealTiming | None) -> int:
    """Return the percentage applied to the base score for a timing context."""
    text = description.lower()
    if timing is MealTiming.PRE_GAME:
        if contains_any(text, PRE_GAME_FUEL):
            return 120
        if contains_any(text, PRE_GAME_HEAVY):
            return 60
    elif timing is MealTiming.POST_GAME:
        if contains_any(text, POST_GAME_RECOVERY):
            return 120
        if contains_any(text, POST_GAME_HYDRATION):
            return 110
    return DEFAULT_TIMING_SCORE


def scale_for_age(base_score: float, age_group: AgeGroup | None) -> float:
    """Scale the base score to the standard expected of an age group."""
    if age_group is AgeGroup.KIDS:
        return min(MAX_SCORE, base_score * KIDS_SCALE)
    if age_group is AgeGroup.YOUNG_ADULTS:
        return base_score * YOUNG_ADULTS_SCALE
    return base_score


def age_bonus(description: str, age_group: AgeGroup | None) -> int:
    """Return the flat bonus an age group earns for its focus foods."""
    if age_group is None or age_group not in _AGE_BONUSES:
        return 0
    words, bonus = _AGE_BONUSES[age_group]
    return bonus if contains_any(description.lower(), words) else 0


def adjust(
    base_score: float,
    description: str,
    timing: MealTiming | None = None,
    age_group: AgeGroup | None = None,
) -> Adjustment:
    """Apply timing and age adjustments to a base score."""
    multiplier = timing_multiplier(description, timing)
    bonus = age_bonus(description, age_group)
    scaled = scale_for_age(base_score, age_group)
    final = clamp(scaled * (multiplier / 100) + bonus)
    return Adjustment(
        score=round_half_up(final),
        timing_score=multiplier if timing is not None else None,
        age_bonus=bonus,
    )
