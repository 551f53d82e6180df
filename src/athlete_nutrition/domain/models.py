"""Core enumerations for meal scoring."""

from enum import StrEnum

EXCELLENT_THRESHOLD = 85
GOOD_THRESHOLD = 70
FAIR_THRESHOLD = 50

KIDS_MAX_AGE = 12
YOUNG_TEENS_MAX_AGE = 15
OLDER_TEENS_MAX_AGE = 18


class QualityTier(StrEnum):
    """Overall healthfulness bucket for a meal."""

    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"
    EXCELLENT = "excellent"

    @property
    def points(self) -> int:
        """Points a meal of this tier is worth."""
        return _TIER_POINTS[self]

    @classmethod
    def from_score(cls, score: float) -> "QualityTier":
        """Bucket a 0-100 score into a tier."""
        if score >= EXCELLENT_THRESHOLD:
            return cls.EXCELLENT
        if score >= GOOD_THRESHOLD:
            return cls.GOOD
        if score >= FAIR_THRESHOLD:
            return cls.FAIR
        return cls.POOR


_TIER_POINTS = {
    QualityTier.EXCELLENT: 100,
    QualityTier.GOOD: 75,
    QualityTier.FAIR: 50,
    QualityTier.POOR: 25,
}


class MealSlot(StrEnum):
    """Meal slot chosen by the player when logging food."""

    BREAKFAST = "BREAKFAST"
    SNACK = "SNACK"
    LUNCH = "LUNCH"
    DINNER = "DINNER"
    EVENING_SNACK = "EVENING_SNACK"
    AFTER_PRACTICE = "AFTER_PRACTICE"


class MealTiming(StrEnum):
    """Meal context relative to athletic activity."""

    PRE_GAME = "pre-game"
    POST_GAME = "post-game"
    AFTER_PRACTICE = "after-practice"
    REGULAR = "regular"


class AgeGroup(StrEnum):
    """Coarse player age bucket."""

    KIDS = "10-12"
    YOUNG_TEENS = "13-15"
    OLDER_TEENS = "16-18"
    YOUNG_ADULTS = "19-25"


def derive_age_group(age: int) -> AgeGroup:
    """Map an integer age onto its age group."""
    if age <= KIDS_MAX_AGE:
        return AgeGroup.KIDS
    if age <= YOUNG_TEENS_MAX_AGE:
        return AgeGroup.YOUNG_TEENS
    if age <= OLDER_TEENS_MAX_AGE:
        return AgeGroup.OLDER_TEENS
    return AgeGroup.YOUNG_ADULTS


def parse_quality(value: object) -> QualityTier | None:
    """Return the tier named by value, or None when it names no tier."""
    if isinstance(value, QualityTier):
        return value
    if isinstance(value, str):
        try:
            return QualityTier(value.strip().lower())
        except ValueError:
            return None
    return None
