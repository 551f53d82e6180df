"""Domain models for meal analysis results."""

from dataclasses import dataclass

from athlete_nutrition.domain.models import QualityTier


@dataclass(frozen=True)
class MacroEstimate:
    """Rough macronutrient guess for a meal description."""

    calories: int
    protein: int
    carbs: int
    fats: int


@dataclass(frozen=True)
class Classification:
    """Unweighted keyword classification of a description."""

    base_score: float
    matched_keywords: tuple[str, ...]
    match_count: int


@dataclass(frozen=True)
class Adjustment:
    """Score after timing and age adjustments."""

    score: int
    timing_score: int | None
    age_bonus: int


@dataclass(frozen=True)
class NutritionAnalysisResult:
    """Full analysis of a single meal description."""

    quality: QualityTier
    score: int
    suggestions: tuple[str, ...]
    identified_foods: tuple[str, ...]
    macro_estimate: MacroEstimate
    knowledge_base_version: str
    timing_score: int | None = None
    age_bonus: int = 0


@dataclass(frozen=True)
class DailyNutritionScore:
    """Aggregate nutrition score for one day of entries."""

    meal_frequency: int
    food_quality: int
    total_score: int
