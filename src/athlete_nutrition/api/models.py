"""Pydantic models for the nutrition preview API."""

from pydantic import BaseModel, Field

from athlete_nutrition.domain.analysis import (
    DailyNutritionScore,
    NutritionAnalysisResult,
)
from athlete_nutrition.domain.models import AgeGroup, MealSlot, MealTiming, QualityTier


class PreviewRequest(BaseModel):
    """Meal description and optional context to score."""

    description: str
    meal_slot: MealSlot | None = None
    time: str | None = None
    timing: MealTiming | None = None
    age: int | None = Field(default=None, ge=0)
    age_group: AgeGroup | None = None


class MacroEstimateModel(BaseModel):
    """Macro estimate payload."""

    calories: int
    protein: int
    carbs: int
    fats: int


class AnalysisResponse(BaseModel):
    """Meal analysis payload."""

    quality: QualityTier
    score: int
    suggestions: list[str]
    identified_foods: list[str]
    macro_estimate: MacroEstimateModel
    timing: MealTiming | None = None
    timing_score: int | None = None
    age_bonus: int = 0
    knowledge_base_version: str

    @classmethod
    def from_result(
        cls, result: NutritionAnalysisResult, timing: MealTiming | None
    ) -> "AnalysisResponse":
        """Build the payload from an analysis result."""
        macros = result.macro_estimate
        return cls(
            quality=result.quality,
            score=result.score,
            suggestions=list(result.suggestions),
            identified_foods=list(result.identified_foods),
            macro_estimate=MacroEstimateModel(
                calories=macros.calories,
                protein=macros.protein,
                carbs=macros.carbs,
                fats=macros.fats,
            ),
            timing=timing,
            timing_score=result.timing_score,
            age_bonus=result.age_bonus,
            knowledge_base_version=result.knowledge_base_version,
        )


class ScoredEntry(BaseModel):
    """Logged entry carrying the quality it was saved with."""

    quality: str | None = None


class DailyScoreRequest(BaseModel):
    """One day of scored entries."""

    entries: list[ScoredEntry] = Field(default_factory=list)


class DailyScoreResponse(BaseModel):
    """Daily nutrition score payload."""

    meal_frequency: int
    food_quality: int
    total_score: int

    @classmethod
    def from_score(cls, score: DailyNutritionScore) -> "DailyScoreResponse":
        """Build the payload from a daily score."""
        return cls(
            meal_frequency=score.meal_frequency,
            food_quality=score.food_quality,
            total_score=score.total_score,
        )


class FoodMatch(BaseModel):
    """Known food keyword with its quality tier."""

    keyword: str
    quality: QualityTier
