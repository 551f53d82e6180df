"""Meal-quality analysis shared by the preview API and entry persistence."""

import logging
from dataclasses import dataclass, field

from athlete_nutrition.domain.analysis import NutritionAnalysisResult
from athlete_nutrition.domain.models import (
    AgeGroup,
    MealTiming,
    QualityTier,
    derive_age_group,
)
from athlete_nutrition.services.daily import aggregate_daily_score
from athlete_nutrition.services.knowledge_base import (
    KnowledgeBase,
    load_knowledge_base,
)
from athlete_nutrition.services.macros import estimate_macros
from athlete_nutrition.services.scoring import adjust, classify
from athlete_nutrition.services.suggestions import suggest
from athlete_nutrition.services.timing import classify_timing

__all__ = [
    "NutritionAnalyzer",
    "aggregate_daily_score",
    "analyze_food_quality",
    "classify_timing",
    "derive_age_group",
]

_logger = logging.getLogger(__name__)


def _parse_timing(timing: MealTiming | str | None) -> MealTiming | None:
    if timing is None or isinstance(timing, MealTiming):
        return timing
    try:
        return MealTiming(timing.strip().lower())
    except ValueError:
        return None


def _parse_age_group(age_group: AgeGroup | str | None) -> AgeGroup | None:
    if age_group is None or isinstance(age_group, AgeGroup):
        return age_group
    try:
        return AgeGroup(age_group.strip())
    except ValueError:
        return None


@dataclass
class NutritionAnalyzer:
    """Scores meal descriptions against a knowledge base."""

    knowledge_base: KnowledgeBase = field(default_factory=load_knowledge_base)
    debug: bool = False

    def analyze(
        self,
        description: str,
        timing: MealTiming | str | None = None,
        age: int | None = None,
        age_group: AgeGroup | str | None = None,
    ) -> NutritionAnalysisResult:
        """Classify, score and annotate a single meal description.

        Unknown timing or age group values skip their adjustment. When only
        ``age`` is given, the age group is derived from it.
        """
        meal_timing = _parse_timing(timing)
        group = _parse_age_group(age_group)
        if group is None and age_group is None and age is not None:
            group = derive_age_group(age)

        classification = classify(description, self.knowledge_base)
        adjustment = adjust(
            classification.base_score, description, meal_timing, group
        )
        quality = QualityTier.from_score(adjustment.score)
        result = NutritionAnalysisResult(
            quality=quality,
            score=adjustment.score,
            suggestions=tuple(suggest(quality, meal_timing, group)),
            identified_foods=classification.matched_keywords,
            macro_estimate=estimate_macros(description),
            knowledge_base_version=self.knowledge_base.version,
            timing_score=adjustment.timing_score,
            age_bonus=adjustment.age_bonus,
        )
        if self.debug:
            _logger.info(
                "Meal analysis: quality=%s score=%s matches=%s timing=%s age_group=%s",
                result.quality,
                result.score,
                classification.match_count,
                meal_timing,
                group,
            )
        return result


def analyze_food_quality(
    description: str,
    timing: MealTiming | str | None = None,
    age: int | None = None,
    age_group: AgeGroup | str | None = None,
) -> NutritionAnalysisResult:
    """Analyze a meal description with the bundled knowledge base."""
    return NutritionAnalyzer().analyze(description, timing, age, age_group)
