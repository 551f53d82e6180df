"""Coaching suggestions and meal recommendations."""

from typing import Literal

from athlete_nutrition.domain.models import AgeGroup, MealTiming, QualityTier

MAX_SUGGESTIONS = 3

_QUALITY_MESSAGES: dict[QualityTier, tuple[str, ...]] = {
    QualityTier.POOR: (
        "Try to include more whole foods and vegetables",
        "Reduce processed and sugary foods",
    ),
    QualityTier.FAIR: (
        "Add more protein sources like lean meat or fish",
        "Include more colorful vegetables",
    ),
    QualityTier.GOOD: (),
    QualityTier.EXCELLENT: (),
}

_TIMING_MESSAGES: dict[MealTiming, tuple[str, ...]] = {
    MealTiming.PRE_GAME: (
        "Focus on easily digestible carbs 2-3 hours before game",
        "Avoid high-fat or high-fiber foods before playing",
    ),
    MealTiming.POST_GAME: (
        "Include protein within 30 minutes after game",
        "Rehydrate with water and electrolytes",
    ),
    MealTiming.AFTER_PRACTICE: (),
    MealTiming.REGULAR: (),
}

_AGE_MESSAGES: dict[AgeGroup, tuple[str, ...]] = {
    AgeGroup.KIDS: (
        "Include calcium-rich foods for bone development",
        "Ensure adequate hydration throughout the day",
    ),
    AgeGroup.YOUNG_TEENS: (
        "Increase portion sizes to support growth spurts",
        "Focus on protein for muscle development",
    ),
    AgeGroup.OLDER_TEENS: (
        "Time your meals around training sessions",
        "Consider sports drinks only during intense training",
    ),
    AgeGroup.YOUNG_ADULTS: (
        "Monitor portion control for optimal body composition",
        "Focus on nutrient timing for recovery",
    ),
}

# (exclusive upper hour, messages)
_HOURLY_RECOMMENDATIONS: tuple[tuple[int, tuple[str, ...]], ...] = (
    (
        9,
        (
            "Start your day with a protein-rich breakfast",
            "Include complex carbs for sustained energy",
        ),
    ),
    (
        12,
        (
            "Time for a healthy mid-morning snack",
            "Stay hydrated with water",
        ),
    ),
    (
        14,
        (
            "Lunch should include lean protein and vegetables",
            "Avoid heavy, greasy foods that can make you sluggish",
        ),
    ),
    (
        17,
        (
            "Pre-training snack: banana or energy bar",
            "Hydrate well before training",
        ),
    ),
    (
        20,
        (
            "Post-training: protein for recovery within 30 minutes",
            "Dinner: balanced meal with carbs and protein",
        ),
    ),
)
_LATE_RECOMMENDATIONS = (
    "Light evening snack if hungry",
    "Avoid heavy meals before bed",
)

TimeOfDay = Literal["morning", "afternoon", "evening"]


def suggest(
    quality: QualityTier,
    timing: MealTiming | None = None,
    age_group: AgeGroup | None = None,
) -> list[str]:
    """Return up to three suggestions, quality feedback first."""
    suggestions = list(_QUALITY_MESSAGES[quality])
    if timing is not None:
        suggestions.extend(_TIMING_MESSAGES[timing])
    if age_group is not None:
        suggestions.extend(_AGE_MESSAGES[age_group])
    return suggestions[:MAX_SUGGESTIONS]


def recommendations_for_hour(hour: int) -> list[str]:
    """Return general meal advice for an hour of the day."""
    for upper, messages in _HOURLY_RECOMMENDATIONS:
        if hour < upper:
            return list(messages)
    return list(_LATE_RECOMMENDATIONS)


def food_recommendations(
    time_of_day: TimeOfDay,
    is_training_day: bool,
    last_meal_quality: QualityTier | None = None,
) -> list[str]:
    """Return food ideas for a part of the day.

    Unknown values for ``time_of_day`` are treated as evening.
    """
    recommendations: list[str] = []
    if time_of_day == "morning":
        recommendations.extend(
            [
                "Start with oatmeal or whole grain toast",
                "Add eggs for protein",
                "Include fruit for vitamins",
            ]
        )
        if is_training_day:
            recommendations.append("Extra carbs needed - add banana or honey")
    elif time_of_day == "afternoon":
        recommendations.extend(
            [
                "Balanced lunch with protein and vegetables",
                "Stay hydrated with water",
            ]
        )
        if is_training_day:
            recommendations.append(
                "Light meal if training soon, heavier if post-training"
            )
    else:
        recommendations.extend(
            [
                "Lean protein with vegetables",
                "Complex carbs if you trained today",
                "Avoid heavy, fatty foods before bed",
            ]
        )

    if last_meal_quality is QualityTier.POOR:
        recommendations.insert(
            0, "Your last meal was low quality - make this one count!"
        )
    return recommendations
