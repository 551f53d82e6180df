"""Reference guides for meal timing and age-group needs."""

from dataclasses import dataclass

from athlete_nutrition.domain.models import AgeGroup


@dataclass(frozen=True)
class TimingGuide:
    """Foods suited to a window around training or a game."""

    keywords: tuple[str, ...]
    window: str
    description: str


@dataclass(frozen=True)
class AgeGroupNeeds:
    """Daily nutrition needs for an age group."""

    calories_per_day: int
    protein_g_per_kg: float
    focus: str


PRE_GAME_GUIDE = TimingGuide(
    keywords=(
        "pasta",
        "rice",
        "banana",
        "toast with honey",
        "oatmeal",
        "energy bar",
        "bagel",
        "fruit",
        "sports drink",
        "water",
        "puuro",
        "kaurapuuro",
        "riisipuuro",
        "pannukakku",
        "smoothie bowl",
        "whole grain toast",
        "dates",
        "raisins",
        "energy balls",
    ),
    window="2-3 hours before",
    description="High carbs, low fat, easy to digest",
)

DURING_GAME_GUIDE = TimingGuide(
    keywords=(
        "water",
        "sports drink",
        "banana",
        "orange slices",
        "energy gel",
        "isotonic drink",
        "electrolyte drink",
        "diluted juice",
        "coconut water",
        "hydration salts",
        "grape slices",
        "watermelon",
        "cantaloupe",
    ),
    window="Halftime or breaks",
    description="Quick energy and hydration",
)

POST_GAME_GUIDE = TimingGuide(
    keywords=(
        "chocolate milk",
        "protein shake",
        "recovery drink",
        "chicken sandwich",
        "tuna sandwich",
        "protein bar",
        "greek yogurt",
        "nuts and fruit",
        "smoothie bowl",
        "rahka",
        "viili",
        "kefir",
        "turkey wrap",
        "egg sandwich",
        "quinoa salad",
        "cottage cheese with berries",
    ),
    window="Within 30 minutes",
    description="Protein and carbs for recovery",
)

RECOVERY_GUIDE = TimingGuide(
    keywords=(
        "grilled chicken",
        "salmon",
        "eggs",
        "quinoa bowl",
        "turkey wrap",
        "protein smoothie",
        "cottage cheese",
        "lean beef",
        "fish and rice",
        "protein pancakes",
        "lohikeitto",
        "jauhelihakastike",
        "lihapullat",
        "grilled fish",
        "chicken salad",
        "beef stir fry",
        "tofu scramble",
        "tempeh bowl",
        "legume curry",
    ),
    window="1-2 hours after",
    description="Complete meal for muscle recovery",
)

AGE_GROUP_NEEDS: dict[AgeGroup, AgeGroupNeeds] = {
    AgeGroup.KIDS: AgeGroupNeeds(
        calories_per_day=2000,
        protein_g_per_kg=1.0,
        focus="Growth and development, adequate calcium and iron",
    ),
    AgeGroup.YOUNG_TEENS: AgeGroupNeeds(
        calories_per_day=2400,
        protein_g_per_kg=1.2,
        focus="Increased energy needs, muscle development",
    ),
    AgeGroup.OLDER_TEENS: AgeGroupNeeds(
        calories_per_day=2800,
        protein_g_per_kg=1.4,
        focus="Peak performance, muscle recovery",
    ),
    AgeGroup.YOUNG_ADULTS: AgeGroupNeeds(
        calories_per_day=3000,
        protein_g_per_kg=1.6,
        focus="Maintenance and optimization",
    ),
}
