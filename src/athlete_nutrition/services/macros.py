"""Heuristic macronutrient estimates from meal descriptions."""

from dataclasses import dataclass

from athlete_nutrition.domain.analysis import MacroEstimate
from athlete_nutrition.services.scoring import contains_any, round_half_up

LARGE_PORTION = ("large", "big")
SMALL_PORTION = ("small", "little")
LARGE_PORTION_FACTOR = 1.3
SMALL_PORTION_FACTOR = 0.7


@dataclass(frozen=True)
class _FoodFamily:
    keywords: tuple[str, ...]
    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fats: int = 0


_BASE = _FoodFamily(keywords=(), calories=300, protein=10, carbs=30, fats=10)

_FAMILIES = (
    _FoodFamily(("chicken", "fish", "meat"), calories=150, protein=25),
    _FoodFamily(("rice", "pasta", "bread"), calories=160, carbs=40),
    _FoodFamily(("oil", "butter", "cheese"), calories=135, fats=15),
    _FoodFamily(("vegetables", "salad"), calories=50, carbs=10),
    _FoodFamily(("fruit",), calories=80, carbs=20),
    _FoodFamily(("shake", "smoothie"), calories=200, protein=20, carbs=30),
)


def portion_factor(description: str) -> float:
    """Return the multiplier implied by portion-size words."""
    text = description.lower()
    if contains_any(text, LARGE_PORTION):
        return LARGE_PORTION_FACTOR
    if contains_any(text, SMALL_PORTION):
        return SMALL_PORTION_FACTOR
    return 1.0


def estimate_macros(description: str) -> MacroEstimate:
    """Estimate calories, protein, carbs and fats for a described meal."""
    text = description.lower()
    calories = _BASE.calories
    protein = _BASE.protein
    carbs = _BASE.carbs
    fats = _BASE.fats
    for family in _FAMILIES:
        if contains_any(text, family.keywords):
            calories += family.calories
            protein += family.protein
            carbs += family.carbs
            fats += family.fats

    factor = portion_factor(text)
    return MacroEstimate(
        calories=round_half_up(calories * factor),
        protein=round_half_up(protein * factor),
        carbs=round_half_up(carbs * factor),
        fats=round_half_up(fats * factor),
    )
