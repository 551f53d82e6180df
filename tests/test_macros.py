"""Tests for macro estimation."""

from athlete_nutrition.domain.analysis import MacroEstimate
from athlete_nutrition.services.macros import estimate_macros, portion_factor


def test_base_values_without_keywords() -> None:
    assert estimate_macros("") == MacroEstimate(
        calories=300, protein=10, carbs=30, fats=10
    )


def test_protein_source() -> None:
    assert estimate_macros("grilled chicken") == MacroEstimate(
        calories=450, protein=35, carbs=30, fats=10
    )


def test_keyword_families_stack() -> None:
    assert estimate_macros("Chicken with rice and vegetables") == MacroEstimate(
        calories=660, protein=35, carbs=80, fats=10
    )
    assert estimate_macros("fruit smoothie") == MacroEstimate(
        calories=580, protein=30, carbs=80, fats=10
    )
    assert estimate_macros("bread with butter") == MacroEstimate(
        calories=595, protein=10, carbs=70, fats=25
    )


def test_portion_size_scales_every_field() -> None:
    assert estimate_macros("large grilled chicken") == MacroEstimate(
        calories=585, protein=46, carbs=39, fats=13
    )
    assert estimate_macros("small grilled chicken") == MacroEstimate(
        calories=315, protein=25, carbs=21, fats=7
    )


def test_portion_ordering() -> None:
    large = estimate_macros("large grilled chicken").calories
    regular = estimate_macros("grilled chicken").calories
    small = estimate_macros("small grilled chicken").calories

    assert large > regular > small


def test_large_wins_over_small() -> None:
    assert portion_factor("a big plate with a little sauce") == 1.3
    assert portion_factor("a little snack") == 0.7
    assert portion_factor("snack") == 1.0
