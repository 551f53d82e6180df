"""Meal timing classification from meal slot and clock time.

Games are assumed to fall in the afternoon, so lunch late in the morning is
treated as a pre-game meal and dinner in the early evening as a post-game
meal. There is no schedule lookup behind this.
"""

import re

from athlete_nutrition.domain.guides import (
    DURING_GAME_GUIDE,
    POST_GAME_GUIDE,
    PRE_GAME_GUIDE,
    RECOVERY_GUIDE,
    TimingGuide,
)
from athlete_nutrition.domain.models import MealSlot, MealTiming

PRE_GAME_HOURS = range(11, 14)
POST_GAME_HOURS = range(18, 21)
_LEADING_HOUR = re.compile(r"\s*([0-9]+)")

_SLOT_LABELS = {
    MealSlot.BREAKFAST: "Breakfast",
    MealSlot.SNACK: "Morning Snack",
    MealSlot.LUNCH: "Lunch",
    MealSlot.DINNER: "Dinner",
    MealSlot.EVENING_SNACK: "Evening Snack",
    MealSlot.AFTER_PRACTICE: "After Practice",
}

_TIMING_GUIDES: dict[MealTiming, TimingGuide | None] = {
    MealTiming.PRE_GAME: PRE_GAME_GUIDE,
    MealTiming.POST_GAME: POST_GAME_GUIDE,
    MealTiming.AFTER_PRACTICE: RECOVERY_GUIDE,
    MealTiming.REGULAR: None,
}


def parse_hour(time: str) -> int | None:
    """Return the leading hour of a time string such as "12:30" or "12pm".

    Only ASCII digits count. Returns None when the string does not start
    with one.
    """
    match = _LEADING_HOUR.match(time.split(":", 1)[0])
    if match is None:
        return None
    return int(match.group(1))


def parse_slot(slot: MealSlot | str) -> MealSlot | None:
    """Return the meal slot for a slot or slot name."""
    if isinstance(slot, MealSlot):
        return slot
    try:
        return MealSlot(slot.strip().upper())
    except ValueError:
        return None


def classify_timing(slot: MealSlot | str, time: str) -> MealTiming:
    """Classify a meal as pre-game, post-game, after-practice or regular."""
    meal_slot = parse_slot(slot)
    if meal_slot is MealSlot.AFTER_PRACTICE:
        return MealTiming.AFTER_PRACTICE
    hour = parse_hour(time)
    if hour is None:
        return MealTiming.REGULAR
    if meal_slot is MealSlot.LUNCH and hour in PRE_GAME_HOURS:
        return MealTiming.PRE_GAME
    if meal_slot is MealSlot.DINNER and hour in POST_GAME_HOURS:
        return MealTiming.POST_GAME
    return MealTiming.REGULAR


def format_meal_slot(slot: MealSlot | str) -> str:
    """Return a display label for a meal slot."""
    meal_slot = parse_slot(slot)
    if meal_slot is None:
        return str(slot)
    return _SLOT_LABELS[meal_slot]


def timing_guide(timing: MealTiming) -> TimingGuide | None:
    """Return the food guide for a timing context, if there is one."""
    return _TIMING_GUIDES[timing]


def timing_guides() -> dict[str, TimingGuide]:
    """Return every timing guide keyed by the window it covers."""
    return {
        "pre-game": PRE_GAME_GUIDE,
        "during-game": DURING_GAME_GUIDE,
        "post-game": POST_GAME_GUIDE,
        "recovery": RECOVERY_GUIDE,
    }
