"""Daily nutrition score aggregation."""

from collections.abc import Iterable, Mapping
from datetime import date, datetime
from zoneinfo import ZoneInfo

from athlete_nutrition.domain.analysis import DailyNutritionScore
from athlete_nutrition.domain.models import QualityTier, parse_quality
from athlete_nutrition.services.scoring import round_half_up

EXPECTED_MEALS_PER_DAY = 5
FREQUENCY_WEIGHT = 0.4
QUALITY_WEIGHT = 0.6
DEFAULT_QUALITY = QualityTier.FAIR


def entry_quality(entry: object) -> QualityTier:
    """Return an entry's quality tier, defaulting to fair."""
    if isinstance(entry, Mapping):
        raw = entry.get("quality")
    else:
        raw = getattr(entry, "quality", None)
    return parse_quality(raw) or DEFAULT_QUALITY


def aggregate_daily_score(entries: Iterable[object]) -> DailyNutritionScore:
    """Combine one day's scored entries into a daily nutrition score."""
    qualities = [entry_quality(entry) for entry in entries]
    if not qualities:
        return DailyNutritionScore(meal_frequency=0, food_quality=0, total_score=0)

    meal_frequency = min(100.0, len(qualities) / EXPECTED_MEALS_PER_DAY * 100)
    food_quality = round_half_up(
        sum(quality.points for quality in qualities) / len(qualities)
    )
    total_score = round_half_up(
        meal_frequency * FREQUENCY_WEIGHT + food_quality * QUALITY_WEIGHT
    )
    return DailyNutritionScore(
        meal_frequency=round_half_up(meal_frequency),
        food_quality=food_quality,
        total_score=total_score,
    )


def daily_scores(
    entries: Iterable[object], timezone_name: str
) -> dict[date, DailyNutritionScore]:
    """Group entries by local day of ``logged_at`` and score each day."""
    tz = ZoneInfo(timezone_name)
    by_day: dict[date, list[object]] = {}
    for entry in entries:
        if isinstance(entry, Mapping):
            logged_at = entry.get("logged_at")
        else:
            logged_at = getattr(entry, "logged_at", None)
        if not isinstance(logged_at, datetime):
            continue
        by_day.setdefault(logged_at.astimezone(tz).date(), []).append(entry)
    return {
        day: aggregate_daily_score(day_entries)
        for day, day_entries in sorted(by_day.items())
    }
