"""Tests for daily score aggregation."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta

from athlete_nutrition.domain.analysis import DailyNutritionScore
from athlete_nutrition.domain.models import QualityTier
from athlete_nutrition.services.analyzer import analyze_food_quality
from athlete_nutrition.services.daily import aggregate_daily_score, daily_scores


@dataclass
class LoggedEntry:
    quality: str | None
    logged_at: datetime | None = None


def test_no_entries_scores_zero() -> None:
    assert aggregate_daily_score([]) == DailyNutritionScore(
        meal_frequency=0, food_quality=0, total_score=0
    )


def test_five_excellent_meals_score_full_marks() -> None:
    entries = [{"quality": "excellent"}] * 5

    assert aggregate_daily_score(entries) == DailyNutritionScore(
        meal_frequency=100, food_quality=100, total_score=100
    )


def test_frequency_is_capped() -> None:
    score = aggregate_daily_score([{"quality": QualityTier.POOR}] * 7)

    assert score.meal_frequency == 100
    assert score.food_quality == 25
    assert score.total_score == 55


def test_weighted_total() -> None:
    score = aggregate_daily_score([{"quality": "good"}, {"quality": "poor"}])

    assert score == DailyNutritionScore(
        meal_frequency=40, food_quality=50, total_score=46
    )


def test_average_rounds_half_up() -> None:
    score = aggregate_daily_score([{"quality": "excellent"}, {"quality": "good"}])

    assert score.food_quality == 88
    assert score.total_score == 69


def test_missing_or_unknown_quality_counts_as_fair() -> None:
    entries = [{}, {"quality": "great"}, LoggedEntry(quality=None)]

    assert aggregate_daily_score(entries) == DailyNutritionScore(
        meal_frequency=60, food_quality=50, total_score=54
    )


def test_accepts_analysis_results() -> None:
    result = analyze_food_quality("chips and soda")

    assert aggregate_daily_score([result]) == DailyNutritionScore(
        meal_frequency=20, food_quality=25, total_score=23
    )


def test_daily_scores_groups_by_local_day() -> None:
    day = datetime(2025, 3, 10, 12, 0, tzinfo=UTC)
    entries = [
        LoggedEntry(quality="excellent", logged_at=day),
        LoggedEntry(quality="excellent", logged_at=day + timedelta(hours=2)),
        LoggedEntry(quality="poor", logged_at=day + timedelta(days=1)),
        LoggedEntry(quality="good"),
    ]

    scores = daily_scores(entries, "UTC")

    assert list(scores) == [date(2025, 3, 10), date(2025, 3, 11)]
    assert scores[date(2025, 3, 10)].food_quality == 100
    assert scores[date(2025, 3, 11)].food_quality == 25


def test_daily_scores_respects_timezone() -> None:
    late_evening_utc = datetime(2025, 3, 10, 23, 30, tzinfo=UTC)

    scores = daily_scores(
        [{"quality": "good", "logged_at": late_evening_utc}], "Europe/Helsinki"
    )

    assert list(scores) == [date(2025, 3, 11)]
