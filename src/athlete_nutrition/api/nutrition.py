"""Nutrition preview endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, status

from athlete_nutrition.api.models import (
    AnalysisResponse,
    DailyScoreRequest,
    DailyScoreResponse,
    FoodMatch,
    PreviewRequest,
)
from athlete_nutrition.domain.guides import AGE_GROUP_NEEDS
from athlete_nutrition.domain.models import AgeGroup, QualityTier  # noqa: TC001
from athlete_nutrition.services.daily import aggregate_daily_score
from athlete_nutrition.services.suggestions import (
    TimeOfDay,
    food_recommendations,
    recommendations_for_hour,
)
from athlete_nutrition.services.timing import classify_timing, timing_guides

if TYPE_CHECKING:
    from athlete_nutrition.containers import AppContainer

router = APIRouter(prefix="/nutrition", tags=["nutrition"])


@router.post("/preview")
async def preview(payload: PreviewRequest, request: Request) -> AnalysisResponse:
    """Score a meal description without storing it."""
    container: AppContainer = request.app.state.container
    if len(payload.description) > container.settings.max_description_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Description is too long",
        )
    timing = payload.timing
    if timing is None and payload.meal_slot is not None and payload.time:
        timing = classify_timing(payload.meal_slot, payload.time)
    result = container.analyzer.analyze(
        payload.description,
        timing=timing,
        age=payload.age,
        age_group=payload.age_group,
    )
    return AnalysisResponse.from_result(result, timing)


@router.post("/daily-score")
async def daily_score(payload: DailyScoreRequest) -> DailyScoreResponse:
    """Aggregate one day of scored entries."""
    return DailyScoreResponse.from_score(aggregate_daily_score(payload.entries))


@router.get("/foods/search")
async def search_foods(
    request: Request, q: str = Query(min_length=1), limit: int = Query(20, ge=1)
) -> dict[str, list[FoodMatch]]:
    """Return known food keywords containing the query."""
    container: AppContainer = request.app.state.container
    knowledge_base = container.knowledge_base
    matches = [
        FoodMatch(keyword=keyword, quality=knowledge_base.lookup_category(keyword))
        for keyword in knowledge_base.search(q)[:limit]
    ]
    return {"foods": matches}


@router.get("/recommendations")
async def hourly_recommendations(
    hour: int = Query(ge=0, le=23),
) -> dict[str, list[str]]:
    """Return general meal advice for an hour of the day."""
    return {"recommendations": recommendations_for_hour(hour)}


@router.get("/recommendations/foods")
async def meal_recommendations(
    request: Request,
    time_of_day: TimeOfDay,
    training_day: bool = False,
    last_meal_quality: QualityTier | None = None,
) -> dict[str, list[str]]:
    """Return food ideas for a part of the day."""
    container: AppContainer = request.app.state.container
    recommendations = food_recommendations(
        time_of_day, training_day, last_meal_quality
    )
    return {
        "recommendations": recommendations[: container.settings.recommendation_limit]
    }


@router.get("/timing-guides")
async def list_timing_guides() -> dict[str, dict[str, object]]:
    """Return the food guides for each window around a game."""
    return {name: asdict(guide) for name, guide in timing_guides().items()}


@router.get("/age-groups/{age_group}")
async def age_group_needs(age_group: AgeGroup) -> dict[str, object]:
    """Return the daily needs of an age group."""
    return {"age_group": age_group, **asdict(AGE_GROUP_NEEDS[age_group])}
