# kudos_wall/adapters/inbound/api/v1/endpoints/analytics_endpoint.py (async version)

from fastapi import APIRouter, Depends, Query

from kudos_wall.adapters.inbound.api.deps import get_analytics_service, get_current_user
from kudos_wall.application.dtos.analytics_dto import (
    AnalyticsOutput,
    AnalyticsQuery,
    DEFAULT_CATEGORY_LIMIT,
    DEFAULT_INDIVIDUAL_LIMIT,
    DEFAULT_TEAM_LIMIT,
    DEFAULT_WORD_LIMIT,
    MAX_LIMIT,
)
from kudos_wall.application.use_cases.analytics_use_cases import AsyncAnalyticsService
from kudos_wall.domain.models.analytics_domain_model import AnalyticsPeriod

router = APIRouter()


@router.get(
    "",
    response_model=AnalyticsOutput,
    summary="Kudos Analytics",
    description="Top individuals, top teams, trending words and trending categories for a period.",
    dependencies=[Depends(get_current_user)],
)
async def get_analytics(
        period: AnalyticsPeriod = Query(AnalyticsPeriod.ALL),
        individual_limit: int = Query(DEFAULT_INDIVIDUAL_LIMIT, alias="individualLimit", ge=1, le=MAX_LIMIT),
        team_limit: int = Query(DEFAULT_TEAM_LIMIT, alias="teamLimit", ge=1, le=MAX_LIMIT),
        word_limit: int = Query(DEFAULT_WORD_LIMIT, alias="wordLimit", ge=1, le=MAX_LIMIT),
        category_limit: int = Query(DEFAULT_CATEGORY_LIMIT, alias="categoryLimit", ge=1, le=MAX_LIMIT),
        service: AsyncAnalyticsService = Depends(get_analytics_service),
):
    query = AnalyticsQuery(
        period=period,
        individual_limit=individual_limit,
        team_limit=team_limit,
        word_limit=word_limit,
        category_limit=category_limit,
    )
    return await service.get_analytics(query)
