# kudos_wall/adapters/outbound/analytics/mock_analytics_repository.py

from typing import List

from kudos_wall.adapters.outbound.analytics.mock_analytics_data import (
    MOCK_ALL_TIME_DATA,
    MOCK_MONTHLY_DATA,
    MOCK_WEEKLY_DATA,
    MOCK_YEARLY_DATA,
)
from kudos_wall.application.ports.outbound import IAnalyticsRepository
from kudos_wall.domain.models.analytics_domain_model import (
    AnalyticsData,
    AnalyticsPeriod,
    CategoryKudos,
    IndividualKudos,
    TeamKudos,
    WordFrequency,
)

_DATASETS = {
    AnalyticsPeriod.WEEKLY: MOCK_WEEKLY_DATA,
    AnalyticsPeriod.MONTHLY: MOCK_MONTHLY_DATA,
    AnalyticsPeriod.YEARLY: MOCK_YEARLY_DATA,
    AnalyticsPeriod.ALL: MOCK_ALL_TIME_DATA,
}


class MockAnalyticsRepository(IAnalyticsRepository):
    """
    Analytics backed by fixed in-process datasets.

    Stands in until kudos are aggregated from the database; the API shape is
    the one a real implementation must keep.
    """

    async def get_analytics_data(self, period: AnalyticsPeriod) -> AnalyticsData:
        return _DATASETS.get(period, MOCK_ALL_TIME_DATA)

    async def get_top_individuals(self, period: AnalyticsPeriod, limit: int = 10) -> List[IndividualKudos]:
        return (await self.get_analytics_data(period)).top_individuals[:limit]

    async def get_top_teams(self, period: AnalyticsPeriod, limit: int = 10) -> List[TeamKudos]:
        return (await self.get_analytics_data(period)).top_teams[:limit]

    async def get_trending_words(self, period: AnalyticsPeriod, limit: int = 20) -> List[WordFrequency]:
        return (await self.get_analytics_data(period)).trending_words[:limit]

    async def get_trending_categories(self, period: AnalyticsPeriod, limit: int = 10) -> List[CategoryKudos]:
        return (await self.get_analytics_data(period)).trending_categories[:limit]
