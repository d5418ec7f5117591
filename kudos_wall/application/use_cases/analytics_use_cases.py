# kudos_wall/application/use_cases/analytics_use_cases.py

from kudos_wall.application.dtos.analytics_dto import (
    AnalyticsOutput,
    AnalyticsQuery,
    CategoryKudosOutput,
    IndividualKudosOutput,
    TeamKudosOutput,
    WordFrequencyOutput,
)
from kudos_wall.application.ports.outbound import IAnalyticsRepository


class AsyncAnalyticsService:
    """Reads aggregated kudos statistics and trims each section to its limit."""

    def __init__(self, analytics_repository: IAnalyticsRepository):
        self.analytics_repository = analytics_repository

    async def get_analytics(self, query: AnalyticsQuery) -> AnalyticsOutput:
        data = await self.analytics_repository.get_analytics_data(query.period)
        return AnalyticsOutput(
            top_individuals=[
                IndividualKudosOutput.model_validate(i) for i in data.top_individuals[:query.individual_limit]
            ],
            top_teams=[TeamKudosOutput.model_validate(t) for t in data.top_teams[:query.team_limit]],
            trending_words=[WordFrequencyOutput.model_validate(w) for w in data.trending_words[:query.word_limit]],
            trending_categories=[
                CategoryKudosOutput.model_validate(c) for c in data.trending_categories[:query.category_limit]
            ],
        )
