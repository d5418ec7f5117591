# kudos_wall/application/dtos/analytics_dto.py

from typing import List
from pydantic import Field

from kudos_wall.application.dtos.base_dto import CustomBaseModel
from kudos_wall.domain.models.analytics_domain_model import AnalyticsPeriod

DEFAULT_INDIVIDUAL_LIMIT = 10
DEFAULT_TEAM_LIMIT = 10
DEFAULT_WORD_LIMIT = 20
DEFAULT_CATEGORY_LIMIT = 10
MAX_LIMIT = 50


class AnalyticsQuery(CustomBaseModel):
    period: AnalyticsPeriod = AnalyticsPeriod.ALL
    individual_limit: int = Field(DEFAULT_INDIVIDUAL_LIMIT, ge=1, le=MAX_LIMIT)
    team_limit: int = Field(DEFAULT_TEAM_LIMIT, ge=1, le=MAX_LIMIT)
    word_limit: int = Field(DEFAULT_WORD_LIMIT, ge=1, le=MAX_LIMIT)
    category_limit: int = Field(DEFAULT_CATEGORY_LIMIT, ge=1, le=MAX_LIMIT)


class IndividualKudosOutput(CustomBaseModel):
    id: str
    name: str
    kudos_count: int


class TeamKudosOutput(CustomBaseModel):
    id: str
    name: str
    kudos_count: int


class WordFrequencyOutput(CustomBaseModel):
    word: str
    frequency: int


class CategoryKudosOutput(CustomBaseModel):
    category_name: str
    kudos_count: int


class AnalyticsOutput(CustomBaseModel):
    top_individuals: List[IndividualKudosOutput]
    top_teams: List[TeamKudosOutput]
    trending_words: List[WordFrequencyOutput]
    trending_categories: List[CategoryKudosOutput]
