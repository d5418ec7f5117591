# kudos_wall/domain/models/analytics_domain_model.py

from enum import Enum
from dataclasses import dataclass, field
from typing import List


class AnalyticsPeriod(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    ALL = "all"


@dataclass(frozen=True)
class IndividualKudos:
    id: str
    name: str
    kudos_count: int


@dataclass(frozen=True)
class TeamKudos:
    id: str
    name: str
    kudos_count: int


@dataclass(frozen=True)
class WordFrequency:
    word: str
    frequency: int


@dataclass(frozen=True)
class CategoryKudos:
    category_name: str
    kudos_count: int


@dataclass
class AnalyticsData:
    """Aggregated kudos statistics for one period."""
    top_individuals: List[IndividualKudos] = field(default_factory=list)
    top_teams: List[TeamKudos] = field(default_factory=list)
    trending_words: List[WordFrequency] = field(default_factory=list)
    trending_categories: List[CategoryKudos] = field(default_factory=list)
