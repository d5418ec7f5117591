# kudos_wall/adapters/outbound/analytics/mock_analytics_data.py

"""
Fixed datasets served by MockAnalyticsRepository, one per period.
"""

from kudos_wall.domain.models.analytics_domain_model import (
    AnalyticsData,
    CategoryKudos,
    IndividualKudos,
    TeamKudos,
    WordFrequency,
)

_PEOPLE = [
    ("u-001", "Alice Johnson"), ("u-002", "Bruno Costa"), ("u-003", "Chen Wei"),
    ("u-004", "Diana Prince"), ("u-005", "Emeka Obi"), ("u-006", "Fatima Zahra"),
    ("u-007", "Gustavo Lima"), ("u-008", "Hana Sato"), ("u-009", "Ivan Petrov"),
    ("u-010", "Julia Roberts"), ("u-011", "Kofi Mensah"), ("u-012", "Laura Silva"),
    ("u-013", "Mateo Rossi"), ("u-014", "Nadia Haddad"), ("u-015", "Oscar Nilsson"),
]

_TEAMS = [
    ("t-001", "Engineering"), ("t-002", "Design"), ("t-003", "Product"),
    ("t-004", "Marketing"), ("t-005", "Customer Support"), ("t-006", "Sales"),
    ("t-007", "Operations"),
]

_WORDS = [
    "helpful", "teamwork", "amazing", "support", "leadership", "innovative",
    "dedicated", "creative", "reliable", "mentor", "collaboration", "thanks",
    "quality", "initiative", "problem-solving", "ownership", "patient",
    "inspiring", "proactive", "communication", "resilient", "detail",
    "customer", "delivery", "learning",
]

_CATEGORIES = [
    "Teamwork", "Innovation", "Helping Hand", "Leadership", "Customer Focus",
    "Going Above and Beyond", "Quality Work", "Mentorship",
]


def _build(scale: int, people: int, teams: int, words: int, categories: int) -> AnalyticsData:
    """Descending counts so every list is already ranked."""
    return AnalyticsData(
        top_individuals=[
            IndividualKudos(id=pid, name=name, kudos_count=scale * (people - i))
            for i, (pid, name) in enumerate(_PEOPLE[:people])
        ],
        top_teams=[
            TeamKudos(id=tid, name=name, kudos_count=scale * 3 * (teams - i))
            for i, (tid, name) in enumerate(_TEAMS[:teams])
        ],
        trending_words=[
            WordFrequency(word=word, frequency=scale * 2 * (words - i))
            for i, word in enumerate(_WORDS[:words])
        ],
        trending_categories=[
            CategoryKudos(category_name=name, kudos_count=scale * 2 * (categories - i))
            for i, name in enumerate(_CATEGORIES[:categories])
        ],
    )


MOCK_WEEKLY_DATA = _build(scale=1, people=8, teams=5, words=12, categories=5)
MOCK_MONTHLY_DATA = _build(scale=4, people=12, teams=6, words=20, categories=7)
MOCK_YEARLY_DATA = _build(scale=40, people=15, teams=7, words=25, categories=8)
MOCK_ALL_TIME_DATA = _build(scale=90, people=15, teams=7, words=25, categories=8)
