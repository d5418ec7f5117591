# kudos_wall/adapters/outbound/persistence/repositories/__init__.py

from kudos_wall.adapters.outbound.persistence.repositories.user_repository import AsyncUserRepository
from kudos_wall.adapters.outbound.persistence.repositories.team_repository import AsyncTeamRepository
from kudos_wall.adapters.outbound.persistence.repositories.category_repository import AsyncCategoryRepository
from kudos_wall.adapters.outbound.persistence.repositories.kudo_card_repository import AsyncKudoCardRepository

__all__ = [
    "AsyncUserRepository",
    "AsyncTeamRepository",
    "AsyncCategoryRepository",
    "AsyncKudoCardRepository",
]
