# kudos_wall/application/ports/outbound.py

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from kudos_wall.domain.models.user_domain_model import User, UserRole
from kudos_wall.domain.models.team_domain_model import Team
from kudos_wall.domain.models.category_domain_model import Category
from kudos_wall.domain.models.kudo_card_domain_model import KudoCard, KudoCardFilter
from kudos_wall.domain.models.analytics_domain_model import AnalyticsData, AnalyticsPeriod


class IUserRepository(ABC):
    """User lookup port consumed by the authentication core."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    async def create(self, user_data: Dict[str, Any]) -> User:
        """Create a user from {email, name, password (hashed), role}."""
        pass

    @abstractmethod
    async def update_role(self, user_id: UUID, new_role: UserRole) -> User:
        """Change the role of an existing user."""
        pass

    @abstractmethod
    async def count_users(self) -> int:
        """Total number of registered users."""
        pass

    @abstractmethod
    async def list_by_role(self, role: Optional[UserRole] = None) -> List[User]:
        """List users, optionally restricted to one role."""
        pass


class ITokenBlacklist(ABC):
    """
    Token revocation store.

    Implementations keep a digest of each revoked token until its natural
    expiry. The in-memory implementation is process-local; a clustered
    deployment needs a shared implementation of the same three operations.
    """

    @abstractmethod
    async def add(self, token: str, subject_id: str, expires_at: datetime) -> Any:
        """Revoke a token until ``expires_at``."""
        pass

    @abstractmethod
    async def is_revoked(self, token: str) -> bool:
        """True if the token has been revoked."""
        pass

    @abstractmethod
    async def prune_expired(self) -> None:
        """Drop entries whose expiry has passed."""
        pass


class ITeamRepository(ABC):
    """Team repository interface."""

    @abstractmethod
    async def get(self, team_id: UUID) -> Optional[Team]:
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Team]:
        pass

    @abstractmethod
    async def list(self) -> List[Team]:
        pass

    @abstractmethod
    async def create(self, team: Team) -> Team:
        pass

    @abstractmethod
    async def update(self, team: Team) -> Team:
        pass

    @abstractmethod
    async def delete(self, team_id: UUID) -> None:
        pass


class ICategoryRepository(ABC):
    """Category repository interface."""

    @abstractmethod
    async def get(self, category_id: UUID) -> Optional[Category]:
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Category]:
        pass

    @abstractmethod
    async def list(self) -> List[Category]:
        pass

    @abstractmethod
    async def create(self, category: Category) -> Category:
        pass

    @abstractmethod
    async def update(self, category: Category) -> Category:
        pass

    @abstractmethod
    async def delete(self, category_id: UUID) -> None:
        pass


class IKudoCardRepository(ABC):
    """Kudo card repository interface."""

    @abstractmethod
    async def create(self, kudo_card: KudoCard) -> KudoCard:
        pass

    @abstractmethod
    async def list(self, filters: KudoCardFilter) -> List[KudoCard]:
        pass


class IAnalyticsRepository(ABC):
    """Source of aggregated kudos statistics."""

    @abstractmethod
    async def get_analytics_data(self, period: AnalyticsPeriod) -> AnalyticsData:
        pass
