# kudos_wall/domain/models/user_domain_model.py

from uuid import UUID
from enum import Enum
from dataclasses import dataclass
from typing import Optional
from datetime import datetime


class UserRole(str, Enum):
    """Roles a principal can hold. Values are compared case-sensitively."""
    TEAM_MEMBER = "TEAM_MEMBER"
    TECH_LEAD = "TECH_LEAD"
    ADMIN = "ADMIN"


@dataclass
class User:
    """Domain model for a user entity."""
    id: UUID
    email: str
    name: str
    password: str  # bcrypt hash, never plaintext
    role: UserRole
    created_at: datetime
    updated_at: Optional[datetime] = None

    def to_principal(self) -> "AuthenticatedUser":
        """Strip the password hash before the user is attached to a request."""
        return AuthenticatedUser(
            id=self.id,
            email=self.email,
            name=self.name,
            role=self.role,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


@dataclass(frozen=True)
class AuthenticatedUser:
    """Principal attached to an authenticated request."""
    id: UUID
    email: str
    name: str
    role: UserRole
    created_at: datetime
    updated_at: Optional[datetime] = None

    def has_any_role(self, allowed_roles) -> bool:
        """Exact, case-sensitive membership test against raw role strings."""
        return self.role.value in allowed_roles
