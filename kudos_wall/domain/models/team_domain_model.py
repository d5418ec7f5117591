# kudos_wall/domain/models/team_domain_model.py

from uuid import UUID
from dataclasses import dataclass
from typing import Optional
from datetime import datetime

from kudos_wall.domain.exceptions import InvalidInputException

MAX_TEAM_NAME_LENGTH = 100


@dataclass
class Team:
    """Domain model for a team."""
    id: Optional[UUID]
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        self.name = self.validate_name(self.name)

    @staticmethod
    def validate_name(name: str) -> str:
        if not name or not name.strip():
            raise InvalidInputException("Team name cannot be empty", fields={"name": "required"})
        name = name.strip()
        if len(name) > MAX_TEAM_NAME_LENGTH:
            raise InvalidInputException(
                f"Team name cannot exceed {MAX_TEAM_NAME_LENGTH} characters",
                fields={"name": "too long"},
            )
        return name

    def rename(self, new_name: str) -> None:
        self.name = self.validate_name(new_name)
