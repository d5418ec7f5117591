# kudos_wall/domain/models/category_domain_model.py

from uuid import UUID
from dataclasses import dataclass
from typing import Optional
from datetime import datetime

from kudos_wall.domain.exceptions import InvalidInputException

MAX_CATEGORY_NAME_LENGTH = 50


@dataclass
class Category:
    """Domain model for a kudos category (e.g. "Teamwork")."""
    id: Optional[UUID]
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        self.name = self.validate_name(self.name)

    @staticmethod
    def validate_name(name: str) -> str:
        if not name or not name.strip():
            raise InvalidInputException("Category name cannot be empty", fields={"name": "required"})
        name = name.strip()
        if len(name) > MAX_CATEGORY_NAME_LENGTH:
            raise InvalidInputException(
                f"Category name cannot exceed {MAX_CATEGORY_NAME_LENGTH} characters",
                fields={"name": "too long"},
            )
        return name
