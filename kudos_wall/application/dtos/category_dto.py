# kudos_wall/application/dtos/category_dto.py

from uuid import UUID
from datetime import datetime
from typing import List, Optional
from pydantic import Field, field_validator

from kudos_wall.application.dtos.base_dto import CustomBaseModel
from kudos_wall.domain.models.category_domain_model import MAX_CATEGORY_NAME_LENGTH


class CategoryCreate(CustomBaseModel):
    name: str = Field(..., description="Category name, 1 to 50 characters after trimming.")

    @field_validator("name")
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Category name is required")
        if len(v) > MAX_CATEGORY_NAME_LENGTH:
            raise ValueError(f"Category name must be at most {MAX_CATEGORY_NAME_LENGTH} characters")
        return v


class CategoryUpdate(CategoryCreate):
    pass


class CategoryOutput(CustomBaseModel):
    id: UUID
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CategoryListOutput(CustomBaseModel):
    categories: List[CategoryOutput]


class CategoryMutationOutput(CustomBaseModel):
    """
    Result of a create or update.

    ``exists`` is set when the requested name is already taken; in that case
    nothing was written and ``category`` is omitted.
    """
    success: bool = True
    message: str
    exists: Optional[bool] = None
    category: Optional[CategoryOutput] = None


class CategoryDeleteOutput(CustomBaseModel):
    success: bool = True
    message: str
    category_name: str
