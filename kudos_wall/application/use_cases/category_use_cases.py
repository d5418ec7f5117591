# kudos_wall/application/use_cases/category_use_cases.py

"""
Service for kudos categories.

A name clash on create or update is not an error: the call succeeds with
``exists=True`` and nothing is written.
"""

import logging
from uuid import UUID

from kudos_wall.application.dtos.category_dto import (
    CategoryCreate,
    CategoryDeleteOutput,
    CategoryListOutput,
    CategoryMutationOutput,
    CategoryOutput,
    CategoryUpdate,
)
from kudos_wall.application.ports.outbound import ICategoryRepository
from kudos_wall.domain.exceptions import ResourceNotFoundException
from kudos_wall.domain.models.category_domain_model import Category

logger = logging.getLogger(__name__)


class AsyncCategoryService:

    def __init__(self, category_repository: ICategoryRepository):
        self.category_repository = category_repository

    async def create_category(self, category_input: CategoryCreate) -> CategoryMutationOutput:
        category = Category(id=None, name=category_input.name)

        if await self.category_repository.get_by_name(category.name) is not None:
            return CategoryMutationOutput(
                success=True,
                message=f"Category with name '{category.name}' already exists",
                exists=True,
            )

        category = await self.category_repository.create(category)
        logger.info(f"Category created: {category.id} ({category.name})")
        return CategoryMutationOutput(
            success=True,
            message="Category created successfully",
            category=CategoryOutput.model_validate(category),
        )

    async def list_categories(self) -> CategoryListOutput:
        categories = await self.category_repository.list()
        return CategoryListOutput(categories=[CategoryOutput.model_validate(c) for c in categories])

    async def update_category(self, category_id: UUID, category_input: CategoryUpdate) -> CategoryMutationOutput:
        """
        Raises:
            ResourceNotFoundException: If the category does not exist
        """
        category = await self.category_repository.get(category_id)
        if category is None:
            raise ResourceNotFoundException(f"Category with ID {category_id} not found", resource_id=category_id)

        new_name = Category.validate_name(category_input.name)
        clash = await self.category_repository.get_by_name(new_name)
        if clash is not None and clash.id != category.id:
            return CategoryMutationOutput(
                success=True,
                message=f"Category with name '{new_name}' already exists",
                exists=True,
            )

        category.name = new_name
        category = await self.category_repository.update(category)
        logger.info(f"Category updated: {category.id} ({category.name})")
        return CategoryMutationOutput(
            success=True,
            message="Category updated successfully",
            category=CategoryOutput.model_validate(category),
        )

    async def delete_category(self, category_id: UUID) -> CategoryDeleteOutput:
        """
        Raises:
            ResourceNotFoundException: If the category does not exist
        """
        category = await self.category_repository.get(category_id)
        if category is None:
            raise ResourceNotFoundException(f"Category with ID {category_id} not found", resource_id=category_id)

        await self.category_repository.delete(category_id)
        logger.info(f"Category deleted: {category_id}")
        return CategoryDeleteOutput(
            success=True,
            message=f"Category with ID {category_id} has been successfully deleted",
            category_name=category.name,
        )
