# kudos_wall/adapters/outbound/persistence/repositories/category_repository.py (async version)

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from kudos_wall.adapters.outbound.persistence.models.category_model import CategoryModel
from kudos_wall.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from kudos_wall.application.ports.outbound import ICategoryRepository
from kudos_wall.domain.exceptions import ResourceNotFoundException
from kudos_wall.domain.models.category_domain_model import Category


class AsyncCategoryRepository(AsyncCRUDBase[CategoryModel], ICategoryRepository):

    def __init__(self, db: AsyncSession):
        super().__init__(CategoryModel, db)

    async def get(self, category_id: UUID) -> Optional[Category]:
        category = await super().get(category_id)
        return category.to_domain() if category else None

    async def get_by_name(self, name: str) -> Optional[Category]:
        category = await self.get_by_field("name", name)
        return category.to_domain() if category else None

    async def list(self) -> List[Category]:
        return [c.to_domain() for c in await self.get_multi(order_by=CategoryModel.name)]

    async def create(self, category: Category) -> Category:
        created = await super().create({"name": category.name})
        return created.to_domain()

    async def update(self, category: Category) -> Category:
        db_obj = await super().get(category.id)
        if db_obj is None:
            raise ResourceNotFoundException(
                f"Category with ID {category.id} not found", resource_id=category.id
            )
        updated = await super().update(db_obj, {"name": category.name})
        return updated.to_domain()

    async def delete(self, category_id: UUID) -> None:
        await self.remove(category_id)
