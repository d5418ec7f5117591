# kudos_wall/adapters/outbound/persistence/repositories/user_repository.py (async version)

from typing import Any, Dict, List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from kudos_wall.adapters.outbound.persistence.models.user_model import UserModel
from kudos_wall.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from kudos_wall.application.ports.outbound import IUserRepository
from kudos_wall.domain.exceptions import ResourceNotFoundException
from kudos_wall.domain.models.user_domain_model import User, UserRole


class AsyncUserRepository(AsyncCRUDBase[UserModel], IUserRepository):
    """
    SQLAlchemy implementation of the user lookup port.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(UserModel, db)

    async def find_by_email(self, email: str) -> Optional[User]:
        user = await self.get_by_field("email", email)
        return user.to_domain() if user else None

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        user = await self.get(user_id)
        return user.to_domain() if user else None

    async def create(self, user_data: Dict[str, Any]) -> User:
        user = await super().create({
            "email": user_data["email"],
            "name": user_data["name"],
            "password": user_data["password"],
            "role": user_data.get("role", UserRole.TEAM_MEMBER),
        })
        return user.to_domain()

    async def update_role(self, user_id: UUID, new_role: UserRole) -> User:
        user = await self.get(user_id)
        if user is None:
            raise ResourceNotFoundException("User not found", resource_id=user_id)
        user = await self.update(user, {"role": new_role})
        return user.to_domain()

    async def count_users(self) -> int:
        return await self.count()

    async def list_by_role(self, role: Optional[UserRole] = None) -> List[User]:
        users = await self.get_multi(order_by=UserModel.name, role=role)
        return [u.to_domain() for u in users]
