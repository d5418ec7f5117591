# kudos_wall/application/use_cases/user_use_cases.py

"""
Service for user role management.
"""

import logging
from typing import Optional
from uuid import UUID

from kudos_wall.application.dtos.user_dto import (
    TeamMemberOutput,
    TeamMembersOutput,
    UserListItem,
    UserListOutput,
    UserRoleOutput,
)
from kudos_wall.application.ports.outbound import IUserRepository
from kudos_wall.domain.exceptions import ResourceNotFoundException
from kudos_wall.domain.models.user_domain_model import UserRole

logger = logging.getLogger(__name__)


class AsyncUserService:
    """
    Service for administrative operations over users.
    """

    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository

    async def update_user_role(self, user_id: UUID, new_role: UserRole) -> UserRoleOutput:
        """
        Change a user's role.

        An unchanged role is returned as-is without touching storage.

        Raises:
            ResourceNotFoundException: If the user does not exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException("User not found", resource_id=user_id)

        if user.role == new_role:
            logger.debug(f"User {user_id} already has role {new_role.value}")
        else:
            user = await self.user_repository.update_role(user_id, new_role)
            logger.info(f"User {user_id} role changed to {new_role.value}")

        return UserRoleOutput(id=user.id, email=user.email, role=user.role, updated_at=user.updated_at)

    async def list_team_members(self) -> TeamMembersOutput:
        users = await self.user_repository.list_by_role(UserRole.TEAM_MEMBER)
        return TeamMembersOutput(
            team_members=[
                TeamMemberOutput(id=u.id, name=u.name, email=u.email, role=u.role) for u in users
            ]
        )

    async def list_users_by_role(self, role: Optional[UserRole] = None) -> UserListOutput:
        users = await self.user_repository.list_by_role(role)
        return UserListOutput(
            users=[
                UserListItem(id=u.id, email=u.email, name=u.name, role=u.role, created_at=u.created_at)
                for u in users
            ]
        )
