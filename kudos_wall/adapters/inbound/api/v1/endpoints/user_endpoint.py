# kudos_wall/adapters/inbound/api/v1/endpoints/user_endpoint.py (async version)

from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query

from kudos_wall.adapters.inbound.api.deps import get_user_service
from kudos_wall.adapters.outbound.security.permissions import require_roles
from kudos_wall.application.dtos.user_dto import (
    TeamMembersOutput,
    UpdateUserRoleInput,
    UserListOutput,
    UserRoleOutput,
)
from kudos_wall.application.use_cases.user_use_cases import AsyncUserService
from kudos_wall.domain.models.user_domain_model import UserRole

router = APIRouter()


@router.get(
    "",
    response_model=UserListOutput,
    summary="List Users - Optionally filtered by role",
    dependencies=[Depends(require_roles(UserRole.ADMIN))],
)
async def list_users(
        role: Optional[UserRole] = Query(None, description="Only users holding this role."),
        service: AsyncUserService = Depends(get_user_service),
):
    return await service.list_users_by_role(role)


@router.get(
    "/team-members",
    response_model=TeamMembersOutput,
    summary="List Team Members - Users with the TEAM_MEMBER role",
    dependencies=[Depends(require_roles(UserRole.ADMIN))],
)
async def list_team_members(service: AsyncUserService = Depends(get_user_service)):
    return await service.list_team_members()


@router.patch(
    "/{user_id}/role",
    response_model=UserRoleOutput,
    summary="Update User Role",
    description="Changes the role of a user. Role names are case-sensitive.",
    responses={404: {"description": "User not found"}},
    dependencies=[Depends(require_roles(UserRole.ADMIN))],
)
async def update_user_role(
        user_id: UUID,
        role_input: UpdateUserRoleInput,
        service: AsyncUserService = Depends(get_user_service),
):
    return await service.update_user_role(user_id, role_input.new_role)
