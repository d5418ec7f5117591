# kudos_wall/adapters/inbound/api/v1/endpoints/team_endpoint.py (async version)

from uuid import UUID
from fastapi import APIRouter, Depends, status

from kudos_wall.adapters.inbound.api.deps import get_current_user, get_team_service
from kudos_wall.adapters.outbound.security.permissions import require_roles
from kudos_wall.application.dtos.team_dto import (
    TeamCreate,
    TeamDeleteOutput,
    TeamEnvelope,
    TeamListOutput,
    TeamUpdate,
)
from kudos_wall.application.use_cases.team_use_cases import AsyncTeamService
from kudos_wall.domain.models.user_domain_model import UserRole

router = APIRouter()


@router.post(
    "",
    response_model=TeamEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create Team",
    responses={409: {"description": "Team name already in use"}},
    dependencies=[Depends(require_roles(UserRole.ADMIN))],
)
async def create_team(team_input: TeamCreate, service: AsyncTeamService = Depends(get_team_service)):
    return await service.create_team(team_input)


@router.get(
    "",
    response_model=TeamListOutput,
    summary="List Teams",
    dependencies=[Depends(get_current_user)],
)
async def list_teams(service: AsyncTeamService = Depends(get_team_service)):
    return await service.list_teams()


@router.put(
    "/{team_id}",
    response_model=TeamEnvelope,
    summary="Update Team",
    responses={404: {"description": "Team not found"}, 409: {"description": "Team name already in use"}},
    dependencies=[Depends(require_roles(UserRole.ADMIN))],
)
async def update_team(
        team_id: UUID,
        team_input: TeamUpdate,
        service: AsyncTeamService = Depends(get_team_service),
):
    return await service.update_team(team_id, team_input)


@router.delete(
    "/{team_id}",
    response_model=TeamDeleteOutput,
    summary="Delete Team",
    responses={404: {"description": "Team not found"}},
    dependencies=[Depends(require_roles(UserRole.ADMIN))],
)
async def delete_team(team_id: UUID, service: AsyncTeamService = Depends(get_team_service)):
    return await service.delete_team(team_id)
