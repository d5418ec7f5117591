# kudos_wall/application/use_cases/team_use_cases.py

"""
Service for team management.
"""

import logging
from uuid import UUID

from kudos_wall.application.dtos.team_dto import (
    TeamCreate,
    TeamDeleteOutput,
    TeamEnvelope,
    TeamListOutput,
    TeamOutput,
    TeamUpdate,
)
from kudos_wall.application.ports.outbound import ITeamRepository
from kudos_wall.domain.exceptions import ResourceAlreadyExistsException, ResourceNotFoundException
from kudos_wall.domain.models.team_domain_model import Team

logger = logging.getLogger(__name__)


class AsyncTeamService:
    """
    Team CRUD. Team names are unique.
    """

    def __init__(self, team_repository: ITeamRepository):
        self.team_repository = team_repository

    async def create_team(self, team_input: TeamCreate) -> TeamEnvelope:
        """
        Raises:
            ResourceAlreadyExistsException: If a team with the same name exists
        """
        team = Team(id=None, name=team_input.name)

        if await self.team_repository.get_by_name(team.name) is not None:
            raise ResourceAlreadyExistsException(f"Team with name '{team.name}' already exists")

        team = await self.team_repository.create(team)
        logger.info(f"Team created: {team.id} ({team.name})")
        return TeamEnvelope(team=TeamOutput.model_validate(team))

    async def list_teams(self) -> TeamListOutput:
        teams = await self.team_repository.list()
        return TeamListOutput(teams=[TeamOutput.model_validate(t) for t in teams])

    async def update_team(self, team_id: UUID, team_input: TeamUpdate) -> TeamEnvelope:
        """
        Raises:
            ResourceNotFoundException: If the team does not exist
            ResourceAlreadyExistsException: If another team already uses the name
        """
        team = await self.team_repository.get(team_id)
        if team is None:
            raise ResourceNotFoundException(f"Team with ID '{team_id}' not found", resource_id=team_id)

        team.rename(team_input.name)

        clash = await self.team_repository.get_by_name(team.name)
        if clash is not None and clash.id != team.id:
            raise ResourceAlreadyExistsException(f"Team with name '{team.name}' already exists")

        team = await self.team_repository.update(team)
        logger.info(f"Team updated: {team.id} ({team.name})")
        return TeamEnvelope(team=TeamOutput.model_validate(team))

    async def delete_team(self, team_id: UUID) -> TeamDeleteOutput:
        """
        Raises:
            ResourceNotFoundException: If the team does not exist
        """
        if await self.team_repository.get(team_id) is None:
            raise ResourceNotFoundException(f"Team with ID '{team_id}' not found", resource_id=team_id)

        await self.team_repository.delete(team_id)
        logger.info(f"Team deleted: {team_id}")
        return TeamDeleteOutput(success=True)
