# kudos_wall/adapters/outbound/persistence/repositories/team_repository.py (async version)

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from kudos_wall.adapters.outbound.persistence.models.team_model import TeamModel
from kudos_wall.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from kudos_wall.application.ports.outbound import ITeamRepository
from kudos_wall.domain.exceptions import ResourceNotFoundException
from kudos_wall.domain.models.team_domain_model import Team


class AsyncTeamRepository(AsyncCRUDBase[TeamModel], ITeamRepository):

    def __init__(self, db: AsyncSession):
        super().__init__(TeamModel, db)

    async def get(self, team_id: UUID) -> Optional[Team]:
        team = await super().get(team_id)
        return team.to_domain() if team else None

    async def get_by_name(self, name: str) -> Optional[Team]:
        team = await self.get_by_field("name", name)
        return team.to_domain() if team else None

    async def list(self) -> List[Team]:
        return [t.to_domain() for t in await self.get_multi(order_by=TeamModel.name)]

    async def create(self, team: Team) -> Team:
        created = await super().create({"name": team.name})
        return created.to_domain()

    async def update(self, team: Team) -> Team:
        db_obj = await super().get(team.id)
        if db_obj is None:
            raise ResourceNotFoundException(f"Team with ID '{team.id}' not found", resource_id=team.id)
        updated = await super().update(db_obj, {"name": team.name})
        return updated.to_domain()

    async def delete(self, team_id: UUID) -> None:
        await self.remove(team_id)
