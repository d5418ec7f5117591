# kudos_wall/application/dtos/team_dto.py

from uuid import UUID
from datetime import datetime
from typing import List, Optional
from pydantic import Field

from kudos_wall.application.dtos.base_dto import CustomBaseModel


class TeamCreate(CustomBaseModel):
    name: str = Field(..., min_length=1, max_length=100, description="Unique team name.")


class TeamUpdate(CustomBaseModel):
    name: str = Field(..., min_length=1, max_length=100, description="New team name.")


class TeamOutput(CustomBaseModel):
    id: UUID
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TeamEnvelope(CustomBaseModel):
    team: TeamOutput


class TeamListOutput(CustomBaseModel):
    teams: List[TeamOutput]


class TeamDeleteOutput(CustomBaseModel):
    success: bool = True
