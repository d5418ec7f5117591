# kudos_wall/application/dtos/kudo_card_dto.py

from uuid import UUID
from datetime import datetime
from typing import List, Optional
from pydantic import Field, field_validator

from kudos_wall.application.dtos.base_dto import CustomBaseModel
from kudos_wall.domain.models.kudo_card_domain_model import (
    KudoCardSort,
    MAX_MESSAGE_LENGTH,
    MAX_RECIPIENT_NAME_LENGTH,
)


class KudoCardCreate(CustomBaseModel):
    recipient_name: str = Field(..., min_length=1, max_length=MAX_RECIPIENT_NAME_LENGTH)
    team_id: UUID
    category_id: UUID
    message: str = Field(..., min_length=1, max_length=MAX_MESSAGE_LENGTH)

    @field_validator("recipient_name", "message")
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class KudoCardCreatedOutput(CustomBaseModel):
    id: UUID
    success: bool = True


class KudoCardListQuery(CustomBaseModel):
    recipient_name: Optional[str] = None
    team_id: Optional[UUID] = None
    category_id: Optional[UUID] = None
    search_term: Optional[str] = None
    sort_by: KudoCardSort = KudoCardSort.RECENT


class KudoCardOutput(CustomBaseModel):
    id: UUID
    message: str
    recipient_name: str
    giver_id: UUID
    giver_email: Optional[str] = None
    giver_name: Optional[str] = None
    team_id: UUID
    team_name: Optional[str] = None
    category_id: UUID
    category_name: Optional[str] = None
    created_at: Optional[datetime] = None


class KudoCardListOutput(CustomBaseModel):
    kudo_cards: List[KudoCardOutput]
    total: int
