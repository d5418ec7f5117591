# kudos_wall/adapters/inbound/api/v1/endpoints/kudo_card_endpoint.py (async version)

from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query, status

from kudos_wall.adapters.inbound.api.deps import get_current_user, get_kudo_card_service
from kudos_wall.adapters.outbound.security.permissions import require_roles
from kudos_wall.application.dtos.kudo_card_dto import (
    KudoCardCreate,
    KudoCardCreatedOutput,
    KudoCardListOutput,
    KudoCardListQuery,
)
from kudos_wall.application.use_cases.kudo_card_use_cases import AsyncKudoCardService
from kudos_wall.domain.models.kudo_card_domain_model import KudoCardSort
from kudos_wall.domain.models.user_domain_model import AuthenticatedUser, UserRole

router = APIRouter()


@router.post(
    "",
    response_model=KudoCardCreatedOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Create Kudo Card",
    description="Gives a kudo card. The authenticated user is recorded as the giver.",
    responses={404: {"description": "Team or category not found"}},
)
async def create_kudo_card(
        card_input: KudoCardCreate,
        current_user: AuthenticatedUser = Depends(require_roles(UserRole.TECH_LEAD, UserRole.ADMIN)),
        service: AsyncKudoCardService = Depends(get_kudo_card_service),
):
    return await service.create_kudo_card(current_user, card_input)


@router.get(
    "",
    response_model=KudoCardListOutput,
    summary="List Kudo Cards",
    description="Lists kudo cards with optional filters. `searchTerm` matches message, recipient, team or category.",
    dependencies=[Depends(get_current_user)],
)
async def list_kudo_cards(
        recipient_name: Optional[str] = Query(None, alias="recipientName"),
        team_id: Optional[UUID] = Query(None, alias="teamId"),
        category_id: Optional[UUID] = Query(None, alias="categoryId"),
        search_term: Optional[str] = Query(None, alias="searchTerm"),
        sort_by: KudoCardSort = Query(KudoCardSort.RECENT, alias="sortBy"),
        service: AsyncKudoCardService = Depends(get_kudo_card_service),
):
    query = KudoCardListQuery(
        recipient_name=recipient_name,
        team_id=team_id,
        category_id=category_id,
        search_term=search_term,
        sort_by=sort_by,
    )
    return await service.list_kudo_cards(query)
