# kudos_wall/application/use_cases/kudo_card_use_cases.py

"""
Service for kudo cards.
"""

import logging

from kudos_wall.application.dtos.kudo_card_dto import (
    KudoCardCreate,
    KudoCardCreatedOutput,
    KudoCardListOutput,
    KudoCardListQuery,
    KudoCardOutput,
)
from kudos_wall.application.ports.outbound import (
    ICategoryRepository,
    IKudoCardRepository,
    ITeamRepository,
)
from kudos_wall.domain.exceptions import ResourceNotFoundException
from kudos_wall.domain.models.kudo_card_domain_model import KudoCard, KudoCardFilter
from kudos_wall.domain.models.user_domain_model import AuthenticatedUser

logger = logging.getLogger(__name__)


class AsyncKudoCardService:
    """
    Creates and lists kudo cards. The giver is always the authenticated user.
    """

    def __init__(
            self,
            kudo_card_repository: IKudoCardRepository,
            team_repository: ITeamRepository,
            category_repository: ICategoryRepository,
    ):
        self.kudo_card_repository = kudo_card_repository
        self.team_repository = team_repository
        self.category_repository = category_repository

    async def create_kudo_card(self, giver: AuthenticatedUser, card_input: KudoCardCreate) -> KudoCardCreatedOutput:
        """
        Raises:
            ResourceNotFoundException: If the team or the category does not exist
        """
        if await self.team_repository.get(card_input.team_id) is None:
            raise ResourceNotFoundException(
                f"Team with ID '{card_input.team_id}' not found", resource_id=card_input.team_id
            )
        if await self.category_repository.get(card_input.category_id) is None:
            raise ResourceNotFoundException(
                f"Category with ID {card_input.category_id} not found", resource_id=card_input.category_id
            )

        card = await self.kudo_card_repository.create(
            KudoCard(
                id=None,
                message=card_input.message,
                recipient_name=card_input.recipient_name,
                giver_id=giver.id,
                team_id=card_input.team_id,
                category_id=card_input.category_id,
            )
        )
        logger.info(f"Kudo card {card.id} created by {giver.id}")
        return KudoCardCreatedOutput(id=card.id, success=True)

    async def list_kudo_cards(self, query: KudoCardListQuery) -> KudoCardListOutput:
        search_term = query.search_term.strip() if query.search_term else None
        cards = await self.kudo_card_repository.list(
            KudoCardFilter(
                recipient_name=query.recipient_name or None,
                team_id=query.team_id,
                category_id=query.category_id,
                search_term=search_term or None,
                sort_by=query.sort_by,
            )
        )
        return KudoCardListOutput(
            kudo_cards=[KudoCardOutput.model_validate(card) for card in cards],
            total=len(cards),
        )
