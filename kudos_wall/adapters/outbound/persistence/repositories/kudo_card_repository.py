# kudos_wall/adapters/outbound/persistence/repositories/kudo_card_repository.py (async version)

from typing import List
from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from kudos_wall.adapters.outbound.persistence.models.category_model import CategoryModel
from kudos_wall.adapters.outbound.persistence.models.kudo_card_model import KudoCardModel
from kudos_wall.adapters.outbound.persistence.models.team_model import TeamModel
from kudos_wall.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from kudos_wall.application.ports.outbound import IKudoCardRepository
from kudos_wall.domain.exceptions import DatabaseOperationException
from kudos_wall.domain.models.kudo_card_domain_model import KudoCard, KudoCardFilter, KudoCardSort


class AsyncKudoCardRepository(AsyncCRUDBase[KudoCardModel], IKudoCardRepository):
    """
    Kudo cards are always read together with their giver, team and category
    so the listing can expose their names.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(KudoCardModel, db)

    async def create(self, kudo_card: KudoCard) -> KudoCard:
        created = await super().create({
            "message": kudo_card.message,
            "recipient_name": kudo_card.recipient_name,
            "giver_id": kudo_card.giver_id,
            "team_id": kudo_card.team_id,
            "category_id": kudo_card.category_id,
        })
        # reload with giver, team and category joined in
        try:
            result = await self.db.execute(
                select(KudoCardModel)
                .where(KudoCardModel.id == created.id)
                .execution_options(populate_existing=True)
            )
            return result.unique().scalar_one().to_domain()
        except SQLAlchemyError as e:
            self.logger.error(f"Error reloading kudo card {created.id}: {str(e)}")
            raise DatabaseOperationException("Error reloading kudo card", original_error=e)

    async def list(self, filters: KudoCardFilter) -> List[KudoCard]:
        query = (
            select(KudoCardModel)
            .join(TeamModel, KudoCardModel.team_id == TeamModel.id)
            .join(CategoryModel, KudoCardModel.category_id == CategoryModel.id)
        )

        if filters.recipient_name:
            query = query.where(KudoCardModel.recipient_name.icontains(filters.recipient_name, autoescape=True))
        if filters.team_id:
            query = query.where(KudoCardModel.team_id == filters.team_id)
        if filters.category_id:
            query = query.where(KudoCardModel.category_id == filters.category_id)
        if filters.search_term:
            term = filters.search_term
            query = query.where(or_(
                KudoCardModel.message.icontains(term, autoescape=True),
                KudoCardModel.recipient_name.icontains(term, autoescape=True),
                TeamModel.name.icontains(term, autoescape=True),
                CategoryModel.name.icontains(term, autoescape=True),
            ))

        if filters.sort_by == KudoCardSort.OLDEST:
            query = query.order_by(KudoCardModel.created_at.asc())
        else:
            query = query.order_by(KudoCardModel.created_at.desc())

        try:
            result = await self.db.execute(query)
            return [card.to_domain() for card in result.unique().scalars().all()]
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing kudo cards: {str(e)}")
            raise DatabaseOperationException("Error listing kudo cards", original_error=e)
