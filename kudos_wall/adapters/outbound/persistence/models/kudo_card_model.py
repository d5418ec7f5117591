# kudos_wall/adapters/outbound/persistence/models/kudo_card_model.py

import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from kudos_wall.adapters.outbound.persistence.models.base_model import Base
from kudos_wall.domain.models.kudo_card_domain_model import KudoCard


class KudoCardModel(Base):
    """
    A kudo card given by a user to a named recipient, tagged with a team and a category.
    """
    __tablename__ = "kudos"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    message = Column(String(500), nullable=False)
    recipient_name = Column(String(100), nullable=False, index=True)
    giver_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    team_id = Column(UUID(as_uuid=True), ForeignKey("teams.id", ondelete="CASCADE"), nullable=False)
    category_id = Column(UUID(as_uuid=True), ForeignKey("categories.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    giver = relationship("UserModel", lazy="joined")
    team = relationship("TeamModel", lazy="joined")
    category = relationship("CategoryModel", lazy="joined")

    def to_domain(self) -> KudoCard:
        return KudoCard(
            id=self.id,
            message=self.message,
            recipient_name=self.recipient_name,
            giver_id=self.giver_id,
            team_id=self.team_id,
            category_id=self.category_id,
            created_at=self.created_at,
            updated_at=self.updated_at,
            team_name=self.team.name if self.team else None,
            category_name=self.category.name if self.category else None,
            giver_email=self.giver.email if self.giver else None,
            giver_name=self.giver.name if self.giver else None,
        )

    def __repr__(self):
        return f"<KudoCard(id={self.id}, recipient={self.recipient_name})>"
