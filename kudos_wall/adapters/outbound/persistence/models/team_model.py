# kudos_wall/adapters/outbound/persistence/models/team_model.py

import uuid
from sqlalchemy import Column, String, DateTime, func
from sqlalchemy.dialects.postgresql import UUID

from kudos_wall.adapters.outbound.persistence.models.base_model import Base
from kudos_wall.domain.models.team_domain_model import Team


class TeamModel(Base):
    __tablename__ = "teams"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    def to_domain(self) -> Team:
        return Team(id=self.id, name=self.name, created_at=self.created_at, updated_at=self.updated_at)

    def __repr__(self):
        return f"<Team(id={self.id}, name={self.name})>"
