# kudos_wall/adapters/outbound/persistence/models/category_model.py

import uuid
from sqlalchemy import Column, String, DateTime, func
from sqlalchemy.dialects.postgresql import UUID

from kudos_wall.adapters.outbound.persistence.models.base_model import Base
from kudos_wall.domain.models.category_domain_model import Category


class CategoryModel(Base):
    __tablename__ = "categories"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(50), unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    def to_domain(self) -> Category:
        return Category(id=self.id, name=self.name, created_at=self.created_at, updated_at=self.updated_at)

    def __repr__(self):
        return f"<Category(id={self.id}, name={self.name})>"
