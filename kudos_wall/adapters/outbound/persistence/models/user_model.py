# kudos_wall/adapters/outbound/persistence/models/user_model.py

import uuid
from sqlalchemy import Column, String, DateTime, Enum, func
from sqlalchemy.dialects.postgresql import UUID

from kudos_wall.adapters.outbound.persistence.models.base_model import Base
from kudos_wall.domain.models.user_domain_model import User, UserRole


class UserModel(Base):
    """
    Represents a system user.

    Attributes:
        id: Unique identifier (UUID)
        email: Login handle, unique
        name: Display name
        password: bcrypt hash
        role: TEAM_MEMBER, TECH_LEAD or ADMIN
    """
    __tablename__ = "users"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(100), nullable=False)
    password = Column(String(255), nullable=False)
    role = Column(Enum(UserRole, name="user_role"), nullable=False, default=UserRole.TEAM_MEMBER)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    def to_domain(self) -> User:
        return User(
            id=self.id,
            email=self.email,
            name=self.name,
            password=self.password,
            role=self.role,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
