# kudos_wall/adapters/outbound/persistence/repositories/base_repository.py (async version)

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
import logging

from kudos_wall.adapters.outbound.persistence.models.base_model import Base
from kudos_wall.domain.exceptions import (
    ResourceNotFoundException,
    ResourceAlreadyExistsException,
    DatabaseOperationException
)

# Define generic type for SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)


class AsyncCRUDBase(Generic[ModelType]):
    """
    Async base class for implementing the Repository pattern.

    Each instance is bound to one session for the lifetime of a request and
    provides generic CRUD operations with consistent error handling.

    Attributes:
        model: SQLAlchemy model class
        db: Async session used by every operation
        logger: Configured logger for the class
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        self.model = model
        self.db = db
        self.logger = logging.getLogger(f"{__name__}.{model.__name__}")

    async def get(self, id: Any) -> Optional[ModelType]:
        """
        Get an entity by ID.

        Returns:
            Entity found or None if it doesn't exist
        """
        return await self._get_by_id(id)

    async def _get_by_id(self, id: Any) -> Optional[ModelType]:
        try:
            result = await self.db.execute(select(self.model).where(self.model.id == id))
            return result.unique().scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching {self.model.__name__} with ID {id}: {str(e)}")
            raise DatabaseOperationException(
                f"Error fetching {self.model.__name__}",
                original_error=e
            )

    async def get_by_field(self, field_name: str, value: Any) -> Optional[ModelType]:
        """
        Get an entity by the value of a specific field.

        Raises:
            DatabaseOperationException: If an error occurs in the query
        """
        try:
            query = select(self.model).where(getattr(self.model, field_name) == value)
            result = await self.db.execute(query)
            return result.unique().scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching {self.model.__name__} by {field_name}: {str(e)}")
            raise DatabaseOperationException(
                f"Error fetching {self.model.__name__} by {field_name}",
                original_error=e
            )

    async def get_multi(self, *, order_by: Any = None, **filters) -> List[ModelType]:
        """
        Get every entity matching the equality filters.

        Raises:
            DatabaseOperationException: If an error occurs in the query
        """
        try:
            query = select(self.model)
            for field, value in filters.items():
                if hasattr(self.model, field) and value is not None:
                    query = query.where(getattr(self.model, field) == value)
            if order_by is not None:
                query = query.order_by(order_by)

            result = await self.db.execute(query)
            return list(result.unique().scalars().all())
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing {self.model.__name__}s: {str(e)}")
            raise DatabaseOperationException(
                f"Error listing {self.model.__name__}s",
                original_error=e
            )

    async def create(self, obj_in: Dict[str, Any]) -> ModelType:
        """
        Create a new entity.

        Raises:
            ResourceAlreadyExistsException: If a uniqueness constraint is violated
            DatabaseOperationException: If another database error occurs
        """
        try:
            db_obj = self.model(**obj_in)
            self.db.add(db_obj)
            await self.db.commit()
            await self.db.refresh(db_obj)

            self.logger.info(f"{self.model.__name__} created with ID: {db_obj.id}")
            return db_obj

        except IntegrityError as e:
            await self.db.rollback()
            error_msg = str(e).lower()
            if 'unique' in error_msg or 'duplicate' in error_msg:
                self.logger.warning(f"Attempt to create duplicate {self.model.__name__}")
                raise ResourceAlreadyExistsException(
                    f"{self.model.__name__} with these data already exists"
                )
            self.logger.error(f"Integrity error creating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(original_error=e)

        except SQLAlchemyError as e:
            await self.db.rollback()
            self.logger.error(f"Error creating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                f"Error creating {self.model.__name__}",
                original_error=e
            )

    async def update(self, db_obj: ModelType, obj_in: Dict[str, Any]) -> ModelType:
        """
        Update an existing entity with the given field values.

        Raises:
            ResourceAlreadyExistsException: If the update violates a uniqueness constraint
            DatabaseOperationException: If another database error occurs
        """
        try:
            for field, value in obj_in.items():
                if hasattr(db_obj, field):
                    setattr(db_obj, field, value)

            self.db.add(db_obj)
            await self.db.commit()
            await self.db.refresh(db_obj)

            self.logger.info(f"{self.model.__name__} with ID {db_obj.id} updated")
            return db_obj

        except IntegrityError as e:
            await self.db.rollback()
            error_msg = str(e).lower()
            if 'unique' in error_msg or 'duplicate' in error_msg:
                self.logger.warning(f"Uniqueness violation updating {self.model.__name__}")
                raise ResourceAlreadyExistsException(
                    f"Could not update {self.model.__name__}: value already exists"
                )
            self.logger.error(f"Integrity error updating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(original_error=e)

        except SQLAlchemyError as e:
            await self.db.rollback()
            self.logger.error(f"Error updating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                f"Error updating {self.model.__name__}",
                original_error=e
            )

    async def remove(self, id: Any) -> ModelType:
        """
        Remove an entity by ID.

        Raises:
            ResourceNotFoundException: If the entity doesn't exist
            DatabaseOperationException: If an error occurs during removal
        """
        obj = await self._get_by_id(id)
        if not obj:
            raise ResourceNotFoundException(
                f"{self.model.__name__} with ID {id} not found",
                resource_id=id
            )

        try:
            await self.db.delete(obj)
            await self.db.commit()

            self.logger.info(f"{self.model.__name__} with ID {id} removed")
            return obj

        except SQLAlchemyError as e:
            await self.db.rollback()
            self.logger.error(f"Error removing {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                f"Error removing {self.model.__name__}",
                original_error=e
            )

    async def count(self, **filters) -> int:
        """
        Count the entities matching the equality filters.

        Raises:
            DatabaseOperationException: If an error occurs in the query
        """
        try:
            query = select(func.count()).select_from(self.model)
            for field, value in filters.items():
                if hasattr(self.model, field) and value is not None:
                    query = query.where(getattr(self.model, field) == value)

            result = await self.db.execute(query)
            return result.scalar_one()

        except SQLAlchemyError as e:
            self.logger.error(f"Error counting {self.model.__name__}s: {str(e)}")
            raise DatabaseOperationException(
                f"Error counting {self.model.__name__}s",
                original_error=e
            )
