"""
QuanThink Backend: Generic Entity Store
========================================

What:  CRUD over a single ORM model using the request's AsyncSession.
Who:   Subclassed by CalculationStore and UserStore; used by services.

Write Semantics:
    create/update flush immediately so generated ids and constraint
    violations are known before the service returns. The commit itself
    belongs to get_db_session, once per request.

    When a flush fails the store rolls the session back before raising,
    so the session is left usable and no partial write can be committed.
"""

import logging
from typing import Any, ClassVar, Generic, List, Mapping, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from quanthink.database import Base
from quanthink.exceptions import StorageError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class EntityStore(Generic[ModelT]):
    """
    Key-value persistence for one entity type.

    Subclasses set `model` to the ORM class they store. The model must
    have an integer primary key named `id`.
    """

    model: ClassVar[Type[Any]]

    def __init__(self, session: AsyncSession):
        self.session = session

    @property
    def resource_name(self) -> str:
        return self.model.__tablename__

    async def get_all(self) -> List[ModelT]:
        """Every stored record, ordered by id. Empty list if none."""
        try:
            result = await self.session.execute(
                select(self.model).order_by(self.model.id)
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise self._storage_error("get_all", e)

    async def get_by_id(self, record_id: int) -> Optional[ModelT]:
        """The record with this id, or None."""
        try:
            return await self.session.get(self.model, record_id)
        except SQLAlchemyError as e:
            raise self._storage_error("get_by_id", e, record_id=record_id)

    async def create(self, fields: Mapping[str, Any]) -> ModelT:
        """
        Persist a new record and return it with its assigned id.

        Raises:
            StorageError: The insert failed. Subclasses may translate
                constraint violations into domain errors first.
        """
        record = self.model(**fields)
        self.session.add(record)
        try:
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            self.on_integrity_error(e, fields)
            raise self._storage_error("create", e)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise self._storage_error("create", e)
        logger.info("Created %s %s", self.resource_name, record.id)
        return record

    async def update(self, record_id: int, fields: Mapping[str, Any]) -> Optional[ModelT]:
        """
        Replace the fields of an existing record.

        Returns:
            The updated record, or None if no record has this id.
        """
        record = await self.get_by_id(record_id)
        if record is None:
            return None

        for name, value in fields.items():
            setattr(record, name, value)
        try:
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            self.on_integrity_error(e, fields)
            raise self._storage_error("update", e, record_id=record_id)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise self._storage_error("update", e, record_id=record_id)
        logger.info("Updated %s %s", self.resource_name, record_id)
        return record

    async def delete(self, record_id: int) -> None:
        """Remove the record if present. An unknown id is a no-op."""
        record = await self.get_by_id(record_id)
        if record is None:
            return
        try:
            await self.session.delete(record)
            await self.session.flush()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise self._storage_error("delete", e, record_id=record_id)
        logger.info("Deleted %s %s", self.resource_name, record_id)

    def on_integrity_error(self, error: IntegrityError, fields: Mapping[str, Any]) -> None:
        """Hook for subclasses to raise a domain error for a constraint violation."""

    def _storage_error(
        self, operation: str, error: Exception, record_id: Optional[int] = None
    ) -> StorageError:
        context = {
            "resource": self.resource_name,
            "operation": operation,
            "original_error": type(error).__name__,
        }
        if record_id is not None:
            context["record_id"] = record_id
        logger.error(
            "Storage failure during %s on %s: %s",
            operation, self.resource_name, str(error),
        )
        return StorageError(context=context)
