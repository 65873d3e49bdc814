import logging
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel as Schema
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hrms.core.exceptions import PersistenceError, ValidationError
from hrms.db.base import BaseModel
from hrms.utils.date_time import next_timestamp

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)
Payload = Union[Schema, Dict[str, Any]]


class EntityService(Generic[ModelType]):
    """CRUD over a single entity table.

    Lookups by id report a missing record as ``None`` (``False`` for delete)
    rather than raising. Deletes never cascade: rows that point at a deleted
    record keep their now dangling id.
    """

    model: Type[ModelType]
    entity_name: str = "Record"
    # Assigned by the store; callers can neither supply nor overwrite them
    protected_fields: Tuple[str, ...] = ("id",)

    def __init__(self, session: AsyncSession):
        self.session = session

    # ---------- Hooks ----------
    def _server_fields(self) -> Dict[str, Any]:
        """Values the store assigns on creation"""
        return {}

    def _touch(self, record: ModelType) -> None:
        if "updated_at" in self.model.__table__.c:
            record.updated_at = next_timestamp(record.updated_at)

    def _column(self, field: str):
        column = self.model.__table__.c.get(field)
        if column is None:
            raise ValidationError(f"{self.model.__name__} has no field '{field}'")
        return column

    def _values(self, data: Payload, partial: bool) -> Dict[str, Any]:
        if isinstance(data, Schema):
            values = data.model_dump(exclude_unset=partial)
        else:
            values = dict(data)
        for field in self.protected_fields:
            values.pop(field, None)
        for field, value in values.items():
            column = self._column(field)
            if value is None and not column.nullable:
                raise ValidationError(f"{self.model.__name__} field '{field}' cannot be null")
        return values

    # ---------- Getters ----------
    async def get(self, record_id: int) -> Optional[ModelType]:
        return await self.session.get(self.model, record_id)

    async def get_all(self) -> List[ModelType]:
        result = await self.session.execute(
            select(self.model).order_by(self.model.id)
        )
        return list(result.scalars().all())

    async def get_by(self, field: str, value: Any) -> List[ModelType]:
        """All records whose ``field`` equals ``value``"""
        result = await self.session.execute(
            select(self.model)
            .where(self._column(field) == value)
            .order_by(self.model.id)
        )
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(self.model)
        )
        return int(result.scalar() or 0)

    # ---------- Create / Update / Delete ----------
    async def create(self, data: Payload) -> ModelType:
        values = self._values(data, partial=False)
        values.update(self._server_fields())
        record = self.model(**values)
        try:
            self.session.add(record)
            await self.session.commit()
            await self.session.refresh(record)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error creating {self.entity_name.lower()}: {e}")
            raise PersistenceError(f"Error creating {self.entity_name.lower()}") from e

        logger.info(f"{self.entity_name} created: {record.id}")
        return record

    async def update(self, record_id: int, data: Payload) -> Optional[ModelType]:
        """Merge the supplied fields over the record; omitted fields are kept"""
        record = await self.get(record_id)
        if record is None:
            return None

        values = self._values(data, partial=True)
        try:
            for field, value in values.items():
                setattr(record, field, value)
            self._touch(record)
            await self.session.commit()
            await self.session.refresh(record)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error updating {self.entity_name.lower()} {record_id}: {e}")
            raise PersistenceError(f"Error updating {self.entity_name.lower()}") from e

        logger.info(f"{self.entity_name} updated: {record_id} ({', '.join(values) or 'no fields'})")
        return record

    async def delete(self, record_id: int) -> bool:
        record = await self.get(record_id)
        if record is None:
            return False

        try:
            await self.session.delete(record)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error deleting {self.entity_name.lower()} {record_id}: {e}")
            raise PersistenceError(f"Error deleting {self.entity_name.lower()}") from e

        logger.info(f"{self.entity_name} deleted: {record_id}")
        return True
