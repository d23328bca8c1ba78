"""Generic CRUD Repository — async create/read/update/delete over one ORM model.

Invariants:
    - find_* return None / empty lists for absent rows; they never raise "not found"
    - Ids outside 1..MAX_ID are absent: no query is issued for them
    - Writes commit immediately and refresh the row (generated id visible to callers)
    - IntegrityError -> ReferenceConflictError, other SQLAlchemyError -> DatabaseError,
      session rolled back first

Design Decisions:
    - include names relationships to eager-load with selectinload; relationships
      are lazy="raise" so nothing is loaded implicitly
    - delete issues a DELETE statement and reads rowcount: no ORM cascade involved
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.domain_types import MAX_ID
from app.core.errors import DatabaseError, ReferenceConflictError
from app.db.base import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


def storable_id(id: int) -> bool:
    """True if the integer primary key column can hold id."""
    return 0 < id <= MAX_ID


class CrudRepository(Generic[ModelType]):
    """CRUD operations for one model.

    Usage:
        members = CrudRepository(Member, "Member")
        member = await members.find_by_id(db, 1, include=("plan",))
    """

    def __init__(self, model: type[ModelType], resource_name: str):
        self.model = model
        self.resource_name = resource_name

    @asynccontextmanager
    async def storage_errors(self, db: AsyncSession, operation: str):
        """Map store failures raised inside the block to AcademiaErrors."""
        try:
            yield
        except IntegrityError as e:
            await db.rollback()
            logger.warning(
                f"{self.resource_name} {operation} violated a constraint: {e.orig}",
                extra={"entity": self.resource_name, "operation": operation},
            )
            raise ReferenceConflictError(
                f"{self.resource_name} {operation} violates a plan reference",
            ) from e
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(
                f"{self.resource_name} {operation} failed: {e}",
                extra={"entity": self.resource_name, "operation": operation},
            )
            raise DatabaseError(operation) from e

    def _select(self, include: Sequence[str]):
        stmt = select(self.model)
        for relation in include:
            stmt = stmt.options(selectinload(getattr(self.model, relation)))
        return stmt

    async def find_all(
        self, db: AsyncSession, include: Sequence[str] = (),
    ) -> list[ModelType]:
        async with self.storage_errors(db, "list"):
            result = await db.execute(
                self._select(include).order_by(self.model.id),
            )
            return list(result.scalars().all())

    async def find_by_id(
        self, db: AsyncSession, id: int, include: Sequence[str] = (),
    ) -> ModelType | None:
        if not storable_id(id):
            return None
        async with self.storage_errors(db, "get"):
            result = await db.execute(
                self._select(include).where(self.model.id == id),
            )
            return result.scalar_one_or_none()

    async def create(self, db: AsyncSession, data: dict[str, Any]) -> ModelType:
        async with self.storage_errors(db, "create"):
            obj = self.model(**data)
            db.add(obj)
            await db.commit()
            await db.refresh(obj)
            return obj

    async def update(
        self, db: AsyncSession, id: int, data: dict[str, Any],
    ) -> ModelType | None:
        """Apply only the keys in data. Returns None if the row does not exist."""
        if not storable_id(id):
            return None
        async with self.storage_errors(db, "update"):
            obj = await db.get(self.model, id)
            if obj is None:
                return None
            for key, value in data.items():
                setattr(obj, key, value)
            await db.commit()
            await db.refresh(obj)
            return obj

    async def delete(self, db: AsyncSession, id: int) -> bool:
        """Delete by primary key. Returns False if no row matched."""
        if not storable_id(id):
            return False
        async with self.storage_errors(db, "delete"):
            result = await db.execute(
                delete(self.model).where(self.model.id == id),
            )
            await db.commit()
            return result.rowcount > 0

    async def clear(self, db: AsyncSession) -> int:
        """Delete every row. Returns the number of rows removed."""
        async with self.storage_errors(db, "clear"):
            result = await db.execute(delete(self.model))
            await db.commit()
            return result.rowcount
