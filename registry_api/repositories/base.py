from __future__ import annotations

from typing import Any, Generic, Iterable, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import Executable, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from registry_api.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository:
    """
    Base class for repositories providing common helpers.

    Repositories never catch database errors: constraint violations raised on
    commit propagate to the caller and the request session is rolled back by
    the session dependency.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def execute(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute a SQLAlchemy statement."""
        return await self.session.execute(statement, params or {})

    async def scalars(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute and return scalars."""
        result = await self.execute(statement, params)
        return result.scalars()

    async def scalar_one_or_none(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute and return a single scalar or None."""
        result = await self.execute(statement, params)
        return result.scalar_one_or_none()

    async def rows(self, statement: Executable) -> list:
        """Execute a multi-column select and return its rows."""
        result = await self.execute(statement)
        return list(result.all())

    async def commit(self) -> None:
        """Commit current transaction."""
        await self.session.commit()

    async def add_all(self, entities: Iterable[Any]) -> None:
        """Add multiple entities to session."""
        self.session.add_all(list(entities))

    async def add(self, entity: Any) -> None:
        """Add a single entity to session."""
        self.session.add(entity)


class CrudRepository(BaseRepository, Generic[ModelT]):
    """
    Repository with get/create/update/delete for a single-table entity.

    Subclasses set ``model`` and add their own listing queries. Updates have
    replace (PUT) semantics: every field of the payload is written.
    """

    model: Type[ModelT]

    @property
    def pk(self):
        return self.model.__mapper__.primary_key[0]

    async def get(self, entity_id: int) -> Optional[ModelT]:
        stmt = select(self.model).where(self.pk == entity_id)
        return await self.scalar_one_or_none(stmt)

    async def create(self, payload: BaseModel) -> ModelT:
        row = self.model(**payload.model_dump())
        await self.add(row)
        await self.commit()
        await self.session.refresh(row)
        return row

    async def update(self, entity_id: int, payload: BaseModel) -> Optional[ModelT]:
        row = await self.get(entity_id)
        if row is None:
            return None
        for field, value in payload.model_dump().items():
            setattr(row, field, value)
        await self.commit()
        await self.session.refresh(row)
        return row

    async def delete(self, entity_id: int) -> bool:
        result = await self.execute(delete(self.model).where(self.pk == entity_id))
        await self.commit()
        return bool(result.rowcount)

    async def count(self) -> int:
        result = await self.execute(select(func.count()).select_from(self.model))
        return int(result.scalar_one())
