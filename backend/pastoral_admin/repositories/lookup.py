"""
Pastoral Admin Backend — Keyed Lookup Repository
==================================================

What:  Shared persistence for the small id + unique key lookup tables
       (`industries`, `fields_of_work`).
How:   Subclasses set `model` and `not_found`; every statement is written
       against those two attributes.
"""

from typing import Generic, List, Type, TypeVar

from sqlalchemy import delete, select, update

from pastoral_admin.exceptions import NotFoundError
from pastoral_admin.models.industry import SMALLINT_MAX
from pastoral_admin.repositories.base import BaseRepository

LookupT = TypeVar("LookupT")


class KeyedLookupRepository(BaseRepository, Generic[LookupT]):
    model: Type[LookupT]
    not_found: Type[NotFoundError]

    async def create(self, entity: LookupT) -> LookupT:
        async with self._scope() as s:
            s.add(entity)
            await s.flush()
        return entity

    async def update(self, entity: LookupT) -> None:
        async with self._scope() as s:
            await s.execute(
                update(self.model)
                .where(self.model.id == entity.id)
                .values(key=entity.key)
            )

    async def delete(self, entity_id: int) -> None:
        async with self._scope() as s:
            await s.execute(delete(self.model).where(self.model.id == entity_id))

    async def get_all(self) -> List[LookupT]:
        async with self._scope() as s:
            result = await s.execute(select(self.model).order_by(self.model.key.asc()))
            return list(result.scalars().all())

    async def get_by_id(self, entity_id: int) -> LookupT:
        # Ids are SMALLINT identities; asyncpg rejects out-of-range parameters
        if not 1 <= entity_id <= SMALLINT_MAX:
            raise self.not_found(entity_id)
        async with self._scope() as s:
            result = await s.execute(select(self.model).where(self.model.id == entity_id))
            entity = result.scalar_one_or_none()
        if entity is None:
            raise self.not_found(entity_id)
        return entity

    async def get_by_key(self, key: str) -> LookupT:
        """Exact match on the translation key."""
        async with self._scope() as s:
            result = await s.execute(select(self.model).where(self.model.key == key))
            entity = result.scalar_one_or_none()
        if entity is None:
            raise self.not_found(context={"key": key})
        return entity
