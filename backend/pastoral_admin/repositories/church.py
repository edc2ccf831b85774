"""
Pastoral Admin Backend — Church Repository
============================================

What:  Persistence adapter for the `church` table.
How:   list() and count() build their WHERE clause from the same helper, so a
       count always describes exactly the rows a list with the same filters
       (minus pagination) would return.

Query Shapes:
    get_by_name:  WHERE name ILIKE '%<name>%' [AND id != :exclude_id]
                  ORDER BY <exact match first>, name LIMIT 1
    list:         WHERE <filters> ORDER BY name ASC LIMIT :limit OFFSET :offset
    count:        SELECT count(*) WHERE <filters>
"""

import uuid
from typing import List, Optional

from sqlalchemy import Select, case, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pastoral_admin.exceptions import ChurchNotFoundError
from pastoral_admin.models.church import Church
from pastoral_admin.repositories.base import BaseRepository
from pastoral_admin.schemas.church import ChurchFilters


class ChurchRepository(BaseRepository):
    """
    Church persistence.

    Lookups raise ChurchNotFoundError on no rows; list() returns an empty
    list instead, since an empty page is a normal result.
    """

    async def create(self, church: Church, session: Optional[AsyncSession] = None) -> Church:
        async with self._scope(session) as s:
            s.add(church)
            await s.flush()
        return church

    async def update(self, church: Church) -> None:
        """Full replace of every mutable column, keyed by church.id."""
        async with self._scope() as s:
            await s.execute(
                update(Church)
                .where(Church.id == church.id)
                .values(
                    name=church.name,
                    diocese=church.diocese,
                    parish_number=church.parish_number,
                    website_url=church.website_url,
                    phone_number=church.phone_number,
                    address_id=church.address_id,
                    is_archdiocese=church.is_archdiocese,
                    is_active=church.is_active,
                )
            )

    async def delete(self, church_id: uuid.UUID) -> None:
        async with self._scope() as s:
            await s.execute(delete(Church).where(Church.id == church_id))

    async def get_by_id(self, church_id: uuid.UUID) -> Church:
        async with self._scope() as s:
            result = await s.execute(select(Church).where(Church.id == church_id))
            church = result.scalar_one_or_none()
        if church is None:
            raise ChurchNotFoundError(church_id)
        return church

    async def get_by_name(self, name: str, exclude_id: Optional[uuid.UUID] = None) -> Church:
        """
        First church whose name contains `name`, case-insensitively.

        An exact (case-insensitive) match wins over a longer name containing
        `name`. LIKE wildcards in `name` are escaped, so "50%" matches
        literally. `exclude_id` leaves one church out of the search, so a
        rename never finds the church being renamed.
        """
        stmt = select(Church).where(Church.name.icontains(name, autoescape=True))
        if exclude_id is not None:
            stmt = stmt.where(Church.id != exclude_id)
        exact_first = case((func.lower(Church.name) == name.lower(), 0), else_=1)
        stmt = stmt.order_by(exact_first, Church.name.asc()).limit(1)

        async with self._scope() as s:
            result = await s.execute(stmt)
            church = result.scalars().first()
        if church is None:
            raise ChurchNotFoundError(context={"name": name})
        return church

    async def list(self, filters: ChurchFilters) -> List[Church]:
        stmt = self._apply_filters(select(Church), filters).order_by(Church.name.asc())
        if filters.limit is not None:
            stmt = stmt.limit(filters.limit)
        if filters.offset is not None:
            stmt = stmt.offset(filters.offset)

        async with self._scope() as s:
            result = await s.execute(stmt)
            return list(result.scalars().all())

    async def count(self, filters: ChurchFilters) -> int:
        stmt = self._apply_filters(select(func.count()).select_from(Church), filters)
        async with self._scope() as s:
            result = await s.execute(stmt)
            return result.scalar_one()

    @staticmethod
    def _apply_filters(stmt: Select, filters: ChurchFilters) -> Select:
        if filters.diocese is not None:
            stmt = stmt.where(Church.diocese == filters.diocese)
        if filters.address_id is not None:
            stmt = stmt.where(Church.address_id == filters.address_id)
        if filters.is_archdiocese is not None:
            stmt = stmt.where(Church.is_archdiocese == filters.is_archdiocese)
        if filters.is_active is not None:
            stmt = stmt.where(Church.is_active == filters.is_active)
        if filters.name_contains is not None:
            stmt = stmt.where(Church.name.icontains(filters.name_contains, autoescape=True))
        return stmt
