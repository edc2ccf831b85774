"""
Pastoral Admin Backend — Address Repository
=============================================

What:  Persistence adapter for the `address` table.
Who:   AddressService for standalone CRUD; ChurchService passes its
       transaction session to create() during church creation.
"""

import uuid
from typing import Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pastoral_admin.exceptions import AddressNotFoundError
from pastoral_admin.models.address import Address
from pastoral_admin.repositories.base import BaseRepository


class AddressRepository(BaseRepository):

    async def create(self, address: Address, session: Optional[AsyncSession] = None) -> Address:
        """
        Insert an address and populate its generated id.

        With `session` the row joins the caller's transaction (flushed, not
        committed); without it the insert commits on its own.
        """
        async with self._scope(session) as s:
            s.add(address)
            await s.flush()
        return address

    async def update(self, address: Address) -> None:
        async with self._scope() as s:
            await s.execute(
                update(Address)
                .where(Address.id == address.id)
                .values(
                    street_line_1=address.street_line_1,
                    street_line_2=address.street_line_2,
                    city=address.city,
                    state_province=address.state_province,
                    postal_code=address.postal_code,
                    country=address.country,
                )
            )

    async def delete(self, address_id: uuid.UUID) -> None:
        async with self._scope() as s:
            await s.execute(delete(Address).where(Address.id == address_id))

    async def get_by_id(self, address_id: uuid.UUID) -> Address:
        """Raises AddressNotFoundError when no row has this id."""
        async with self._scope() as s:
            result = await s.execute(select(Address).where(Address.id == address_id))
            address = result.scalar_one_or_none()
        if address is None:
            raise AddressNotFoundError(address_id)
        return address
