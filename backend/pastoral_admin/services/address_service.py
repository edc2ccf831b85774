"""
Pastoral Admin Backend — Address Service
==========================================

What:  Standalone address CRUD with existence checks before update/delete.
Who:   Called by the /api/admin/address route handlers. Addresses created
       as part of a church go through ChurchService instead.

Deleting an address that a church still references is refused by the
database (ON DELETE RESTRICT) and reported as AddressInUseError (→ 409).
"""

import logging
import uuid
from typing import Optional

from sqlalchemy.exc import IntegrityError

from pastoral_admin.exceptions import AddressInUseError, AddressNotFoundError
from pastoral_admin.models.address import Address
from pastoral_admin.repositories.address import AddressRepository
from pastoral_admin.schemas.address import (
    AddressCreateRequest,
    AddressResponse,
    AddressUpdateRequest,
)
from pastoral_admin.services.base import BaseService


class AddressService(BaseService):

    def __init__(self, addresses: AddressRepository, logger: Optional[logging.Logger] = None):
        super().__init__(logger)
        self.addresses = addresses

    async def create(self, request: AddressCreateRequest) -> AddressResponse:
        try:
            address = await self.addresses.create(Address(**request.model_dump()))
        except Exception as e:
            raise self._internal("create address", e, city=request.city) from e

        self.logger.info("Address created: %s", address.id)
        return AddressResponse.model_validate(address)

    async def update(self, address_id: uuid.UUID, request: AddressUpdateRequest) -> None:
        address = await self._get(address_id)

        address.street_line_1 = request.street_line_1
        address.street_line_2 = request.street_line_2
        address.city = request.city
        address.state_province = request.state_province
        address.postal_code = request.postal_code
        address.country = request.country

        try:
            await self.addresses.update(address)
        except Exception as e:
            raise self._internal("update address", e, address_id=address_id) from e

    async def delete(self, address_id: uuid.UUID) -> None:
        """
        Raises:
            AddressNotFoundError: no address with this id (→ 404)
            AddressInUseError: a church references this address (→ 409)
            InternalError: lookup or delete failed (→ 500)
        """
        await self._get(address_id)
        try:
            await self.addresses.delete(address_id)
        except IntegrityError as e:
            raise AddressInUseError(address_id) from e
        except Exception as e:
            raise self._internal("delete address", e, address_id=address_id) from e

    async def get_by_id(self, address_id: uuid.UUID) -> AddressResponse:
        address = await self._get(address_id)
        return AddressResponse.model_validate(address)

    async def _get(self, address_id: uuid.UUID) -> Address:
        try:
            return await self.addresses.get_by_id(address_id)
        except AddressNotFoundError:
            raise
        except Exception as e:
            raise self._internal("get address", e, address_id=address_id) from e
