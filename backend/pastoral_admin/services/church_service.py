"""
Pastoral Admin Backend — Church Service
=========================================

What:  Business rules for churches: unique names, existence checks before
       writes, and the transactional church + address creation.
Who:   Called by the /api/admin/church route handlers.

Create Flow (POST /api/admin/church):
    ┌────────────┐    ┌──────────────────────── one transaction ──┐
    │ Name guard │───▶│  insert address  ───▶  insert church      │───▶ COMMIT
    └────────────┘    │  (new id)              (address_id = id)  │
                      └───────────────────────────────────────────┘

    Name taken          → ChurchAlreadyExistsError, nothing written
    Either insert fails → ROLLBACK, step logged, InternalError
    COMMIT fails        → InternalError, nothing persisted
    Task cancelled      → ROLLBACK, CancelledError propagates

Error Classification:
    ChurchNotFoundError and ChurchAlreadyExistsError reach the caller as-is
    and are not logged. Every other failure is logged with the step that
    failed and replaced by InternalError.
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from pastoral_admin.exceptions import (
    ChurchAlreadyExistsError,
    ChurchNotFoundError,
    InternalError,
)
from pastoral_admin.models.address import Address
from pastoral_admin.models.church import Church
from pastoral_admin.repositories.address import AddressRepository
from pastoral_admin.repositories.church import ChurchRepository
from pastoral_admin.schemas.church import (
    ChurchCreateRequest,
    ChurchFilters,
    ChurchListResponse,
    ChurchResponse,
    ChurchUpdateRequest,
)
from pastoral_admin.services.base import BaseService


class ChurchService(BaseService):
    """
    Church operations.

    Responsibilities:
        - create(): name guard, then address + church in one unit of work
        - update(): existence check, rename guard, full replace
        - delete(), get_by_id(): existence check, then act
        - list(): filtered page plus the matching total
    """

    def __init__(
        self,
        churches: ChurchRepository,
        addresses: AddressRepository,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(logger)
        self.churches = churches
        self.addresses = addresses

    async def create(self, request: ChurchCreateRequest) -> ChurchResponse:
        """
        Create a church together with its address.

        Raises:
            ChurchAlreadyExistsError: a church with a matching name exists (→ 409)
            InternalError: lookup, insert or commit failed (→ 500)
        """
        await self._ensure_name_free(request.name)

        church: Optional[Church] = None
        try:
            async with self.churches.transaction() as session:
                # ── Step 1: Address ───────────────────────────────────────
                try:
                    address = await self.addresses.create(
                        Address(**request.address.model_dump()), session=session
                    )
                except Exception as e:
                    raise self._internal("create address for church", e, name=request.name) from e

                # ── Step 2: Church referencing the new address ────────────
                church = Church(
                    name=request.name,
                    diocese=request.diocese,
                    parish_number=request.parish_number,
                    website_url=request.website_url,
                    phone_number=request.phone_number,
                    address_id=address.id,
                    is_archdiocese=request.is_archdiocese,
                    is_active=True,
                )
                try:
                    await self.churches.create(church, session=session)
                except Exception as e:
                    raise self._internal(
                        "create church", e, name=request.name, address_id=address.id
                    ) from e
        except InternalError:
            raise
        except Exception as e:
            # Transaction could not begin, or COMMIT/ROLLBACK failed
            raise self._internal("commit church creation", e, name=request.name) from e

        self.logger.info("Church created: %s (%s)", church.id, church.name)
        return ChurchResponse.model_validate(church)

    async def update(self, church_id: uuid.UUID, request: ChurchUpdateRequest) -> None:
        """
        Replace every mutable field of an existing church.

        The name guard only runs when the name changes, so saving a church
        under its current name always succeeds.

        Raises:
            ChurchNotFoundError: no church with this id (→ 404)
            ChurchAlreadyExistsError: another church holds the new name (→ 409)
            InternalError: lookup or write failed (→ 500)
        """
        church = await self._get(church_id)

        renamed = request.name != church.name
        if renamed:
            await self._ensure_name_free(request.name, church_id=church_id)

        church.name = request.name
        church.diocese = request.diocese
        church.parish_number = request.parish_number
        church.website_url = request.website_url
        church.phone_number = request.phone_number
        church.address_id = request.address_id
        church.is_archdiocese = request.is_archdiocese
        church.is_active = request.is_active

        try:
            await self.churches.update(church)
        except IntegrityError as e:
            # Another request may have taken the new name after the guard ran.
            # Without a rename the violation is something else (e.g. a bad FK).
            if renamed:
                await self._ensure_name_free(request.name, church_id=church_id)
            raise self._internal("update church", e, church_id=church_id) from e
        except Exception as e:
            raise self._internal("update church", e, church_id=church_id) from e

    async def delete(self, church_id: uuid.UUID) -> None:
        """Delete a church. Its address is left in place."""
        await self._get(church_id)
        try:
            await self.churches.delete(church_id)
        except Exception as e:
            raise self._internal("delete church", e, church_id=church_id) from e

    async def get_by_id(self, church_id: uuid.UUID) -> ChurchResponse:
        church = await self._get(church_id)
        return ChurchResponse.model_validate(church)

    async def list(self, filters: ChurchFilters) -> ChurchListResponse:
        """
        One page of churches and the number of churches matching the filters.

        An empty page is a normal result with count 0; count is not queried
        for it.
        """
        try:
            churches: List[Church] = await self.churches.list(filters)
        except ChurchNotFoundError:
            churches = []
        except Exception as e:
            raise self._internal("list churches", e, filters=filters.model_dump()) from e

        count = 0
        if churches:
            try:
                count = await self.churches.count(filters)
            except Exception as e:
                raise self._internal("count churches", e, filters=filters.model_dump()) from e

        return ChurchListResponse(
            churches=[ChurchResponse.model_validate(c) for c in churches],
            count=count,
            limit=filters.limit,
            offset=filters.offset,
        )

    # ── Guards ────────────────────────────────────────────────────────────

    async def _get(self, church_id: uuid.UUID) -> Church:
        try:
            return await self.churches.get_by_id(church_id)
        except ChurchNotFoundError:
            raise
        except Exception as e:
            raise self._internal("get church", e, church_id=church_id) from e

    async def _ensure_name_free(self, name: str, church_id: Optional[uuid.UUID] = None) -> None:
        """
        Raise ChurchAlreadyExistsError if a church other than `church_id`
        matches `name`. With no church_id (create) any match is a conflict.
        """
        try:
            existing = await self.churches.get_by_name(name, exclude_id=church_id)
        except ChurchNotFoundError:
            return
        except Exception as e:
            raise self._internal("look up church by name", e, name=name) from e

        if existing.id != church_id:
            raise ChurchAlreadyExistsError(name)
