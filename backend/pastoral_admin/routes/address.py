"""
Pastoral Admin Backend — Address Route Handlers
=================================================

Endpoints:
    POST   /api/admin/address          create          → 201
    GET    /api/admin/address/{id}     fetch one       → 200
    PUT    /api/admin/address/{id}     full replace    → 200
    DELETE /api/admin/address/{id}     delete          → 200, 409 while a church uses it
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from pastoral_admin.dependencies import get_address_service
from pastoral_admin.schemas.address import (
    AddressCreateRequest,
    AddressResponse,
    AddressUpdateRequest,
)
from pastoral_admin.schemas.common import ErrorResponse, MessageResponse
from pastoral_admin.security import require_admin_key
from pastoral_admin.services.address_service import AddressService

router = APIRouter(
    prefix="/api/admin/address",
    tags=["Addresses"],
    dependencies=[Depends(require_admin_key)],
    responses={
        401: {"description": "Missing or invalid admin key", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
)

NOT_FOUND = {404: {"description": "Address not found", "model": ErrorResponse}}


@router.post(
    "",
    response_model=AddressResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an address",
)
async def create_address(
    body: AddressCreateRequest,
    service: AddressService = Depends(get_address_service),
) -> AddressResponse:
    return await service.create(body)


@router.get("/{address_id}", response_model=AddressResponse, responses=NOT_FOUND, summary="Get an address by ID")
async def get_address(
    address_id: UUID,
    service: AddressService = Depends(get_address_service),
) -> AddressResponse:
    return await service.get_by_id(address_id)


@router.put("/{address_id}", response_model=MessageResponse, responses=NOT_FOUND, summary="Replace an address")
async def update_address(
    address_id: UUID,
    body: AddressUpdateRequest,
    service: AddressService = Depends(get_address_service),
) -> MessageResponse:
    await service.update(address_id, body)
    return MessageResponse(message="Address updated successfully")


@router.delete(
    "/{address_id}",
    response_model=MessageResponse,
    responses={
        **NOT_FOUND,
        409: {"description": "Address still referenced by a church", "model": ErrorResponse},
    },
    summary="Delete an address",
)
async def delete_address(
    address_id: UUID,
    service: AddressService = Depends(get_address_service),
) -> MessageResponse:
    await service.delete(address_id)
    return MessageResponse(message="Address deleted successfully")
