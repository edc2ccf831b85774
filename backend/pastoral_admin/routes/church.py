"""
Pastoral Admin Backend — Church Route Handlers
================================================

What:  /api/admin/church endpoints.
How:   Decode the body or path into schemas, call ChurchService, return the
       result. Domain errors are turned into responses by the global
       exception handlers in main.py.

Endpoints:
    POST   /api/admin/church          create church + address   → 201
    GET    /api/admin/church/{id}     fetch one                 → 200
    PUT    /api/admin/church/{id}     full replace              → 200
    DELETE /api/admin/church/{id}     delete (address kept)     → 200
    POST   /api/admin/church/list     filtered page + count     → 200
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from pastoral_admin.dependencies import get_church_service
from pastoral_admin.schemas.church import (
    ChurchCreateRequest,
    ChurchFilters,
    ChurchListResponse,
    ChurchResponse,
    ChurchUpdateRequest,
)
from pastoral_admin.schemas.common import ErrorResponse, MessageResponse
from pastoral_admin.security import require_admin_key
from pastoral_admin.services.church_service import ChurchService

router = APIRouter(
    prefix="/api/admin/church",
    tags=["Churches"],
    dependencies=[Depends(require_admin_key)],
    responses={
        401: {"description": "Missing or invalid admin key", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
)


@router.post(
    "",
    response_model=ChurchResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "Church name already taken", "model": ErrorResponse}},
    summary="Create a church and its address",
)
async def create_church(
    body: ChurchCreateRequest,
    service: ChurchService = Depends(get_church_service),
) -> ChurchResponse:
    """
    The address and the church are inserted in one transaction; either both
    rows exist afterwards or neither does.
    """
    return await service.create(body)


@router.post(
    "/list",
    response_model=ChurchListResponse,
    summary="List churches matching filters",
)
async def list_churches(
    filters: ChurchFilters,
    response: Response,
    service: ChurchService = Depends(get_church_service),
) -> ChurchListResponse:
    """
    Filters travel in the body (POST) so the same object drives list and
    count. The total is also sent as X-Total-Count.
    """
    result = await service.list(filters)
    response.headers["X-Total-Count"] = str(result.count)
    return result


@router.get(
    "/{church_id}",
    response_model=ChurchResponse,
    responses={404: {"description": "Church not found", "model": ErrorResponse}},
    summary="Get a church by ID",
)
async def get_church(
    church_id: UUID,
    service: ChurchService = Depends(get_church_service),
) -> ChurchResponse:
    return await service.get_by_id(church_id)


@router.put(
    "/{church_id}",
    response_model=MessageResponse,
    responses={
        404: {"description": "Church not found", "model": ErrorResponse},
        409: {"description": "Church name already taken", "model": ErrorResponse},
    },
    summary="Replace a church's fields",
)
async def update_church(
    church_id: UUID,
    body: ChurchUpdateRequest,
    service: ChurchService = Depends(get_church_service),
) -> MessageResponse:
    await service.update(church_id, body)
    return MessageResponse(message="Church updated successfully")


@router.delete(
    "/{church_id}",
    response_model=MessageResponse,
    responses={404: {"description": "Church not found", "model": ErrorResponse}},
    summary="Delete a church",
)
async def delete_church(
    church_id: UUID,
    service: ChurchService = Depends(get_church_service),
) -> MessageResponse:
    await service.delete(church_id)
    return MessageResponse(message="Church deleted successfully")
