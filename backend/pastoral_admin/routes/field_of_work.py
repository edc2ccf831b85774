"""
Pastoral Admin Backend — Field Of Work Route Handlers
=======================================================

Endpoints mirror /api/admin/industry under /api/admin/field-of-work.
"""

from fastapi import APIRouter, Depends, status

from pastoral_admin.dependencies import get_field_of_work_service
from pastoral_admin.schemas.common import ErrorResponse, MessageResponse
from pastoral_admin.schemas.field_of_work import (
    FieldOfWorkListResponse,
    FieldOfWorkRequest,
    FieldOfWorkResponse,
)
from pastoral_admin.security import require_admin_key
from pastoral_admin.services.field_of_work_service import FieldOfWorkService

router = APIRouter(
    prefix="/api/admin/field-of-work",
    tags=["Fields of Work"],
    dependencies=[Depends(require_admin_key)],
    responses={
        401: {"description": "Missing or invalid admin key", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
)

NOT_FOUND = {404: {"description": "Field of work not found", "model": ErrorResponse}}
CONFLICT = {409: {"description": "Field of work key already taken", "model": ErrorResponse}}


@router.post(
    "",
    response_model=FieldOfWorkResponse,
    status_code=status.HTTP_201_CREATED,
    responses=CONFLICT,
    summary="Create a field of work",
)
async def create_field_of_work(
    body: FieldOfWorkRequest,
    service: FieldOfWorkService = Depends(get_field_of_work_service),
) -> FieldOfWorkResponse:
    return await service.create(body.key)


@router.get("", response_model=FieldOfWorkListResponse, summary="List all fields of work")
async def list_fields_of_work(
    service: FieldOfWorkService = Depends(get_field_of_work_service),
) -> FieldOfWorkListResponse:
    return FieldOfWorkListResponse(fields_of_work=await service.get_all())


@router.get(
    "/{field_of_work_id}",
    response_model=FieldOfWorkResponse,
    responses=NOT_FOUND,
    summary="Get a field of work by ID",
)
async def get_field_of_work(
    field_of_work_id: int,
    service: FieldOfWorkService = Depends(get_field_of_work_service),
) -> FieldOfWorkResponse:
    return await service.get_by_id(field_of_work_id)


@router.put(
    "/{field_of_work_id}",
    response_model=MessageResponse,
    responses={**NOT_FOUND, **CONFLICT},
    summary="Change a field of work's key",
)
async def update_field_of_work(
    field_of_work_id: int,
    body: FieldOfWorkRequest,
    service: FieldOfWorkService = Depends(get_field_of_work_service),
) -> MessageResponse:
    await service.update(field_of_work_id, body.key)
    return MessageResponse(message="Field of work updated successfully")


@router.delete(
    "/{field_of_work_id}",
    response_model=MessageResponse,
    responses=NOT_FOUND,
    summary="Delete a field of work",
)
async def delete_field_of_work(
    field_of_work_id: int,
    service: FieldOfWorkService = Depends(get_field_of_work_service),
) -> MessageResponse:
    await service.delete(field_of_work_id)
    return MessageResponse(message="Field of work deleted successfully")
