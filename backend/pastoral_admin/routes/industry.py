"""
Pastoral Admin Backend — Industry Route Handlers
==================================================

Endpoints:
    POST   /api/admin/industry          create           → 201
    GET    /api/admin/industry          all, by key      → 200
    GET    /api/admin/industry/{id}     fetch one        → 200
    PUT    /api/admin/industry/{id}     change key       → 200
    DELETE /api/admin/industry/{id}     delete           → 200
"""

from fastapi import APIRouter, Depends, status

from pastoral_admin.dependencies import get_industry_service
from pastoral_admin.schemas.common import ErrorResponse, MessageResponse
from pastoral_admin.schemas.industry import (
    IndustryListResponse,
    IndustryRequest,
    IndustryResponse,
)
from pastoral_admin.security import require_admin_key
from pastoral_admin.services.industry_service import IndustryService

router = APIRouter(
    prefix="/api/admin/industry",
    tags=["Industries"],
    dependencies=[Depends(require_admin_key)],
    responses={
        401: {"description": "Missing or invalid admin key", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
)

NOT_FOUND = {404: {"description": "Industry not found", "model": ErrorResponse}}
CONFLICT = {409: {"description": "Industry key already taken", "model": ErrorResponse}}


@router.post(
    "",
    response_model=IndustryResponse,
    status_code=status.HTTP_201_CREATED,
    responses=CONFLICT,
    summary="Create an industry",
)
async def create_industry(
    body: IndustryRequest,
    service: IndustryService = Depends(get_industry_service),
) -> IndustryResponse:
    return await service.create(body.key)


@router.get("", response_model=IndustryListResponse, summary="List all industries")
async def list_industries(
    service: IndustryService = Depends(get_industry_service),
) -> IndustryListResponse:
    return IndustryListResponse(industries=await service.get_all())


@router.get("/{industry_id}", response_model=IndustryResponse, responses=NOT_FOUND, summary="Get an industry by ID")
async def get_industry(
    industry_id: int,
    service: IndustryService = Depends(get_industry_service),
) -> IndustryResponse:
    return await service.get_by_id(industry_id)


@router.put(
    "/{industry_id}",
    response_model=MessageResponse,
    responses={**NOT_FOUND, **CONFLICT},
    summary="Change an industry's key",
)
async def update_industry(
    industry_id: int,
    body: IndustryRequest,
    service: IndustryService = Depends(get_industry_service),
) -> MessageResponse:
    await service.update(industry_id, body.key)
    return MessageResponse(message="Industry updated successfully")


@router.delete("/{industry_id}", response_model=MessageResponse, responses=NOT_FOUND, summary="Delete an industry")
async def delete_industry(
    industry_id: int,
    service: IndustryService = Depends(get_industry_service),
) -> MessageResponse:
    await service.delete(industry_id)
    return MessageResponse(message="Industry deleted successfully")
