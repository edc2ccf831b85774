"""
Pastoral Admin Backend — Church Schemas
=========================================

What:  Request, filter and response models for the church endpoints.

Create vs Update:
    - ChurchCreateRequest embeds a full AddressCreateRequest; the address and
      the church are written in one transaction.
    - ChurchUpdateRequest references an existing address by id and carries
      is_active, which is how a church is deactivated or re-activated.

Optional text fields (parish_number, website_url, phone_number) arrive as ""
when left empty in the admin UI and are converted to None here.
"""

import uuid
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from pastoral_admin.schemas.address import AddressCreateRequest
from pastoral_admin.schemas.common import blank_to_none

OPTIONAL_TEXT_FIELDS = ("parish_number", "website_url", "phone_number")


class ChurchCreateRequest(BaseModel):
    """What:  A new church and the address it will reference."""
    name: str = Field(max_length=255, description="Church name, unique across churches")
    diocese: str = Field(max_length=255)
    parish_number: Optional[str] = Field(default=None, max_length=50)
    website_url: Optional[str] = Field(default=None, max_length=255)
    phone_number: Optional[str] = Field(default=None, max_length=20)
    address: AddressCreateRequest
    is_archdiocese: bool = False

    @field_validator(*OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def blank_optional_text(cls, v):
        return blank_to_none(v)


class ChurchUpdateRequest(BaseModel):
    """
    What:  Full replacement of a church's mutable fields.
    How:   The church id comes from the URL path, not the body.
    """
    name: str = Field(max_length=255)
    diocese: str = Field(max_length=255)
    parish_number: Optional[str] = Field(default=None, max_length=50)
    website_url: Optional[str] = Field(default=None, max_length=255)
    phone_number: Optional[str] = Field(default=None, max_length=20)
    address_id: uuid.UUID
    is_archdiocese: bool = False
    is_active: bool = True

    @field_validator(*OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def blank_optional_text(cls, v):
        return blank_to_none(v)


class ChurchFilters(BaseModel):
    """
    What:  Predicate bag narrowing church listings and counts.

    Every field is optional; an unset field adds no predicate.
        diocese, address_id, is_archdiocese, is_active: equality
        name_contains: case-insensitive substring of the name
        limit, offset: pagination (list only; count ignores them)
    """
    diocese: Optional[str] = None
    address_id: Optional[uuid.UUID] = None
    is_archdiocese: Optional[bool] = None
    is_active: Optional[bool] = None
    name_contains: Optional[str] = None

    limit: Optional[int] = Field(default=None, ge=0, le=1000)
    offset: Optional[int] = Field(default=None, ge=0)

    @field_validator("diocese", "name_contains", mode="before")
    @classmethod
    def blank_text_filter(cls, v):
        return blank_to_none(v)


class ChurchResponse(BaseModel):
    """
    What:  A church as stored.
    Who:   Returned by POST /api/admin/church and GET /api/admin/church/{id}.
    """
    id: uuid.UUID
    name: str
    diocese: str
    parish_number: Optional[str] = None
    website_url: Optional[str] = None
    phone_number: Optional[str] = None
    address_id: uuid.UUID
    is_archdiocese: bool
    is_active: bool

    model_config = {"from_attributes": True}


class ChurchListResponse(BaseModel):
    """
    What:  One page of churches plus the total matching the same filters.

    count is computed with the filters of the request but without
    limit/offset, so it is the size of the full result set. It is 0 when
    the page is empty.
    """
    churches: List[ChurchResponse] = Field(description="Churches on this page, ordered by name")
    count: int = Field(description="Total churches matching the filters")
    limit: Optional[int] = None
    offset: Optional[int] = None
