"""
Pastoral Admin Backend — Address Schemas
==========================================

What:  Request and response models for the address endpoints. The create
       request is also embedded in ChurchCreateRequest.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from pastoral_admin.schemas.common import blank_to_none


class AddressCreateRequest(BaseModel):
    """
    What:  Fields of a new address.
    Note:  street_line_2 = "" is stored as NULL, not as an empty line.
    """
    street_line_1: str = Field(max_length=255, description="First street line")
    street_line_2: Optional[str] = Field(
        default=None, max_length=255, description="Optional second street line"
    )
    city: str = Field(max_length=100)
    state_province: str = Field(max_length=100)
    postal_code: str = Field(max_length=20)
    country: str = Field(max_length=100)

    @field_validator("street_line_2", mode="before")
    @classmethod
    def blank_street_line_2(cls, v):
        return blank_to_none(v)


class AddressUpdateRequest(AddressCreateRequest):
    """
    What:  Full replacement of an address's fields.
    How:   The address id comes from the URL path, not the body.
    """


class AddressResponse(BaseModel):
    """
    What:  An address as stored.
    Who:   Returned by POST /api/admin/address and GET /api/admin/address/{id}.
    """
    id: uuid.UUID
    street_line_1: str
    street_line_2: Optional[str] = None
    city: str
    state_province: str
    postal_code: str
    country: str

    model_config = {"from_attributes": True}
