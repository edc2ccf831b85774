"""
Pastoral Admin Backend — Industry Schemas
===========================================

What:  Request and response models for the industry lookup endpoints.
"""

from typing import List

from pydantic import BaseModel, Field


class IndustryRequest(BaseModel):
    """What:  Body of create and update; only the translation key is writable."""
    key: str = Field(min_length=1, max_length=100, description="Translation key, e.g. industry.technology")


class IndustryResponse(BaseModel):
    id: int
    key: str

    model_config = {"from_attributes": True}


class IndustryListResponse(BaseModel):
    """What:  Every industry, ordered by key ascending."""
    industries: List[IndustryResponse]
