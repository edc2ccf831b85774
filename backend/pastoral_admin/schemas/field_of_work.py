"""
Pastoral Admin Backend — Field Of Work Schemas
================================================

What:  Request and response models for the field-of-work lookup endpoints.
"""

from typing import List

from pydantic import BaseModel, Field


class FieldOfWorkRequest(BaseModel):
    key: str = Field(min_length=1, max_length=100, description="Translation key, e.g. field_of_work.engineering")


class FieldOfWorkResponse(BaseModel):
    id: int
    key: str

    model_config = {"from_attributes": True}


class FieldOfWorkListResponse(BaseModel):
    """What:  Every field of work, ordered by key ascending."""
    fields_of_work: List[FieldOfWorkResponse]
