"""
Shared data models for ideas, requests and responses.
"""

from pydantic import BaseModel, Field, field_validator
from typing import List

from socialgenius.utils.constants import BUSINESS_TYPE_MAX_LENGTH


class IdeaRecord(BaseModel):
    """Model representing one generated content idea."""

    category: str = Field(..., description="Content category, e.g. practical tip or viral trend")
    suggestedFormat: str = Field(..., description="Ideal post format, e.g. '15s reel' or '3-image carousel'")
    hookTitle: str = Field(..., description="Short attention-grabbing headline")
    executionGuide: str = Field(..., description="1-2 sentence how-to including a call to action")


class GenerateIdeasRequest(BaseModel):
    """Model representing an idea generation request."""

    businessType: str = Field(..., min_length=1, max_length=BUSINESS_TYPE_MAX_LENGTH)

    @field_validator("businessType", mode="before")
    @classmethod
    def strip_business_type(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value


class GenerateIdeasResponse(BaseModel):
    """Model representing a successful idea generation response."""

    success: bool = True
    businessType: str
    provider: str
    count: int
    ideas: List[IdeaRecord]


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
