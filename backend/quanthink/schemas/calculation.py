"""
QuanThink Backend: Calculation Request/Response Schemas
========================================================

What:  Pydantic models defining the calculation API contract.
How:   FastAPI validates request bodies against CalculationCreate /
       CalculationUpdate and serializes CalculationResponse on the way out.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class CalculationBase(BaseModel):
    """Client-defined fields shared by create and update payloads."""
    expression: str = Field(min_length=1, description="Input submitted by the user")
    result: Optional[str] = Field(default=None, description="Computed answer")
    library: Optional[str] = Field(
        default=None,
        max_length=50,
        description="Library selected in the client, e.g. JAVA",
    )


class CalculationCreate(CalculationBase):
    """Body of POST /calculations."""


class CalculationUpdate(CalculationBase):
    """
    Body of PUT /calculations/{id}.

    A full-record update: omitted optional fields are reset to null.
    """


class CalculationResponse(CalculationBase):
    """A stored calculation as returned by every calculation endpoint."""
    id: int = Field(description="Identifier assigned at creation")
    created_at: datetime = Field(description="When the calculation was stored (UTC ISO 8601)")

    model_config = {"from_attributes": True}

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Stored timestamps are UTC; SQLite hands them back without tzinfo."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v
