"""User Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - UserInput.name / UserInput.address: required strings, at least 1 char
    - UserInput.sex: required, exactly "male" or "female"
    - Unknown body fields (including id) are ignored
    - Success responses are wrapped as {"data": ...}; failures as {"message": ...}

Design Decisions:
    - strict str fields: a number or bool in name/address is rejected, not coerced
    - Generic DataEnvelope[T] over per-endpoint wrappers: one typed envelope for
      single records and lists
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from perqara_api.core.domain_types import Sex

T = TypeVar("T")


class UserInput(BaseModel):
    """Create/update body — the three mutable fields."""
    model_config = ConfigDict(extra="ignore")

    name: StrictStr = Field(min_length=1)
    address: StrictStr = Field(min_length=1)
    sex: Sex


class UserRead(BaseModel):
    """Public-facing User record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: str
    sex: str


class DataEnvelope(BaseModel, Generic[T]):
    """Success envelope."""
    data: T


class MessageResponse(BaseModel):
    """Error envelope."""
    message: str
