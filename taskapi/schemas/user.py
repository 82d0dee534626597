"""User Schemas — creation rule and public representation.

Invariants:
    - UserCreate.username: present, string, non-empty after stripping
    - Normalization to lowercase happens on the ORM model, not here
"""

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class UserCreate(BaseModel):
    """User creation — username required and non-blank."""
    username: str = Field(min_length=1, max_length=255)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("username cannot be empty or whitespace")
        return v


class UserResponse(BaseModel):
    """User as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    updated_at: datetime = Field(
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )
