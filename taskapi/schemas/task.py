"""Task Schemas — creation rule, flat and user-resolved representations.

Invariants:
    - TaskCreate.title: present, non-empty after stripping
    - TaskCreate.user: structurally valid UUID (existence not checked)
    - TaskResponse.user is the bare id; TaskWithUserResponse.user is the full User
"""

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, Field, field_validator

from taskapi.models.task import Task
from taskapi.models.user import User
from taskapi.schemas.user import UserResponse


class TaskCreate(BaseModel):
    """Task creation — title and owning user id."""
    title: str = Field(min_length=1)
    user: UUID

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class TaskResponse(BaseModel):
    """Task with its user reference left as an id."""
    id: UUID
    title: str
    user: UUID
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    updated_at: datetime = Field(
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            user=task.user_id,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class TaskWithUserResponse(BaseModel):
    """Task with its user reference resolved to the full User (None if dangling)."""
    id: UUID
    title: str
    user: UserResponse | None
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    updated_at: datetime = Field(
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )

    @classmethod
    def from_row(cls, task: Task, user: User | None) -> "TaskWithUserResponse":
        return cls(
            id=task.id,
            title=task.title,
            user=UserResponse.model_validate(user) if user else None,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )
