"""Response Envelopes — {"message": ..., "payload": ...} for every resource route.

Invariants:
    - message is "success", "failure", or "validation failure"
    - Failure envelopes are built by core/errors.py and api/error_handlers.py;
      the models here document them in the OpenAPI schema
"""

from typing import Literal

from pydantic import BaseModel

from taskapi.schemas.task import TaskResponse, TaskWithUserResponse
from taskapi.schemas.user import UserResponse


class UserEnvelope(BaseModel):
    message: Literal["success"] = "success"
    payload: UserResponse


class TaskEnvelope(BaseModel):
    message: Literal["success"] = "success"
    payload: TaskResponse


class TaskListEnvelope(BaseModel):
    message: Literal["success"] = "success"
    payload: list[TaskWithUserResponse]


class ErrorDetail(BaseModel):
    code: str
    message: str
    category: str
    severity: str
    timestamp: str | None = None


class FailureEnvelope(BaseModel):
    message: Literal["failure"] = "failure"
    payload: ErrorDetail


class ValidationViolation(BaseModel):
    field: str
    message: str
    type: str


class ValidationFailureEnvelope(BaseModel):
    message: Literal["validation failure"] = "validation failure"
    payload: list[ValidationViolation]


ERROR_RESPONSES = {
    400: {"model": ValidationFailureEnvelope},
    500: {"model": FailureEnvelope},
    503: {"model": FailureEnvelope},
}
