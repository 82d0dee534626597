"""Tasks Router — POST /api/tasks and GET /api/tasks/user/{userId}.

Invariants:
    - Body and path parameter validated before the controller runs (400 otherwise),
      and before the readiness check (503 only for well-formed requests)
    - A user with no tasks yields an empty payload list, not an error
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from taskapi.controllers.tasks import create_task, get_tasks_by_user
from taskapi.infrastructure.database import get_db, require_ready
from taskapi.schemas.envelope import (
    ERROR_RESPONSES, TaskEnvelope, TaskListEnvelope,
)
from taskapi.schemas.task import TaskCreate, TaskResponse, TaskWithUserResponse

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.post(
    "", response_model=TaskEnvelope,
    status_code=status.HTTP_200_OK, responses=ERROR_RESPONSES,
)
async def post_task(body: TaskCreate, db: AsyncSession = Depends(get_db)):
    """Create a task for a user id."""
    require_ready()
    task = await create_task(db, body)
    return TaskEnvelope(payload=TaskResponse.from_task(task))


@router.get(
    "/user/{userId}", response_model=TaskListEnvelope,
    responses=ERROR_RESPONSES,
)
async def list_user_tasks(
    user_id: Annotated[UUID, Path(alias="userId")],
    db: AsyncSession = Depends(get_db),
):
    """List a user's tasks with the user embedded in each."""
    require_ready()
    rows = await get_tasks_by_user(db, user_id)
    return TaskListEnvelope(
        payload=[TaskWithUserResponse.from_row(task, user) for task, user in rows],
    )
