"""Task Controller — persists tasks and lists them per user with the user resolved.

Invariants:
    - The user reference is checked for shape only; a missing user is not an error
    - get_tasks_by_user returns [] when nothing matches
    - Listing order is unspecified (no ORDER BY)
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskapi.controllers import field_value
from taskapi.core.identifiers import UserId, parse_identifier
from taskapi.infrastructure.database import translate_errors
from taskapi.models.task import Task
from taskapi.models.user import User

logger = logging.getLogger(__name__)


async def create_task(db: AsyncSession, data) -> Task:
    """Insert a task built from `data` (`title` and `user`)."""
    user_id = parse_identifier(field_value(data, "user"), "user")
    task = Task(title=field_value(data, "title"), user_id=user_id)
    async with translate_errors(db, "insert"):
        db.add(task)
        await db.commit()
        await db.refresh(task)
    logger.info(f"Task created: {task.id} for user {user_id}")
    return task


async def get_tasks_by_user(
    db: AsyncSession, user_id: UserId | str,
) -> list[tuple[Task, User | None]]:
    """All tasks referencing `user_id`, each paired with its User (None if dangling)."""
    uid = parse_identifier(user_id, "user")
    query = (
        select(Task, User)
        .outerjoin(User, User.id == Task.user_id)
        .where(Task.user_id == uid)
    )
    async with translate_errors(db, "query"):
        result = await db.execute(query)
        rows = result.all()
    return [(task, user) for task, user in rows]
