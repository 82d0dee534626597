"""User Controller — persists new users.

Invariants:
    - A colliding (case-insensitive) username raises DuplicateUsernameError
    - Other integrity failures (e.g. missing username) stay ConflictError
    - The returned User carries its generated id and timestamps
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from taskapi.controllers import field_value
from taskapi.core.errors import DuplicateUsernameError, UniqueViolationError
from taskapi.infrastructure.database import translate_errors
from taskapi.models.user import User

logger = logging.getLogger(__name__)


async def create_user(db: AsyncSession, data) -> User:
    """Insert a user built from `data` (needs at least `username`)."""
    user = User(username=field_value(data, "username"))
    try:
        async with translate_errors(db, "insert"):
            db.add(user)
            await db.commit()
            await db.refresh(user)
    except UniqueViolationError as e:
        raise DuplicateUsernameError(user.username) from e
    logger.info(f"User created: {user.id}")
    return user
