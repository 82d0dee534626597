"""ORM Models — SQLAlchemy declarative models for users and tasks.

Invariants:
    - All models inherit from Base (db/base.py)
    - Task.user_id references users.id by value only (no FK constraint)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all/alembic
"""

from taskapi.models.user import User  # noqa: F401
from taskapi.models.task import Task  # noqa: F401
