"""Task ORM — a titled item belonging to exactly one user.

Invariants:
    - title is non-nullable text
    - user_id holds a User id; existence is NOT enforced (advisory reference)

Design Decisions:
    - No ForeignKey on user_id: referential integrity is advisory, the
      by-user listing resolves users with an outer join at read time
    - Index on user_id: the only query path is "tasks for a user"
"""

import uuid

from sqlalchemy import Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from taskapi.db.base import Base, TimestampMixin


class Task(TimestampMixin, Base):
    __tablename__ = "tasks"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), nullable=False, index=True,
    )
