"""User ORM — owner of tasks, identified by a unique lowercase username.

Invariants:
    - id is a UUID generated on insert, immutable
    - username is stripped and lowercased before it reaches the unique index,
      so uniqueness is case-insensitive

Design Decisions:
    - Normalization in @validates: applies to every construction path
      (routes, controllers, fixtures), not only to validated request bodies
"""

import uuid

from sqlalchemy import String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, validates

from taskapi.db.base import Base, TimestampMixin


class User(TimestampMixin, Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )

    @validates("username")
    def normalize_username(self, key: str, value: str) -> str:
        return value.strip().lower() if isinstance(value, str) else value
