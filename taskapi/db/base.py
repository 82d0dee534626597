"""SQLAlchemy Declarative Base — shared base class and timestamp columns for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - created_at/updated_at set on insert to the same instant; updated_at refreshed on every UPDATE

Design Decisions:
    - Separate file for Base: avoids circular imports between models
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def insert_updated_at(context) -> datetime:
    """updated_at starts equal to created_at on insert."""
    return context.get_current_parameters().get("created_at") or utcnow()


class Base(DeclarativeBase):
    """Base class for all Task API ORM models."""
    pass


class TimestampMixin:
    """createdAt/updatedAt maintained by the ORM on every write."""
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=insert_updated_at, onupdate=utcnow,
    )
