"""Database Session Manager — async connection pool, startup bootstrap, readiness flag.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to TaskApiError subclasses (core/errors.py)
    - A failed rollback never masks the classified error
    - A failed startup connection never raises: it is logged and `ready` stays False
    - While `ready` is False, require_ready refuses with StoreUnavailableError (503);
      routes call it after request validation, so malformed requests still get 400

Design Decisions:
    - Manager created explicitly in the FastAPI lifespan and injected via get_db
      (no import-time connection)
    - Readiness gate lives in the route body, not in get_db: FastAPI resolves
      dependencies before it validates body and path parameters
    - No retry loop: /api/health/ready re-checks on demand and refreshes `ready`
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, InterfaceError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from taskapi.core.errors import (
    ConflictError, DatabaseError, StoreUnavailableError, TaskApiError,
    UniqueViolationError,
)
from taskapi.db.base import Base

logger = logging.getLogger(__name__)

# SQLSTATE 23505 (PostgreSQL); message markers for drivers without sqlstate
_UNIQUE_SQLSTATE = "23505"
_UNIQUE_MARKERS = ("UNIQUE constraint failed", "duplicate key value")


def is_unique_violation(exc: IntegrityError) -> bool:
    """True when the integrity failure came from a unique index."""
    orig = exc.orig
    if getattr(orig, "sqlstate", None) == _UNIQUE_SQLSTATE:
        return True
    return any(marker in str(orig) for marker in _UNIQUE_MARKERS)


def classify_error(exc: Exception, operation: str) -> TaskApiError:
    """Map a driver/ORM exception onto the error taxonomy."""
    if isinstance(exc, IntegrityError):
        if is_unique_violation(exc):
            return UniqueViolationError(
                f"Unique constraint violated during {operation}",
            )
        return ConflictError(f"Integrity constraint violated during {operation}")
    if isinstance(exc, (OperationalError, InterfaceError, OSError)):
        return StoreUnavailableError(f"Database unreachable during {operation}")
    return DatabaseError(str(exc.__class__.__name__), operation)


async def _safe_rollback(db: AsyncSession) -> None:
    """Roll back, logging (not raising) if the connection is already gone."""
    try:
        await db.rollback()
    except (SQLAlchemyError, OSError) as e:
        logger.warning(f"Rollback failed: {e}")


@asynccontextmanager
async def translate_errors(
    db: AsyncSession, operation: str,
) -> AsyncGenerator[None, None]:
    """Roll back and re-raise driver errors as TaskApiError."""
    try:
        yield
    except (SQLAlchemyError, OSError) as e:
        await _safe_rollback(db)
        logger.error(f"DB error during {operation}: {e}")
        raise classify_error(e, operation) from e


class DatabaseSessionManager:
    """Owns the async engine, hands out sessions, tracks store readiness."""

    def __init__(
        self, database_url: str, pool_size: int = 5, max_overflow: int = 10,
    ):
        engine_kwargs = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size, max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self.ready = False

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except (SQLAlchemyError, OSError) as e:
            await _safe_rollback(session)
            logger.error(f"DB session error: {e}")
            raise classify_error(e, "session") from e
        finally:
            await session.close()

    async def connect(self) -> bool:
        """Open one connection and ping it. Logs the outcome, never raises."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            self.ready = False
            logger.error(f"Database connection failed: {e}", exc_info=True)
            return False
        self.ready = True
        logger.info("Database connected")
        return True

    async def health_check(self) -> bool:
        """Re-check connectivity on demand (readiness probe) and refresh `ready`."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            self.ready = False
            return False
        self.ready = True
        return True

    async def create_schema(self) -> None:
        """Create missing tables from ORM metadata (dev convenience)."""
        import taskapi.models  # noqa: F401  (populate Base.metadata)

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ensured")

    async def dispose(self) -> None:
        await self.engine.dispose()


# Initialized on startup by the lifespan; None until then
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def connect_to_database(
    database_url: str, create_schema: bool = False, **kwargs,
) -> DatabaseSessionManager:
    """Startup bootstrap: build the manager, connect once, optionally create tables.

    A failed connection is logged and tolerated; the server keeps running
    in a degraded state and store-backed routes answer 503.
    """
    manager = init_db(database_url, **kwargs)
    if await manager.connect() and create_schema:
        try:
            await manager.create_schema()
        except SQLAlchemyError as e:
            manager.ready = False
            logger.error(f"Schema creation failed: {e}", exc_info=True)
    return manager


def require_ready() -> None:
    """Refuse store access while the startup connection has not succeeded.

    Called at the top of store-backed route bodies, i.e. after FastAPI has
    validated the request.
    """
    if db_manager is None:
        raise StoreUnavailableError("Database not initialized")
    if not db_manager.ready:
        raise StoreUnavailableError()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions.

    Opening a session does not touch the store; the readiness gate is
    require_ready(), so validation errors are reported before it.
    """
    if db_manager is None:
        raise StoreUnavailableError("Database not initialized")
    async with db_manager.session() as session:
        yield session
