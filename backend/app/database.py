"""
Employee Directory Backend: Database Engine Management
=======================================================

What:  Async SQLAlchemy engine, session factory and declarative base.
How:   Creates one async engine per process. The entity store
       (app.services.store) opens a short-lived session from the factory
       for every store call.
When:  Engine is created at module import; disposed in the app lifespan.

Connection Pooling Strategy:
    Server databases (PostgreSQL/asyncpg) get an explicit pool:
    pool_size=20, max_overflow=10, pool_pre_ping, pool_recycle=3600.
    SQLite URLs keep SQLAlchemy's default pool for the dialect, which does
    not accept the sizing arguments.
"""

from typing import Any, Dict

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


def build_engine(database_url: str) -> AsyncEngine:
    """
    Create an async engine for the given URL.

    Pool arguments are only passed for server databases. Tests call this
    directly with a temporary SQLite URL.
    """
    engine_kwargs: Dict[str, Any] = {
        # SQL echo only in DEBUG mode
        "echo": settings.log_level == "DEBUG",
    }
    if not database_url.startswith("sqlite"):
        engine_kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return create_async_engine(database_url, **engine_kwargs)


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Session factory with expire_on_commit=False.

    Rows returned by the store are read after their session has closed, so
    attributes must not be expired on commit.
    """
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


# ── Engine Configuration ──────────────────────────────────────────────────
engine = build_engine(settings.database_url)

# ── Session Factory ───────────────────────────────────────────────────────
async_session_factory = build_session_factory(engine)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every model registers with this metadata; create_tables() and the seed
    operation's drop/recreate both work from it.
    """
    pass


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables(bind: AsyncEngine = engine) -> None:
    """Create any missing tables (no-op for tables that already exist)."""
    # Import models so every table is registered on Base.metadata
    import app.models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
