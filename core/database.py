"""
Recipe Service Database Configuration
Async database setup with SQLAlchemy 2.0 (PostgreSQL via asyncpg, SQLite via aiosqlite)
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool
from sqlalchemy import MetaData, event, text
from contextlib import asynccontextmanager
import structlog
from typing import Any, AsyncGenerator, Dict, Optional

from core.config import settings
from core.exceptions import RecipeNotFoundError

logger = structlog.get_logger()

# Database engine
engine: Optional[AsyncEngine] = None
async_session_factory: Optional[async_sessionmaker] = None


class Base(DeclarativeBase):
    """Base class for all database models"""

    metadata = MetaData(
        naming_convention={
            "ix": "ix_%(column_0_label)s",
            "uq": "uq_%(table_name)s_%(column_0_name)s",
            "ck": "ck_%(table_name)s_%(constraint_name)s",
            "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
            "pk": "pk_%(table_name)s"
        }
    )


def _engine_options(database_url: str) -> Dict[str, Any]:
    """Pool options for the given async URL"""
    options: Dict[str, Any] = {
        "echo": settings.DATABASE_ECHO,
        "pool_pre_ping": True,
    }
    if database_url.startswith("sqlite"):
        # In-memory SQLite only lives as long as its single connection
        if ":memory:" in database_url or database_url.rstrip("/").endswith("sqlite+aiosqlite:"):
            options["poolclass"] = StaticPool
        options["connect_args"] = {"check_same_thread": False}
        return options

    options.update(
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=settings.DATABASE_MAX_OVERFLOW,
        pool_timeout=settings.DATABASE_POOL_TIMEOUT,
        pool_recycle=3600,  # 1 hour
    )
    return options


def _unicode_lower(value: Optional[str]) -> Optional[str]:
    return value.lower() if value is not None else None


def register_sqlite_functions(async_engine: AsyncEngine) -> None:
    """Replace SQLite's ASCII-only lower() on every new connection"""

    @event.listens_for(async_engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.create_function("lower", 1, _unicode_lower)


async def init_db(database_url: Optional[str] = None) -> None:
    """Initialize database connection and create tables"""
    global engine, async_session_factory

    url = database_url or settings.database_url_async

    try:
        engine = create_async_engine(url, **_engine_options(url))
        if engine.dialect.name == "sqlite":
            register_sqlite_functions(engine)

        async_session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

        # Register mappers on the metadata before creating tables
        import models  # noqa: F401

        async with engine.begin() as conn:
            if settings.DATABASE_CREATE_TABLES:
                await conn.run_sync(Base.metadata.create_all)
            else:
                await conn.execute(text("SELECT 1"))

        logger.info("Database connection initialized", url=engine.url.render_as_string(hide_password=True))

    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise


async def close_db() -> None:
    """Close database connections"""
    global engine, async_session_factory

    if engine:
        await engine.dispose()
        engine = None
        async_session_factory = None
        logger.info("Database connections closed")


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Async context manager for database sessions
    Provides automatic transaction management and cleanup
    """
    if not async_session_factory:
        raise RuntimeError("Database not initialized. Call init_db() first.")

    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except RecipeNotFoundError as e:
            await session.rollback()
            logger.debug("Database session rolled back", reason=str(e))
            raise
        except Exception as e:
            await session.rollback()
            logger.error("Database session error", error=str(e), error_type=type(e).__name__)
            raise


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for FastAPI to get database session
    """
    async with get_db_session() as session:
        yield session


class DatabaseHealthCheck:
    """Database health check utilities"""

    @staticmethod
    async def check_connection() -> bool:
        """Check if database connection is healthy"""
        try:
            async with get_db_session() as session:
                result = await session.execute(text("SELECT 1"))
                return result.scalar() == 1
        except Exception as e:
            logger.error("Database health check failed", error=str(e))
            return False

    @staticmethod
    async def get_connection_info() -> dict:
        """Get database connection information"""
        if not engine:
            return {"status": "not_initialized"}

        return {
            "status": "healthy",
            "dialect": engine.dialect.name,
            "driver": engine.dialect.driver,
            "pool": engine.pool.status(),
        }


# Export commonly used items
__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "init_db",
    "close_db",
    "get_db_session",
    "get_db",
    "DatabaseHealthCheck",
    "register_sqlite_functions"
]
