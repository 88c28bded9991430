# 📄 File: app/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to our database, like making sure we can talk to our data storage
# and creating the plant and care-log tables the first time the app starts.
#
# 🧪 Purpose (Technical Summary):
# Implements async SQLAlchemy engine management with connection pooling (PostgreSQL via asyncpg,
# SQLite via aiosqlite), schema creation, health checks and retry logic for robust connectivity.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine, declarative base)
# - app/shared/config/settings.py (database configuration)
# - asyncpg / aiosqlite (async drivers)
#
# 🔄 Connected Modules / Calls From:
# - app/shared/infrastructure/database/session.py (session management)
# - app/modules/plant_care/infrastructure/database/models.py (declarative base)
# - app/main.py (startup / shutdown) and app/api/v1/router.py (health endpoint)

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base

from app.shared.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Shared declarative base for every module's ORM models
Base = declarative_base()


class DatabaseConnectionManager:
    """
    Manages database connections with connection pooling,
    health monitoring, and automatic retry logic.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._engine: Optional[AsyncEngine] = None
        self._health_check_query = text("SELECT 1")
        self._retry_attempts = 3
        self._retry_delay = 1.0

    def _build_connection_params(self) -> Dict[str, Any]:
        """Build SQLAlchemy connection parameters from settings."""
        params: Dict[str, Any] = {
            "url": self._settings.DATABASE_URL,
            "echo": self._settings.DB_ECHO,
        }
        if self._settings.is_sqlite:
            return params

        params.update({
            "pool_pre_ping": True,
            "pool_recycle": self._settings.DB_POOL_RECYCLE,
            "pool_size": self._settings.DB_POOL_SIZE,
            "max_overflow": self._settings.DB_MAX_OVERFLOW,
            "pool_timeout": 30,
            "connect_args": {
                "server_settings": {
                    "application_name": "plant_care_backend",
                    "jit": "off"
                },
                "command_timeout": 60,
                "statement_cache_size": 0,
            }
        })
        return params

    async def initialize(self, create_schema: bool = True) -> None:
        """Initialize database engine and create missing tables."""
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        logger.info("Initializing database connection pool...")
        self._engine = create_async_engine(**self._build_connection_params())

        try:
            if create_schema:
                await self.create_schema()
            health = await self.health_check()
            if health["status"] != "healthy":
                raise RuntimeError(health.get("error", "Database health check failed"))
        except Exception as e:
            logger.error(f"Failed to initialize database connection: {e}")
            await self.close()
            raise

        logger.info("Database connection initialized successfully")

    async def create_schema(self) -> None:
        """Create all tables registered on the shared declarative base."""
        if self._engine is None:
            raise RuntimeError("Database engine not initialized")

        # Registers the plant care tables on Base.metadata
        from app.modules.plant_care.infrastructure.database import models  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ensured")

    async def health_check(self) -> dict:
        """
        Perform database health check and return structured status.
        """
        if self._engine is None:
            return {
                "status": "unhealthy",
                "error": "Database engine not initialized",
                "timestamp": datetime.now(timezone.utc).isoformat()
            }

        for attempt in range(self._retry_attempts):
            try:
                async with self._engine.connect() as conn:
                    result = await conn.execute(self._health_check_query)
                    result.scalar()

                logger.debug("Database health check passed")
                return {
                    "status": "healthy",
                    "timestamp": datetime.now(timezone.utc).isoformat()
                }

            except Exception as e:
                logger.warning(
                    f"Database health check failed (attempt {attempt + 1}/{self._retry_attempts}): {e}"
                )
                if attempt < self._retry_attempts - 1:
                    await asyncio.sleep(self._retry_delay * (2 ** attempt))

        logger.error("Database health check failed after all retry attempts")
        return {
            "status": "unhealthy",
            "error": "Database health check failed after all retry attempts",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    async def close(self) -> None:
        """Close database engine and all connections."""
        if self._engine is None:
            logger.warning("Database engine not initialized, nothing to close")
            return

        logger.info("Closing database connection pool...")
        await self._engine.dispose()
        self._engine = None
        logger.info("Database connection pool closed successfully")

    @property
    def engine(self) -> Optional[AsyncEngine]:
        """Get the SQLAlchemy async engine."""
        return self._engine

    @property
    def is_initialized(self) -> bool:
        """Check if database engine is initialized."""
        return self._engine is not None


# Global database connection manager instance
db_manager = DatabaseConnectionManager()


async def initialize_database() -> None:
    """Initialize the global database connection manager."""
    logger.info("Starting database initialization...")
    await db_manager.initialize()
    logger.info("Database initialization completed successfully.")


async def close_database() -> None:
    """Close the global database connection manager."""
    await db_manager.close()


def get_database_engine() -> AsyncEngine:
    """
    Get the database engine instance.

    Raises:
        RuntimeError: If database is not initialized
    """
    if not db_manager.is_initialized:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")

    return db_manager.engine


async def database_health_check() -> dict:
    """Perform database health check."""
    return await db_manager.health_check()
