"""
Database connection management for User Service.

Provides async PostgreSQL connection pooling using asyncpg.
"""

from typing import Optional

import asyncpg
from asyncpg import Pool

from ..config import settings
from ..logging_config import get_logger

logger = get_logger(__name__)


class DatabaseManager:
    """
    Manages PostgreSQL database connections with connection pooling.

    Attributes:
        pool: asyncpg connection pool
    """

    def __init__(self, dsn: Optional[str] = None) -> None:
        self.dsn = dsn or settings.DATABASE_URL
        self.pool: Optional[Pool] = None

    async def connect(self) -> None:
        """Create the connection pool if it does not exist yet."""
        if self.pool is not None:
            return

        logger.info("Connecting to database")
        try:
            self.pool = await asyncpg.create_pool(
                self.dsn,
                min_size=settings.DATABASE_POOL_MIN_SIZE,
                max_size=settings.DATABASE_POOL_SIZE,
                command_timeout=60,
            )
            logger.info(
                "Database connection pool created",
                pool_min_size=settings.DATABASE_POOL_MIN_SIZE,
                pool_max_size=settings.DATABASE_POOL_SIZE,
            )
        except Exception as e:
            logger.error("Failed to connect to database", error=str(e))
            raise

    async def disconnect(self) -> None:
        """Close database connection pool."""
        if self.pool:
            await self.pool.close()
            self.pool = None
            logger.info("Database connection pool closed")

    async def _ensure_pool(self) -> Pool:
        if not self.pool:
            await self.connect()
        return self.pool

    async def execute(self, query: str, *args) -> str:
        """
        Execute a query without returning results.

        Args:
            query: SQL query string
            *args: Query parameters

        Returns:
            Status string from execution, e.g. ``DELETE 1``
        """
        pool = await self._ensure_pool()
        async with pool.acquire() as conn:
            return await conn.execute(query, *args)

    async def fetch(self, query: str, *args) -> list:
        """Execute a query and fetch all results."""
        pool = await self._ensure_pool()
        async with pool.acquire() as conn:
            return await conn.fetch(query, *args)

    async def fetchrow(self, query: str, *args) -> Optional[asyncpg.Record]:
        """Execute a query and fetch one result."""
        pool = await self._ensure_pool()
        async with pool.acquire() as conn:
            return await conn.fetchrow(query, *args)

    async def fetchval(self, query: str, *args):
        """Execute a query and fetch the first column of the first row."""
        pool = await self._ensure_pool()
        async with pool.acquire() as conn:
            return await conn.fetchval(query, *args)


# Global database manager instance
db_manager = DatabaseManager()


def affected_rows(status: str) -> int:
    """
    Parse the row count out of an asyncpg command status.

    Args:
        status: Status string such as ``DELETE 1`` or ``UPDATE 0``

    Returns:
        The trailing row count, 0 when absent
    """
    try:
        return int(status.rsplit(" ", 1)[-1])
    except (ValueError, AttributeError):
        return 0
