"""asyncpg-backed implementation of the DatabaseRepository protocol."""

import logging
from typing import Any, Dict, List, Optional

import asyncpg

from ....core.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class AsyncpgDatabaseRepository:
    """Database repository running queries on an asyncpg connection pool.

    Rows are returned as plain dictionaries so repositories stay independent
    of asyncpg's Record type.
    """

    def __init__(self, pool: asyncpg.Pool):
        """Initialize with an existing pool.

        Args:
            pool: asyncpg connection pool
        """
        self._pool = pool

    @classmethod
    async def create(
        cls,
        dsn: str,
        min_size: int = 1,
        max_size: int = 10,
        **pool_kwargs
    ) -> "AsyncpgDatabaseRepository":
        """Create a repository with a new connection pool."""
        try:
            pool = await asyncpg.create_pool(
                dsn=dsn,
                min_size=min_size,
                max_size=max_size,
                **pool_kwargs
            )
        except (asyncpg.PostgresError, OSError) as e:
            logger.error(f"Failed to create database pool: {e}")
            raise DatabaseError(f"Failed to create database pool: {e}") from e

        logger.info(f"Created database pool (min={min_size}, max={max_size})")
        return cls(pool)

    async def close(self) -> None:
        """Close the underlying pool."""
        await self._pool.close()
        logger.info("Closed database pool")

    async def execute_query(self, query: str, *args: Any) -> List[Dict[str, Any]]:
        """Execute a query and return all rows."""
        async with self._pool.acquire() as connection:
            records = await connection.fetch(query, *args)
        return [dict(record) for record in records]

    async def execute_fetchrow(self, query: str, *args: Any) -> Optional[Dict[str, Any]]:
        """Execute a query and return single row."""
        async with self._pool.acquire() as connection:
            record = await connection.fetchrow(query, *args)
        return dict(record) if record is not None else None

    async def execute_fetchval(self, query: str, *args: Any) -> Any:
        """Execute a query and return single value."""
        async with self._pool.acquire() as connection:
            return await connection.fetchval(query, *args)
