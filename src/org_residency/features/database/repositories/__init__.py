"""Database repository implementations."""

from .asyncpg_repository import AsyncpgDatabaseRepository

__all__ = ["AsyncpgDatabaseRepository"]
