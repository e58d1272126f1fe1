"""Database feature: query protocol and asyncpg implementation."""

from .entities import DatabaseRepository
from .repositories import AsyncpgDatabaseRepository

__all__ = [
    "DatabaseRepository",
    "AsyncpgDatabaseRepository",
]
