"""Database protocols for org-residency.

Repositories depend on this protocol rather than on a concrete driver so any
connection source (pool, service, test double) can be injected.
"""

from abc import abstractmethod
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class DatabaseRepository(Protocol):
    """Base protocol for database repositories."""

    @abstractmethod
    async def execute_query(self, query: str, *args: Any) -> List[Dict[str, Any]]:
        """Execute a query and return all rows."""
        ...

    @abstractmethod
    async def execute_fetchrow(self, query: str, *args: Any) -> Optional[Dict[str, Any]]:
        """Execute a query and return single row."""
        ...

    @abstractmethod
    async def execute_fetchval(self, query: str, *args: Any) -> Any:
        """Execute a query and return single value."""
        ...
