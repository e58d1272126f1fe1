"""Standardized error handling for organization store operations.

Repository methods are wrapped so that driver failures surface as
``DatabaseError`` while domain errors pass through untouched.
"""

import functools
import logging
from typing import Any, Callable, Dict, Optional

import asyncpg

from ....core.exceptions import DatabaseError, ResidencyError

logger = logging.getLogger(__name__)


def organization_store_error_handler(
    operation_name: str,
    context_fields: Optional[Dict[str, str]] = None
):
    """Decorator for organization store error handling.

    Args:
        operation_name: Name of the operation for logging
        context_fields: Additional context fields for logging

    Usage:
        @organization_store_error_handler("get ancestors")
        async def get_ancestor_organization_ids(self, organization_id):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            operation_context = {"operation": operation_name}
            if context_fields:
                operation_context.update(context_fields)

            # First positional after self is the organization id
            if len(args) > 1:
                operation_context["organization_id"] = str(args[1])
            elif "organization_id" in kwargs:
                operation_context["organization_id"] = str(kwargs["organization_id"])

            context_str = ", ".join(f"{k}={v}" for k, v in operation_context.items())

            try:
                return await func(*args, **kwargs)

            except ResidencyError as e:
                logger.info(f"Domain exception in {operation_name}: {e} | Context: {context_str}")
                raise

            except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
                logger.error(f"Database error in {operation_name}: {e} | Context: {context_str}")
                raise DatabaseError(
                    f"Failed to {operation_name}: {e}",
                    details=operation_context
                ) from e

        return wrapper
    return decorator


def handle_ancestor_lookup_error(func: Callable) -> Callable:
    """Decorator specifically for ancestor chain lookups."""
    return organization_store_error_handler(
        "get ancestor organizations",
        context_fields={"operation_type": "hierarchy"}
    )(func)


def handle_tenant_domain_lookup_error(func: Callable) -> Callable:
    """Decorator specifically for tenant domain lookups."""
    return organization_store_error_handler(
        "resolve tenant domain",
        context_fields={"operation_type": "tenant_mapping"}
    )(func)
