"""HTTP status code mapping for exceptions.

Exceptions not listed directly are resolved through their base classes,
so subclasses inherit the status of the closest mapped ancestor.
"""

from typing import Dict, Type

from .base import ResidencyError
from .domain import (
    ConfigurationError,
    DatabaseError,
    GroupStoreError,
    OrganizationError,
    OrganizationNotFoundError,
    RealmNotFoundError,
    ResolutionError,
    TenantActivationError,
    TenantError,
    ValidationError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 404 Not Found
    OrganizationNotFoundError: 404,
    RealmNotFoundError: 404,

    # 422 Unprocessable Entity
    ValidationError: 422,

    # 500 Internal Server Error
    ConfigurationError: 500,
    DatabaseError: 500,
    OrganizationError: 500,
    TenantError: 500,
    GroupStoreError: 500,
    ResolutionError: 500,

    # 503 Service Unavailable
    TenantActivationError: 503,

    # Default for ResidencyError
    ResidencyError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception, walking the class hierarchy.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code (500 when nothing in the hierarchy is mapped)
    """
    for exception_type in type(exception).__mro__:
        if exception_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_type]
    return 500
