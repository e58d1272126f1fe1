"""Core module for org-residency.

Contains the exception hierarchy and the identifier value objects shared by
every feature.
"""

from .exceptions import (
    ResidencyError,
    ValidationError,
    ResolutionError,
    create_error_response,
    get_http_status_code,
)
from .value_objects import (
    OrganizationId,
    TenantDomain,
    GroupId,
    RealmId,
)

__all__ = [
    "ResidencyError",
    "ValidationError",
    "ResolutionError",
    "create_error_response",
    "get_http_status_code",
    "OrganizationId",
    "TenantDomain",
    "GroupId",
    "RealmId",
]
