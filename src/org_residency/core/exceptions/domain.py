"""Domain-specific exceptions for org-residency.

This module defines exceptions that relate to organizations, tenants,
group stores and resident organization resolution.
"""

from typing import Any, Dict, Optional

from .base import ResidencyError


# Configuration Errors
class ConfigurationError(ResidencyError):
    """Raised when there's a configuration issue."""
    pass


# Validation Errors
class ValidationError(ResidencyError):
    """Raised when input validation fails."""
    pass


# Database Errors
class DatabaseError(ResidencyError):
    """Base class for database-related errors."""
    pass


# Organization Errors
class OrganizationError(ResidencyError):
    """Base class for organization-related errors."""
    pass


class OrganizationNotFoundError(OrganizationError):
    """Raised when an organization record is not found."""
    pass


# Tenant Errors
class TenantError(ResidencyError):
    """Base class for tenant-related errors."""
    pass


class TenantActivationError(TenantError):
    """Raised when a tenant's user-store cannot be activated."""
    pass


class RealmNotFoundError(TenantActivationError):
    """Raised when the Keycloak realm backing a tenant is not found."""
    pass


# Group Store Errors
class GroupStoreError(ResidencyError):
    """Raised when a tenant's group store fails to answer a query."""
    pass


# Resolution Errors
class ResolutionError(ResidencyError):
    """Raised when resolving a group's resident organization fails.

    Wraps the collaborator failure that aborted the ancestor scan. The
    original exception is available as ``__cause__``.
    """

    ERROR_CODE = "RESOLVING_GROUP_RESIDENT_ORGANIZATION_FAILED"

    def __init__(
        self,
        group_id: str,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        message = f"Error while resolving resident organization of the group: {group_id}"
        error_details = {"group_id": group_id}
        if cause is not None:
            error_details["cause"] = f"{cause.__class__.__name__}: {cause}"
        if details:
            error_details.update(details)

        super().__init__(message, error_code=self.ERROR_CODE, details=error_details)
        self.group_id = group_id
        self.cause = cause
