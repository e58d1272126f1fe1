"""Exceptions module for org-residency.

This module provides the complete exception hierarchy for org-residency,
organized by domain concerns.
"""

from .base import (
    ResidencyError,
    get_http_status_code,
    create_error_response,
)

from .domain import (
    # Configuration Errors
    ConfigurationError,

    # Validation Errors
    ValidationError,

    # Database Errors
    DatabaseError,

    # Organization Errors
    OrganizationError,
    OrganizationNotFoundError,

    # Tenant Errors
    TenantError,
    TenantActivationError,
    RealmNotFoundError,

    # Group Store Errors
    GroupStoreError,

    # Resolution Errors
    ResolutionError,
)

from .http_mapping import HTTP_STATUS_MAP

__all__ = [
    # Base
    "ResidencyError",
    "get_http_status_code",
    "create_error_response",
    "HTTP_STATUS_MAP",

    # Configuration Errors
    "ConfigurationError",

    # Validation Errors
    "ValidationError",

    # Database Errors
    "DatabaseError",

    # Organization Errors
    "OrganizationError",
    "OrganizationNotFoundError",

    # Tenant Errors
    "TenantError",
    "TenantActivationError",
    "RealmNotFoundError",

    # Group Store Errors
    "GroupStoreError",

    # Resolution Errors
    "ResolutionError",
]
