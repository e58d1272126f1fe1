"""Value objects for org-residency."""

from .identifiers import (
    OrganizationId,
    TenantDomain,
    GroupId,
    RealmId,
)

__all__ = [
    "OrganizationId",
    "TenantDomain",
    "GroupId",
    "RealmId",
]
