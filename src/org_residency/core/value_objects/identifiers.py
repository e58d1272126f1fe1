"""Value objects for identifiers in org-residency.

This module defines immutable value objects for the identifiers that flow
through group residency resolution. All of them are opaque,
non-blank strings.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class OrganizationId:
    """Organization identifier value object with basic validation."""
    value: str

    def __post_init__(self):
        if not self.value or not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Organization ID must be a non-blank string")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TenantDomain:
    """Tenant domain value object naming a tenant's identity namespace."""
    value: str

    def __post_init__(self):
        if not self.value or not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Tenant domain must be a non-blank string")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class GroupId:
    """Group identifier value object, meaningful within a single tenant."""
    value: str

    def __post_init__(self):
        if not self.value or not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Group ID must be a non-blank string")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RealmId:
    """Keycloak realm identifier value object with basic validation."""
    value: str

    def __post_init__(self):
        if not self.value or not isinstance(self.value, str):
            raise ValueError("Realm ID must be a non-empty string")

    def __str__(self) -> str:
        return self.value
