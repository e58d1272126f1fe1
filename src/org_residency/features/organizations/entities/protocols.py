"""Protocol interfaces for organization hierarchy lookups.

Defines the contracts the resident organization resolver needs from the
organization store, following protocol-based dependency injection patterns.
"""

from abc import abstractmethod
from typing import Optional, Protocol, Sequence, runtime_checkable

from ....core.value_objects import OrganizationId


@runtime_checkable
class HierarchyProvider(Protocol):
    """Protocol for organization ancestor lookups."""

    @abstractmethod
    async def get_ancestor_organization_ids(
        self,
        organization_id: OrganizationId
    ) -> Optional[Sequence[OrganizationId]]:
        """Get the ordered ancestor chain of an organization.

        An empty or None result means the organization has no ancestors
        (or is unknown to the store); it is not an error.
        """
        ...


@runtime_checkable
class TenantMapper(Protocol):
    """Protocol for mapping organizations to tenant domains."""

    @abstractmethod
    async def resolve_tenant_domain(self, organization_id: OrganizationId) -> Optional[str]:
        """Get the tenant domain associated with an organization.

        Raises a store-level error if the organization record is missing
        or the backing store is unavailable.
        """
        ...
