"""Protocol interfaces for tenant group stores.

A group store hands out a per-tenant handle that can only answer whether a
group exists. How the tenant is activated (realm lookup, admin client
construction) stays behind ``for_tenant``.
"""

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from ....core.value_objects import TenantDomain, GroupId


@runtime_checkable
class GroupStoreHandle(Protocol):
    """Capability to query group existence within one tenant."""

    @abstractmethod
    async def exists(self, group_id: GroupId) -> bool:
        """Check if the group exists in this tenant's user-store."""
        ...


@runtime_checkable
class GroupStore(Protocol):
    """Protocol for obtaining tenant-scoped group store handles."""

    @abstractmethod
    async def for_tenant(self, tenant_domain: TenantDomain) -> GroupStoreHandle:
        """Activate the tenant and return its group store handle."""
        ...
