"""Organization hierarchy protocols."""

from .protocols import HierarchyProvider, TenantMapper

__all__ = ["HierarchyProvider", "TenantMapper"]
