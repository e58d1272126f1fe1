"""Organization repositories."""

from .organization_hierarchy_repository import OrganizationHierarchyRepository

__all__ = ["OrganizationHierarchyRepository"]
