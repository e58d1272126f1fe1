"""org-residency: resolve the resident organization of a group.

Given a group and the organization a caller accessed, finds the ancestor
organization whose tenant user-store owns the group.
"""

from .__version__ import __version__
from .core.exceptions import ResolutionError
from .features.organizations import (
    ResidentOrganizationResolver,
    OrganizationHierarchyRepository,
    create_resident_organization_resolver,
)
from .features.groups import GroupStore, GroupStoreHandle, KeycloakGroupStore

__all__ = [
    "__version__",
    "ResolutionError",
    "ResidentOrganizationResolver",
    "OrganizationHierarchyRepository",
    "create_resident_organization_resolver",
    "GroupStore",
    "GroupStoreHandle",
    "KeycloakGroupStore",
]
