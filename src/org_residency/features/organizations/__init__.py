"""Organizations feature module - group resident organization resolution.

Walks the organization tree stored in the admin database and asks each
ancestor's tenant whether it owns a group.
"""

# Protocols
from .entities import HierarchyProvider, TenantMapper

# Repository implementations
from .repositories import OrganizationHierarchyRepository

# Service implementations
from .services import ResidentOrganizationResolver, select_resident_organization

# Router implementations
from .routers import resident_organization_router, get_resident_organization_resolver

# Response models
from .models import ResidentOrganizationResponse

# Factories
from .utils.factory import create_resident_organization_resolver

__all__ = [
    # Protocols
    "HierarchyProvider",
    "TenantMapper",

    # Repositories
    "OrganizationHierarchyRepository",

    # Services
    "ResidentOrganizationResolver",
    "select_resident_organization",

    # Routers
    "resident_organization_router",
    "get_resident_organization_resolver",

    # Response models
    "ResidentOrganizationResponse",

    # Factories
    "create_resident_organization_resolver",
]
