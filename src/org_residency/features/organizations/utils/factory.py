"""Factory utilities for wiring a resident organization resolver.

Centralizes construction from settings so services only decide where the
database repository comes from.
"""

from typing import Optional

from ....config.settings import ResidencySettings, get_settings
from ....features.database.entities.protocols import DatabaseRepository
from ...groups.adapters.keycloak_group_store import KeycloakGroupStore
from ...groups.entities.protocols import GroupStore
from ..repositories.organization_hierarchy_repository import OrganizationHierarchyRepository
from ..services.resident_resolver import ResidentOrganizationResolver


def create_resident_organization_resolver(
    database_repository: DatabaseRepository,
    settings: Optional[ResidencySettings] = None,
    group_store: Optional[GroupStore] = None
) -> ResidentOrganizationResolver:
    """Create a resolver backed by the organization database and Keycloak.

    Args:
        database_repository: Database repository for the admin schema
        settings: Residency settings (default: cached environment settings)
        group_store: Group store override (default: Keycloak group store)

    Returns:
        Configured resident organization resolver
    """
    settings = settings or get_settings()
    hierarchy_repository = OrganizationHierarchyRepository(
        database_repository, schema=settings.database_schema
    )

    return ResidentOrganizationResolver(
        hierarchy_provider=hierarchy_repository,
        tenant_mapper=hierarchy_repository,
        group_store=group_store or KeycloakGroupStore.from_settings(settings),
        super_organization_id=settings.super_organization_id,
        super_tenant_domain=settings.super_tenant_domain,
        concurrent_lookups=settings.concurrent_lookups
    )
