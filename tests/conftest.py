"""Pytest configuration and fixtures for org-residency tests."""

from typing import Dict, Iterable, List, Optional, Set

import pytest
from unittest.mock import AsyncMock

from org_residency.config.constants import SUPER_ORGANIZATION_ID, SUPER_TENANT_DOMAIN
from org_residency.core.value_objects import GroupId, OrganizationId, TenantDomain
from org_residency.features.organizations.services.resident_resolver import (
    ResidentOrganizationResolver,
)


class FakeHierarchyProvider:
    """In-memory ancestor chains keyed by organization ID."""

    def __init__(self, chains: Dict[str, Optional[List[str]]], error: Optional[Exception] = None):
        self._chains = chains
        self._error = error
        self.calls: List[OrganizationId] = []

    async def get_ancestor_organization_ids(self, organization_id: OrganizationId):
        self.calls.append(organization_id)
        if self._error:
            raise self._error
        chain = self._chains.get(organization_id.value)
        if chain is None:
            return None
        return [OrganizationId(org_id) for org_id in chain]


class FakeTenantMapper:
    """In-memory organization to tenant domain mapping."""

    def __init__(self, tenants: Dict[str, Optional[str]], failing: Optional[Dict[str, Exception]] = None):
        self._tenants = tenants
        self._failing = failing or {}
        self.calls: List[str] = []

    async def resolve_tenant_domain(self, organization_id: OrganizationId) -> Optional[str]:
        self.calls.append(organization_id.value)
        if organization_id.value in self._failing:
            raise self._failing[organization_id.value]
        return self._tenants.get(organization_id.value)


class InMemoryGroupHandle:
    """Group existence answered from a set of group IDs."""

    def __init__(self, tenant_domain: str, groups: Set[str], error: Optional[Exception] = None):
        self.tenant_domain = tenant_domain
        self._groups = groups
        self._error = error
        self.queries: List[str] = []

    async def exists(self, group_id: GroupId) -> bool:
        self.queries.append(group_id.value)
        if self._error:
            raise self._error
        return group_id.value in self._groups


class InMemoryGroupStore:
    """Group store backed by a tenant domain to group IDs mapping."""

    def __init__(
        self,
        groups: Dict[str, Iterable[str]],
        activation_errors: Optional[Dict[str, Exception]] = None,
        exists_errors: Optional[Dict[str, Exception]] = None
    ):
        self._groups = {domain: set(ids) for domain, ids in groups.items()}
        self._activation_errors = activation_errors or {}
        self._exists_errors = exists_errors or {}
        self.activated: List[str] = []
        self.handles: Dict[str, InMemoryGroupHandle] = {}

    async def for_tenant(self, tenant_domain: TenantDomain) -> InMemoryGroupHandle:
        self.activated.append(tenant_domain.value)
        if tenant_domain.value in self._activation_errors:
            raise self._activation_errors[tenant_domain.value]
        handle = InMemoryGroupHandle(
            tenant_domain.value,
            self._groups.get(tenant_domain.value, set()),
            self._exists_errors.get(tenant_domain.value)
        )
        self.handles[tenant_domain.value] = handle
        return handle


@pytest.fixture
def super_organization_id():
    """Distinguished root organization ID."""
    return SUPER_ORGANIZATION_ID


@pytest.fixture
def hierarchy_provider(super_organization_id):
    """Hierarchy with org3 -> org2 -> org1 -> root."""
    return FakeHierarchyProvider({
        "org3": ["org2", "org1", super_organization_id],
        "org4": ["org4", "org2", "org1", super_organization_id],
        "lonely": [],
    })


@pytest.fixture
def tenant_mapper():
    """Tenant domains for org1, org2 and org4."""
    return FakeTenantMapper({"org1": "t1", "org2": "t2", "org4": "t4"})


@pytest.fixture
def make_resolver(hierarchy_provider, tenant_mapper):
    """Build a resolver over the default hierarchy with a given group store."""
    def _make(group_store, concurrent_lookups: bool = False, **overrides):
        return ResidentOrganizationResolver(
            hierarchy_provider=overrides.get("hierarchy_provider", hierarchy_provider),
            tenant_mapper=overrides.get("tenant_mapper", tenant_mapper),
            group_store=group_store,
            concurrent_lookups=concurrent_lookups
        )
    return _make


@pytest.fixture
def mock_database_repository():
    """Mock database repository for testing."""
    mock_db = AsyncMock()
    mock_db.execute_query = AsyncMock()
    mock_db.execute_fetchrow = AsyncMock()
    mock_db.execute_fetchval = AsyncMock()
    return mock_db


@pytest.fixture
def super_tenant_domain():
    """Administrative tenant domain."""
    return SUPER_TENANT_DOMAIN
