"""Tests for the organization hierarchy repository."""

from uuid import UUID

import asyncpg
import pytest

from org_residency.core.exceptions import DatabaseError, OrganizationNotFoundError
from org_residency.core.value_objects import OrganizationId
from org_residency.features.organizations.entities.protocols import HierarchyProvider, TenantMapper
from org_residency.features.organizations.repositories.organization_hierarchy_repository import (
    OrganizationHierarchyRepository,
)


class TestOrganizationHierarchyRepository:
    """Test ancestor and tenant domain lookups."""

    @pytest.fixture
    def repository(self, mock_database_repository):
        return OrganizationHierarchyRepository(mock_database_repository, schema="admin")

    def test_implements_protocols(self, repository):
        """Test that the repository satisfies both collaborator protocols."""
        assert isinstance(repository, HierarchyProvider)
        assert isinstance(repository, TenantMapper)

    @pytest.mark.asyncio
    async def test_get_ancestors_in_row_order(self, repository, mock_database_repository):
        """Test that ancestors keep the nearest-first order of the query."""
        root = UUID("10084a8d-113f-4211-a0d5-efe36b082211")
        mock_database_repository.execute_query.return_value = [
            {"id": "org3"},
            {"id": "org2"},
            {"id": root},
        ]

        ancestors = await repository.get_ancestor_organization_ids(OrganizationId("org3"))

        assert ancestors == [
            OrganizationId("org3"),
            OrganizationId("org2"),
            OrganizationId(str(root)),
        ]
        query, org_id = mock_database_repository.execute_query.call_args.args
        assert "admin.organizations" in query
        assert "WITH RECURSIVE" in query
        assert org_id == "org3"

    @pytest.mark.asyncio
    async def test_get_ancestors_empty(self, repository, mock_database_repository):
        """Test that an unknown organization yields an empty chain."""
        mock_database_repository.execute_query.return_value = []

        assert await repository.get_ancestor_organization_ids(OrganizationId("missing")) == []

    @pytest.mark.asyncio
    async def test_schema_is_applied(self, mock_database_repository):
        """Test that a custom schema name is used in queries."""
        repository = OrganizationHierarchyRepository(mock_database_repository, schema="platform")
        mock_database_repository.execute_query.return_value = []

        await repository.get_ancestor_organization_ids(OrganizationId("org1"))

        query = mock_database_repository.execute_query.call_args.args[0]
        assert "platform.organizations" in query

    @pytest.mark.asyncio
    async def test_resolve_tenant_domain(self, repository, mock_database_repository):
        """Test tenant domain lookup for an organization with a tenant."""
        mock_database_repository.execute_fetchrow.return_value = {
            "id": "org1", "tenant_domain": "acme-corp"
        }

        assert await repository.resolve_tenant_domain(OrganizationId("org1")) == "acme-corp"
        query = mock_database_repository.execute_fetchrow.call_args.args[0]
        assert "admin.tenants" in query

    @pytest.mark.asyncio
    async def test_resolve_tenant_domain_without_tenant(self, repository, mock_database_repository):
        """Test that an organization without a tenant yields None."""
        mock_database_repository.execute_fetchrow.return_value = {"id": "org1", "tenant_domain": None}

        assert await repository.resolve_tenant_domain(OrganizationId("org1")) is None

    @pytest.mark.asyncio
    async def test_resolve_tenant_domain_missing_organization(self, repository, mock_database_repository):
        """Test that a missing organization record raises."""
        mock_database_repository.execute_fetchrow.return_value = None

        with pytest.raises(OrganizationNotFoundError):
            await repository.resolve_tenant_domain(OrganizationId("ghost"))

    @pytest.mark.asyncio
    async def test_driver_error_becomes_database_error(self, repository, mock_database_repository):
        """Test that asyncpg failures are wrapped in DatabaseError."""
        failure = asyncpg.PostgresError("relation does not exist")
        mock_database_repository.execute_query.side_effect = failure

        with pytest.raises(DatabaseError) as exc_info:
            await repository.get_ancestor_organization_ids(OrganizationId("org1"))

        assert exc_info.value.__cause__ is failure
        assert exc_info.value.details["organization_id"] == "org1"

    @pytest.mark.asyncio
    async def test_connection_error_becomes_database_error(self, repository, mock_database_repository):
        """Test that connection failures are wrapped in DatabaseError."""
        mock_database_repository.execute_fetchrow.side_effect = ConnectionRefusedError("refused")

        with pytest.raises(DatabaseError):
            await repository.resolve_tenant_domain(OrganizationId("org1"))
