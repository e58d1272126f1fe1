"""Organization hierarchy repository using the database protocol.

Implements both HierarchyProvider and TenantMapper against the admin
schema. Accepts any database repository and schema name as parameters.
"""

import logging
from typing import List, Optional

from ....core.value_objects import OrganizationId
from ....core.exceptions import OrganizationNotFoundError
from ....features.database.entities.protocols import DatabaseRepository
from ..utils.queries import ORGANIZATION_ANCESTORS, ORGANIZATION_TENANT_DOMAIN
from ..utils.error_handling import (
    handle_ancestor_lookup_error,
    handle_tenant_domain_lookup_error,
)


logger = logging.getLogger(__name__)


class OrganizationHierarchyRepository:
    """Read-only database repository for the organization tree.

    Ancestor chains are returned nearest first and include the organization
    itself.
    """

    def __init__(self, database_repository: DatabaseRepository, schema: str = "admin"):
        """Initialize with existing database repository.

        Args:
            database_repository: Database repository implementation
            schema: Database schema name (default: admin)
        """
        self._db = database_repository
        self._schema = schema

    @handle_ancestor_lookup_error
    async def get_ancestor_organization_ids(
        self,
        organization_id: OrganizationId
    ) -> List[OrganizationId]:
        """Get ancestor organization IDs, starting with the organization itself."""
        query = ORGANIZATION_ANCESTORS.format(schema=self._schema)
        rows = await self._db.execute_query(query, organization_id.value)

        ancestors = [OrganizationId(str(row["id"])) for row in rows]
        logger.debug(f"Found {len(ancestors)} ancestors for organization {organization_id}")
        return ancestors

    @handle_tenant_domain_lookup_error
    async def resolve_tenant_domain(self, organization_id: OrganizationId) -> Optional[str]:
        """Get the tenant domain of an organization.

        Raises:
            OrganizationNotFoundError: If the organization does not exist
        """
        query = ORGANIZATION_TENANT_DOMAIN.format(schema=self._schema)
        row = await self._db.execute_fetchrow(query, organization_id.value)

        if row is None:
            raise OrganizationNotFoundError(
                f"Organization {organization_id} not found",
                details={"organization_id": organization_id.value}
            )

        return row.get("tenant_domain")
