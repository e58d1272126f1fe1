"""Resident organization resolution for groups.

Walks the ancestor chain of an accessed organization, maps each ancestor to
its tenant domain and asks that tenant's group store whether the group
exists there. The scan never stops early: every ancestor is checked and the
last one in chain order that reports the group wins.
"""

import asyncio
import logging
from functools import reduce
from typing import Dict, List, Optional, Sequence, Union

from ....config.constants import SUPER_ORGANIZATION_ID, SUPER_TENANT_DOMAIN
from ....core.exceptions import ResolutionError, ValidationError
from ....core.value_objects import GroupId, OrganizationId, TenantDomain
from ...groups.entities.protocols import GroupStore, GroupStoreHandle
from ..entities.protocols import HierarchyProvider, TenantMapper


logger = logging.getLogger(__name__)


def select_resident_organization(
    ancestors: Sequence[OrganizationId],
    matches: Sequence[bool]
) -> Optional[OrganizationId]:
    """Fold ancestor match results into the resident organization.

    Later matches overwrite earlier ones, so the last ancestor in chain
    order that holds the group is returned.
    """
    return reduce(
        lambda candidate, pair: pair[0] if pair[1] else candidate,
        zip(ancestors, matches),
        None
    )


class ResidentOrganizationResolver:
    """Resolves the organization a group is resident in.

    Collaborators are injected so the resolver holds no state of its own
    and is safe to share between concurrent callers.
    """

    def __init__(
        self,
        hierarchy_provider: HierarchyProvider,
        tenant_mapper: TenantMapper,
        group_store: GroupStore,
        super_organization_id: str = SUPER_ORGANIZATION_ID,
        super_tenant_domain: str = SUPER_TENANT_DOMAIN,
        concurrent_lookups: bool = False
    ):
        """Initialize with injected collaborators.

        Args:
            hierarchy_provider: Ancestor chain lookup
            tenant_mapper: Organization to tenant domain lookup
            group_store: Tenant scoped group existence queries
            super_organization_id: Distinguished root organization ID
            super_tenant_domain: Administrative tenant domain, never a residency scope
            concurrent_lookups: Run per-ancestor lookups concurrently before folding
        """
        self._hierarchy_provider = hierarchy_provider
        self._tenant_mapper = tenant_mapper
        self._group_store = group_store
        self._super_organization_id = super_organization_id
        self._super_tenant_domain = super_tenant_domain
        self._concurrent_lookups = concurrent_lookups

    async def resolve_resident_organization(
        self,
        group_id: str,
        accessed_organization_id: str
    ) -> Optional[str]:
        """Resolve the resident organization ID of a group.

        Args:
            group_id: Group identifier within some tenant's user-store
            accessed_organization_id: Organization the caller operates in

        Returns:
            Resident organization ID, or None if no ancestor holds the group

        Raises:
            ValidationError: If either identifier is blank
            ResolutionError: If a collaborator fails during the scan
        """
        if not isinstance(group_id, str) or not group_id.strip():
            raise ValidationError("Group ID must be a non-empty string")
        if not isinstance(accessed_organization_id, str) or not accessed_organization_id.strip():
            raise ValidationError("Accessed organization ID must be a non-empty string")

        resident = await self.resolve(GroupId(group_id), OrganizationId(accessed_organization_id))
        return resident.value if resident else None

    async def resolve(
        self,
        group_id: GroupId,
        accessed_organization_id: OrganizationId
    ) -> Optional[OrganizationId]:
        """Resolve the resident organization of a group.

        Raises:
            ResolutionError: If a collaborator fails; no partial result is returned
        """
        try:
            ancestors = await self._hierarchy_provider.get_ancestor_organization_ids(
                accessed_organization_id
            )
            if not ancestors:
                logger.debug(f"No ancestors for organization {accessed_organization_id}")
                return None

            ancestors = list(ancestors)
            if self._concurrent_lookups:
                matches = await self._check_ancestors_concurrently(group_id, ancestors)
            else:
                matches = await self._check_ancestors(group_id, ancestors)

        except ResolutionError:
            raise
        except Exception as e:
            logger.error(
                f"Failed to resolve resident organization of group {group_id} "
                f"from organization {accessed_organization_id}: {e}"
            )
            raise ResolutionError(group_id.value, e) from e

        resident = select_resident_organization(ancestors, matches)
        if resident:
            logger.info(f"Resolved resident organization {resident} for group {group_id}")
        else:
            logger.debug(f"No resident organization found for group {group_id}")
        return resident

    async def _check_ancestors(
        self,
        group_id: GroupId,
        ancestors: List[OrganizationId]
    ) -> List[bool]:
        """Check each ancestor in chain order."""
        handles: Dict[TenantDomain, GroupStoreHandle] = {}
        matches = []

        for organization_id in ancestors:
            tenant_domain = await self._resolve_tenant_domain_for_org(organization_id)
            if tenant_domain is None:
                matches.append(False)
                continue

            handle = handles.get(tenant_domain)
            if handle is None:
                handle = await self._group_store.for_tenant(tenant_domain)
                handles[tenant_domain] = handle

            matches.append(await self._group_exists(handle, group_id, organization_id))

        return matches

    async def _check_ancestors_concurrently(
        self,
        group_id: GroupId,
        ancestors: List[OrganizationId]
    ) -> List[bool]:
        """Check all ancestors concurrently, keeping results in chain order.

        Each ancestor runs its own domain lookup, activation and existence
        check. Activation is shared between ancestors of the same tenant, so
        an activation failure is reported by each of them.
        """
        activations: Dict[TenantDomain, "asyncio.Future[GroupStoreHandle]"] = {}

        async def check(organization_id: OrganizationId) -> bool:
            tenant_domain = await self._resolve_tenant_domain_for_org(organization_id)
            if tenant_domain is None:
                return False

            activation = activations.get(tenant_domain)
            if activation is None:
                activation = asyncio.ensure_future(self._group_store.for_tenant(tenant_domain))
                activations[tenant_domain] = activation

            handle = await activation
            return await self._group_exists(handle, group_id, organization_id)

        return _raise_first_failure(await asyncio.gather(
            *(check(organization_id) for organization_id in ancestors),
            return_exceptions=True
        ))

    async def _resolve_tenant_domain_for_org(
        self,
        organization_id: OrganizationId
    ) -> Optional[TenantDomain]:
        """Get the tenant domain of an ancestor, or None if it cannot own groups."""
        if organization_id.value == self._super_organization_id:
            tenant_domain = self._super_tenant_domain
        else:
            tenant_domain = await self._tenant_mapper.resolve_tenant_domain(organization_id)

        if isinstance(tenant_domain, TenantDomain):
            tenant_domain = tenant_domain.value

        if not tenant_domain or not tenant_domain.strip() or tenant_domain == self._super_tenant_domain:
            logger.debug(f"Skipping organization {organization_id}: no eligible tenant domain")
            return None

        return TenantDomain(tenant_domain)

    async def _group_exists(
        self,
        handle: GroupStoreHandle,
        group_id: GroupId,
        organization_id: OrganizationId
    ) -> bool:
        exists = await handle.exists(group_id)
        if exists:
            logger.debug(f"Group {group_id} exists in organization {organization_id}")
        return exists


def _raise_first_failure(results: Sequence[Union[object, BaseException]]) -> list:
    """Raise the first exception in result order, else return the results."""
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return list(results)
