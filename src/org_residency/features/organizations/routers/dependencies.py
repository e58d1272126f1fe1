"""Resident organization router dependencies.

Services wire their own resolver (database pool, Keycloak credentials) and
register it with ``app.dependency_overrides``.
"""

from ..services.resident_resolver import ResidentOrganizationResolver


def get_resident_organization_resolver() -> ResidentOrganizationResolver:
    """Placeholder for resident organization resolver dependency.

    Services should override this dependency to provide a configured
    resolver, e.g. one built with ``create_resident_organization_resolver``.
    """
    raise NotImplementedError(
        "Services must provide their own resident organization resolver dependency"
    )
