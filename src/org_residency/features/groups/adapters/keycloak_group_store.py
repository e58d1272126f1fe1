"""Keycloak-backed group store.

Each tenant's user-store is a Keycloak realm named from the tenant domain
(``tenant-{tenant_domain}`` by default). Admin credentials authenticate
against the admin realm and operate on the tenant realm.
"""

import logging
from typing import Optional

from keycloak import KeycloakAdmin, KeycloakOpenIDConnection
from keycloak.exceptions import KeycloakError

from ....config.settings import ResidencySettings
from ....config.constants import (
    DEFAULT_KEYCLOAK_ADMIN_REALM,
    DEFAULT_KEYCLOAK_ADMIN_CLIENT_ID,
    DEFAULT_TENANT_REALM_TEMPLATE,
)
from ....core.exceptions import (
    ConfigurationError,
    GroupStoreError,
    RealmNotFoundError,
    TenantActivationError,
)
from ....core.value_objects import GroupId, RealmId, TenantDomain

logger = logging.getLogger(__name__)


def _is_not_found(error: KeycloakError) -> bool:
    return getattr(error, "response_code", None) == 404


class KeycloakGroupHandle:
    """Group existence queries against a single tenant realm."""

    def __init__(self, admin_client: KeycloakAdmin, realm_id: RealmId):
        self._admin = admin_client
        self.realm_id = realm_id

    async def exists(self, group_id: GroupId) -> bool:
        """Check if the group exists in the realm."""
        try:
            await self._admin.a_get_group(group_id.value)
        except KeycloakError as e:
            if _is_not_found(e):
                logger.debug(f"Group {group_id} not found in realm {self.realm_id}")
                return False
            logger.error(f"Failed to look up group {group_id} in realm {self.realm_id}: {e}")
            raise GroupStoreError(
                f"Cannot look up group in realm '{self.realm_id}': {e}",
                details={"realm": self.realm_id.value, "group_id": group_id.value}
            ) from e

        return True


class KeycloakGroupStore:
    """Group store handing out one realm-scoped handle per tenant.

    Supports two authentication methods:
    1. Admin credentials: username + password against the admin realm
    2. Client credentials: client_id + client_secret
    """

    def __init__(
        self,
        server_url: str,
        admin_realm: str = DEFAULT_KEYCLOAK_ADMIN_REALM,
        client_id: str = DEFAULT_KEYCLOAK_ADMIN_CLIENT_ID,
        username: Optional[str] = None,
        password: Optional[str] = None,
        client_secret: Optional[str] = None,
        verify: bool = True,
        realm_template: str = DEFAULT_TENANT_REALM_TEMPLATE,
    ):
        """Initialize the group store.

        Args:
            server_url: Keycloak server URL
            admin_realm: Realm the admin credentials authenticate against
            client_id: Client ID (default: admin-cli)
            username: Admin username (for admin auth)
            password: Admin password (for admin auth)
            client_secret: Client secret (for client credentials auth)
            verify: SSL verification (default: True)
            realm_template: Format string mapping a tenant domain to a realm name
        """
        if not ((username and password) or client_secret):
            raise ConfigurationError(
                "Must provide either (username + password) or client_secret for authentication"
            )
        if "{tenant_domain}" not in realm_template:
            raise ConfigurationError(
                f"Realm template must contain '{{tenant_domain}}': {realm_template}"
            )

        self.server_url = self._normalize_server_url(server_url)
        self.admin_realm = admin_realm
        self.client_id = client_id
        self.username = username
        self.password = password
        self.client_secret = client_secret
        self.verify = verify
        self.realm_template = realm_template

    @classmethod
    def from_settings(cls, settings: ResidencySettings) -> "KeycloakGroupStore":
        """Build a group store from residency settings."""
        client_secret = None
        if settings.uses_client_credentials:
            client_secret = settings.keycloak_client_secret.get_secret_value()

        password = None
        if settings.keycloak_admin_password is not None:
            password = settings.keycloak_admin_password.get_secret_value()

        return cls(
            server_url=settings.keycloak_url,
            admin_realm=settings.keycloak_admin_realm,
            client_id=settings.keycloak_admin_client_id,
            username=settings.keycloak_admin_username,
            password=password,
            client_secret=client_secret,
            verify=settings.keycloak_verify_ssl,
            realm_template=settings.tenant_realm_template,
        )

    def _normalize_server_url(self, server_url: str) -> str:
        """Strip the legacy /auth suffix, not used by Keycloak v18+."""
        server_url = server_url.rstrip('/')
        if server_url.endswith('/auth'):
            server_url = server_url[:-5]
        return server_url

    def realm_for(self, tenant_domain: TenantDomain) -> RealmId:
        """Map a tenant domain to its realm identifier."""
        return RealmId(self.realm_template.format(tenant_domain=tenant_domain.value))

    def _create_realm_admin(self, realm_name: str) -> KeycloakAdmin:
        """Create a KeycloakAdmin client operating on a specific realm."""
        if self.client_secret:
            connection = KeycloakOpenIDConnection(
                server_url=self.server_url,
                realm_name=realm_name,
                user_realm_name=self.admin_realm,
                client_id=self.client_id,
                client_secret_key=self.client_secret,
                verify=self.verify,
            )
            return KeycloakAdmin(connection=connection)

        return KeycloakAdmin(
            server_url=self.server_url,
            username=self.username,
            password=self.password,
            realm_name=realm_name,
            user_realm_name=self.admin_realm,
            client_id=self.client_id,
            verify=self.verify,
        )

    async def for_tenant(self, tenant_domain: TenantDomain) -> KeycloakGroupHandle:
        """Activate the tenant realm and return a handle for group queries."""
        realm_id = self.realm_for(tenant_domain)

        try:
            admin_client = self._create_realm_admin(realm_id.value)
            await admin_client.a_get_realm(realm_id.value)
        except KeycloakError as e:
            if _is_not_found(e):
                raise RealmNotFoundError(
                    f"Realm '{realm_id}' not found for tenant '{tenant_domain}'",
                    details={"realm": realm_id.value, "tenant_domain": tenant_domain.value}
                ) from e
            logger.error(f"Failed to activate realm {realm_id} for tenant {tenant_domain}: {e}")
            raise TenantActivationError(
                f"Cannot activate tenant '{tenant_domain}': {e}",
                details={"realm": realm_id.value, "tenant_domain": tenant_domain.value}
            ) from e

        logger.debug(f"Activated realm {realm_id} for tenant {tenant_domain}")
        return KeycloakGroupHandle(admin_client, realm_id)
