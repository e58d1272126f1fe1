"""Constants for group residency resolution.

Distinguished identifiers and defaults shared by the resolver, the
repositories and the Keycloak adapter.
"""

# Distinguished root organization. It is always associated with the super
# tenant and never looked up through the tenant mapper.
SUPER_ORGANIZATION_ID = "10084a8d-113f-4211-a0d5-efe36b082211"

# Administrative tenant namespace, never a valid residency scope.
SUPER_TENANT_DOMAIN = "carbon.super"

# Database defaults
DEFAULT_DATABASE_SCHEMA = "admin"
DEFAULT_DB_POOL_MIN_SIZE = 1
DEFAULT_DB_POOL_MAX_SIZE = 10

# Keycloak defaults
DEFAULT_KEYCLOAK_URL = "http://localhost:8080"
DEFAULT_KEYCLOAK_ADMIN_REALM = "master"
DEFAULT_KEYCLOAK_ADMIN_CLIENT_ID = "admin-cli"

# Tenant realms follow the platform convention tenant-{slug}
DEFAULT_TENANT_REALM_TEMPLATE = "tenant-{tenant_domain}"
