"""Organization hierarchy SQL queries (parameterized by schema).

Centralizes the read-only queries used to walk the organization tree and to
map organizations to their tenants.
"""

# Ancestor chain, nearest first. Depth 0 is the organization itself.
ORGANIZATION_ANCESTORS = """
    WITH RECURSIVE ancestors AS (
        SELECT id, parent_organization_id, 0 AS depth
        FROM {schema}.organizations
        WHERE id = $1 AND deleted_at IS NULL
        UNION ALL
        SELECT o.id, o.parent_organization_id, a.depth + 1
        FROM {schema}.organizations o
        JOIN ancestors a ON o.id = a.parent_organization_id
        WHERE o.deleted_at IS NULL
    )
    SELECT id FROM ancestors ORDER BY depth ASC
"""

# Tenant domain of an organization. A row with a NULL tenant_domain means
# the organization exists but has no tenant.
ORGANIZATION_TENANT_DOMAIN = """
    SELECT o.id, t.slug AS tenant_domain
    FROM {schema}.organizations o
    LEFT JOIN {schema}.tenants t
        ON t.organization_id = o.id AND t.deleted_at IS NULL
    WHERE o.id = $1 AND o.deleted_at IS NULL
    ORDER BY t.created_at ASC NULLS LAST
    LIMIT 1
"""
