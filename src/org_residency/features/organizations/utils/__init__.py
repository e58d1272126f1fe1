"""Organization utilities.

The resolver factory lives in ``utils.factory`` and is imported from there
directly, since it depends on the repositories that use these helpers.
"""

from .error_handling import (
    organization_store_error_handler,
    handle_ancestor_lookup_error,
    handle_tenant_domain_lookup_error,
)

__all__ = [
    "organization_store_error_handler",
    "handle_ancestor_lookup_error",
    "handle_tenant_domain_lookup_error",
]
