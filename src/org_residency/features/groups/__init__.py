"""Groups feature - tenant-scoped group existence queries.

The resolver only ever asks a tenant's user-store whether a group exists;
this feature defines that capability and its Keycloak implementation.
"""

from .entities import GroupStore, GroupStoreHandle
from .adapters import KeycloakGroupStore, KeycloakGroupHandle

__all__ = [
    # Protocols
    "GroupStore",
    "GroupStoreHandle",

    # Adapters
    "KeycloakGroupStore",
    "KeycloakGroupHandle",
]
