"""Group store adapters."""

from .keycloak_group_store import KeycloakGroupStore, KeycloakGroupHandle

__all__ = ["KeycloakGroupStore", "KeycloakGroupHandle"]
