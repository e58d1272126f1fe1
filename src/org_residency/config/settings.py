"""
Configuration management for org-residency.

Settings are read from environment variables (case-insensitive) and an
optional .env file.
"""
from typing import Optional
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, SecretStr

from .constants import (
    SUPER_ORGANIZATION_ID,
    SUPER_TENANT_DOMAIN,
    DEFAULT_DATABASE_SCHEMA,
    DEFAULT_DB_POOL_MIN_SIZE,
    DEFAULT_DB_POOL_MAX_SIZE,
    DEFAULT_KEYCLOAK_URL,
    DEFAULT_KEYCLOAK_ADMIN_REALM,
    DEFAULT_KEYCLOAK_ADMIN_CLIENT_ID,
    DEFAULT_TENANT_REALM_TEMPLATE,
)


class ResidencySettings(BaseSettings):
    """Settings for resolving group resident organizations."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Database Configuration
    database_url: Optional[str] = Field(default=None, description="PostgreSQL DSN for the admin database")
    database_schema: str = Field(default=DEFAULT_DATABASE_SCHEMA)
    db_pool_min_size: int = Field(default=DEFAULT_DB_POOL_MIN_SIZE, ge=0)
    db_pool_max_size: int = Field(default=DEFAULT_DB_POOL_MAX_SIZE, ge=1)

    # Keycloak Configuration
    keycloak_url: str = Field(default=DEFAULT_KEYCLOAK_URL)
    keycloak_admin_realm: str = Field(default=DEFAULT_KEYCLOAK_ADMIN_REALM)
    keycloak_admin_client_id: str = Field(default=DEFAULT_KEYCLOAK_ADMIN_CLIENT_ID)
    keycloak_admin_username: Optional[str] = Field(default="admin")
    keycloak_admin_password: Optional[SecretStr] = Field(default=SecretStr("admin"))
    keycloak_client_secret: Optional[SecretStr] = Field(default=None)
    keycloak_verify_ssl: bool = Field(default=True)
    tenant_realm_template: str = Field(default=DEFAULT_TENANT_REALM_TEMPLATE)

    # Resolution Configuration
    super_organization_id: str = Field(default=SUPER_ORGANIZATION_ID)
    super_tenant_domain: str = Field(default=SUPER_TENANT_DOMAIN)
    concurrent_lookups: bool = Field(default=False)

    @property
    def uses_client_credentials(self) -> bool:
        """Check if Keycloak should authenticate with client credentials."""
        return self.keycloak_client_secret is not None and bool(
            self.keycloak_client_secret.get_secret_value()
        )


@lru_cache()
def get_settings() -> ResidencySettings:
    """Get cached settings instance."""
    return ResidencySettings()
