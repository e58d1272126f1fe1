"""Configuration module for org-residency."""

from .constants import (
    SUPER_ORGANIZATION_ID,
    SUPER_TENANT_DOMAIN,
    DEFAULT_TENANT_REALM_TEMPLATE,
)
from .settings import ResidencySettings, get_settings
from .logging_config import LoggingConfig, setup_logging

__all__ = [
    "SUPER_ORGANIZATION_ID",
    "SUPER_TENANT_DOMAIN",
    "DEFAULT_TENANT_REALM_TEMPLATE",
    "ResidencySettings",
    "get_settings",
    "LoggingConfig",
    "setup_logging",
]
