"""Organization services."""

from .resident_resolver import ResidentOrganizationResolver, select_resident_organization

__all__ = [
    "ResidentOrganizationResolver",
    "select_resident_organization",
]
