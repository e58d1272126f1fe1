"""Organization API models."""

from .responses import ResidentOrganizationResponse

__all__ = ["ResidentOrganizationResponse"]
