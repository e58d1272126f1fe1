"""Resident organization response models for API endpoints."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ResidentOrganizationResponse(BaseModel):
    """Response model for resident organization resolution."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "group_id": "6c3f2f0e-8a7b-4d6e-9c1a-2b3c4d5e6f70",
                "accessed_organization_id": "org3",
                "resident_organization_id": "org1",
                "found": True
            }
        }
    )

    group_id: str = Field(..., description="Group ID that was resolved")
    accessed_organization_id: str = Field(..., description="Organization the resolution started from")
    resident_organization_id: Optional[str] = Field(None, description="Resident organization ID, if any")
    found: bool = Field(..., description="Whether a resident organization was found")

    @classmethod
    def from_result(
        cls,
        group_id: str,
        accessed_organization_id: str,
        resident_organization_id: Optional[str]
    ) -> "ResidentOrganizationResponse":
        """Create response from a resolution result."""
        return cls(
            group_id=group_id,
            accessed_organization_id=accessed_organization_id,
            resident_organization_id=resident_organization_id,
            found=resident_organization_id is not None
        )
