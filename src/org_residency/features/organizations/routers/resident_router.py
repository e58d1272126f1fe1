"""Resident organization router.

Provides a ready-to-use FastAPI router exposing group resident organization
resolution that services can include directly.
"""

from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse

from ....core.exceptions import (
    ResolutionError,
    ValidationError,
    create_error_response,
    get_http_status_code,
)
from ..models.responses import ResidentOrganizationResponse
from ..services.resident_resolver import ResidentOrganizationResolver
from .dependencies import get_resident_organization_resolver


router = APIRouter(
    prefix="/organizations",
    tags=["Organizations"],
    responses={
        422: {"description": "Validation error"},
        500: {"description": "Internal server error"}
    }
)


@router.get(
    "/{organization_id}/groups/{group_id}/resident-organization",
    response_model=ResidentOrganizationResponse,
    summary="Resolve group resident organization",
    description="Find the organization, among the accessed organization and its ancestors, "
                "whose tenant owns the group",
    responses={
        200: {"description": "Resolution completed (found or not found)"},
        500: {"description": "A collaborator failed during resolution"}
    }
)
async def get_resident_organization(
    organization_id: str = Path(..., description="Accessed organization ID"),
    group_id: str = Path(..., description="Group ID"),
    resolver: ResidentOrganizationResolver = Depends(get_resident_organization_resolver)
):
    """Resolve the resident organization of a group."""
    try:
        resident_organization_id = await resolver.resolve_resident_organization(
            group_id, organization_id
        )
    except (ValidationError, ResolutionError) as e:
        return JSONResponse(
            status_code=get_http_status_code(e),
            content=create_error_response(e)
        )

    return ResidentOrganizationResponse.from_result(
        group_id, organization_id, resident_organization_id
    )
