"""Organization routers."""

from .resident_router import router as resident_organization_router
from .dependencies import get_resident_organization_resolver

__all__ = [
    "resident_organization_router",
    "get_resident_organization_resolver",
]
