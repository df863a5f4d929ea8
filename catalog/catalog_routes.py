"""
Catalog API endpoints.

Exposed endpoints:
- GET /api/systems - List the systems users can be granted
"""

from typing import List

from fastapi import APIRouter, Depends

from apps.api.deps import get_catalog
from catalog.store import CatalogStore
from roster.schemas import SystemResponse

router = APIRouter(prefix="/api/systems", tags=["systems"])


@router.get("", response_model=List[SystemResponse])
async def list_systems(catalog: CatalogStore = Depends(get_catalog)):
    """Return the catalog in its configured order."""
    return [SystemResponse.from_system(s) for s in catalog]
