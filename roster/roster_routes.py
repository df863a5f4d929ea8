"""
Roster API endpoints.

Exposed endpoints:
- GET /api/users?q= - List users, filtered by name/email/title/company
- GET /api/users/{id} - Get one user
- DELETE /api/users/{id} - Remove a user

Users are created and changed through edit sessions (/api/sessions).
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response
import logging

from apps.api.deps import get_catalog, get_roster
from catalog.store import CatalogStore
from roster.repository import RosterStore
from roster.schemas import UserListResponse, UserResponse
from roster.service import RosterService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=UserListResponse)
async def list_users(
    q: str = Query("", description="Case-insensitive substring filter"),
    store: RosterStore = Depends(get_roster),
    catalog: CatalogStore = Depends(get_catalog),
):
    """
    List the roster.

    Example:
        GET /api/users?q=bob
    """
    return RosterService.list_users(store, catalog, query=q)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    store: RosterStore = Depends(get_roster),
    catalog: CatalogStore = Depends(get_catalog),
):
    user = RosterService.get_user(store, catalog, user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.delete("/{user_id}", status_code=204)
async def delete_user(user_id: int, store: RosterStore = Depends(get_roster)):
    """Remove a user. Unknown ids are accepted and change nothing."""
    RosterService.delete_user(store, user_id)
    return Response(status_code=204)
