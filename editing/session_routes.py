"""
Edit-session API endpoints.

Exposed endpoints:
- POST /api/sessions - Open a session (add or edit mode)
- GET /api/sessions/{sid} - Current draft
- PATCH /api/sessions/{sid}/fields - Set one profile field
- PUT /api/sessions/{sid}/status - Select active/blocked
- POST /api/sessions/{sid}/permissions/{system_id}/toggle - Grant/revoke a system
- PUT /api/sessions/{sid}/permissions/{system_id}/details - Edit grant details
- POST /api/sessions/{sid}/suggestions - Suggest permissions from the job title
- POST /api/sessions/{sid}/save - Commit into the roster and close
- DELETE /api/sessions/{sid} - Discard
"""

from fastapi import APIRouter, Depends, HTTPException, Response
import logging

from apps.api.deps import get_catalog, get_session_service
from catalog.store import CatalogStore, UnknownSystemError
from editing.exceptions import SessionNotFoundError, SourceUserNotFoundError, UnknownFieldError
from editing.schemas import (
    OpenSessionRequest,
    SessionResponse,
    SetDetailsRequest,
    SetFieldRequest,
    SetStatusRequest,
    SuggestionResponse,
    ToggleResponse,
)
from editing.service import EditSessionService
from editing.session import EditSession, SessionMode
from roster.schemas import UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


def _load(service: EditSessionService, session_id: str) -> EditSession:
    try:
        return service.get(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Edit session not found")


@router.post("", response_model=SessionResponse, status_code=201)
async def open_session(
    request: OpenSessionRequest,
    service: EditSessionService = Depends(get_session_service),
):
    """
    Open an edit session.

    Example request:
        {"mode": "edit", "user_id": 2}
    """
    try:
        if request.mode is SessionMode.EDIT:
            session_id, session = service.open_edit(request.user_id)
        else:
            session_id, session = service.open_add()
    except SourceUserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")
    return SessionResponse.from_session(session_id, session)


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: str,
    service: EditSessionService = Depends(get_session_service),
):
    return SessionResponse.from_session(session_id, _load(service, session_id))


@router.patch("/{session_id}/fields", response_model=SessionResponse)
async def set_field(
    session_id: str,
    request: SetFieldRequest,
    service: EditSessionService = Depends(get_session_service),
):
    session = _load(service, session_id)
    try:
        session.set_field(request.field, request.value)
    except UnknownFieldError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return SessionResponse.from_session(session_id, session)


@router.put("/{session_id}/status", response_model=SessionResponse)
async def set_status(
    session_id: str,
    request: SetStatusRequest,
    service: EditSessionService = Depends(get_session_service),
):
    session = _load(service, session_id)
    session.set_status(request.status)
    return SessionResponse.from_session(session_id, session)


@router.post("/{session_id}/permissions/{system_id}/toggle", response_model=ToggleResponse)
async def toggle_permission(
    session_id: str,
    system_id: str,
    service: EditSessionService = Depends(get_session_service),
):
    session = _load(service, session_id)
    try:
        selected = session.toggle_permission(system_id)
    except UnknownSystemError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return ToggleResponse(system_id=system_id, selected=selected)


@router.put("/{session_id}/permissions/{system_id}/details", response_model=SessionResponse)
async def set_permission_details(
    session_id: str,
    system_id: str,
    request: SetDetailsRequest,
    service: EditSessionService = Depends(get_session_service),
    catalog: CatalogStore = Depends(get_catalog),
):
    """Set grant details. Systems not currently selected are left unchanged."""
    if system_id not in catalog:
        raise HTTPException(status_code=422, detail=f"Unknown system id: {system_id!r}")
    session = _load(service, session_id)
    session.set_permission_details(system_id, request.details)
    return SessionResponse.from_session(session_id, session)


@router.post("/{session_id}/suggestions", response_model=SuggestionResponse)
async def suggest_permissions(
    session_id: str,
    service: EditSessionService = Depends(get_session_service),
):
    """
    Replace the session's permissions with AI suggestions for its job title.

    Validation and provider failures come back in ``error`` with status 200.
    """
    _load(service, session_id)
    outcome = await service.suggest(session_id)
    return SuggestionResponse(
        applied=outcome.applied,
        suggested_permissions=outcome.suggested_permissions,
        error=outcome.error,
    )


@router.post("/{session_id}/save", response_model=UserResponse)
async def save_session(
    session_id: str,
    service: EditSessionService = Depends(get_session_service),
    catalog: CatalogStore = Depends(get_catalog),
):
    _load(service, session_id)
    try:
        stored = service.save(session_id)
    except SourceUserNotFoundError:
        raise HTTPException(status_code=404, detail="User no longer exists")
    return UserResponse.from_user(stored, catalog.names())


@router.delete("/{session_id}", status_code=204)
async def discard_session(
    session_id: str,
    service: EditSessionService = Depends(get_session_service),
):
    if not service.close(session_id):
        raise HTTPException(status_code=404, detail="Edit session not found")
    return Response(status_code=204)
