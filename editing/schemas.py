"""
Pydantic schemas for the edit-session API.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from editing.session import EditSession, SessionMode
from roster.models import UserStatus
from roster.schemas import PermissionResponse


# ============ Request Schemas ============

class OpenSessionRequest(BaseModel):
    """
    Open an edit session.

    Example:
        {"mode": "edit", "user_id": 2}
    """
    mode: SessionMode = SessionMode.ADD
    user_id: Optional[int] = Field(None, description="User to edit (edit mode only)")

    @model_validator(mode="after")
    def check_user_id(self):
        if self.mode is SessionMode.EDIT and self.user_id is None:
            raise ValueError("user_id is required in edit mode")
        return self


class SetFieldRequest(BaseModel):
    field: str = Field(..., description="Profile field name, e.g. 'title'")
    value: str = ""


class SetStatusRequest(BaseModel):
    status: UserStatus


class SetDetailsRequest(BaseModel):
    details: str = Field("", max_length=1000)


# ============ Response Schemas ============

class SessionResponse(BaseModel):
    session_id: str
    mode: SessionMode
    source_id: Optional[int] = None
    profile: Dict[str, str]
    status: UserStatus
    permissions: List[PermissionResponse] = Field(default_factory=list)

    @classmethod
    def from_session(cls, session_id: str, session: EditSession) -> "SessionResponse":
        names = session.catalog.names()
        return cls(
            session_id=session_id,
            mode=session.mode,
            source_id=session.source_id,
            profile=dict(session.fields),
            status=session.status,
            permissions=[
                PermissionResponse(system_id=sid, details=details, system_name=names.get(sid))
                for sid, details in session.permissions.items()
            ],
        )


class ToggleResponse(BaseModel):
    system_id: str
    selected: bool


class SuggestionResponse(BaseModel):
    """
    Result of a suggestion request.

    ``error`` carries an operator-facing message; it is null when suggestions
    were applied or when the provider simply had none to offer.
    """
    applied: bool
    suggested_permissions: List[str] = Field(default_factory=list)
    error: Optional[str] = None
