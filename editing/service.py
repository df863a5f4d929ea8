"""
Edit-session lifecycle.

The service layer sits between the session API endpoints and the domain
objects. It handles:
- Opening sessions in add or edit mode
- Running permission suggestions and applying their result
- Saving a committed draft into the roster
- Turning suggestion failures into operator-facing messages
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import logging
import time
import uuid

from catalog.store import CatalogStore
from editing.exceptions import SessionNotFoundError, SourceUserNotFoundError
from editing.session import EditSession, SessionMode
from generation.exceptions import SuggestionFailedError
from generation.suggestions import PermissionSuggestionClient
from roster.models import User
from roster.repository import RosterStore

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL = 3600

TITLE_REQUIRED_MESSAGE = "Please enter a job title to get suggestions."
SUGGESTION_FAILED_MESSAGE = "Failed to get AI suggestions. Please try again."


@dataclass
class SuggestionOutcome:
    """What a suggestion request did to the session."""
    applied: bool
    suggested_permissions: List[str] = field(default_factory=list)
    error: Optional[str] = None


class EditSessionService:
    """
    Holds open edit sessions by id.

    A session left untouched for ``session_ttl`` seconds expires and is
    dropped; any access through ``get`` restarts its clock.

    Example:
        sid, session = service.open_edit(2)
        session.set_field("title", "Head of Marketing")
        outcome = await service.suggest(sid)
        user = service.save(sid)
    """

    def __init__(
        self,
        catalog: CatalogStore,
        roster: RosterStore,
        suggestion_client: Optional[PermissionSuggestionClient] = None,
        session_ttl: float = DEFAULT_SESSION_TTL
    ):
        self.catalog = catalog
        self.roster = roster
        self.suggestion_client = suggestion_client
        self.session_ttl = session_ttl
        self.sessions: Dict[str, EditSession] = {}
        self.expires: Dict[str, float] = {}

    def _is_expired(self, session_id: str) -> bool:
        return time.monotonic() > self.expires.get(session_id, 0)

    def _touch(self, session_id: str) -> None:
        self.expires[session_id] = time.monotonic() + self.session_ttl

    def cleanup_expired(self) -> int:
        """Drop idle sessions; returns how many were removed."""
        expired = [sid for sid in self.sessions if self._is_expired(sid)]
        for session_id in expired:
            self.close(session_id)
        if expired:
            logger.info(f"Expired {len(expired)} idle session(s)")
        return len(expired)

    def _register(self, session: EditSession) -> Tuple[str, EditSession]:
        self.cleanup_expired()
        session_id = uuid.uuid4().hex
        self.sessions[session_id] = session
        self._touch(session_id)
        logger.info(f"Opened {session.mode.value} session {session_id}")
        return session_id, session

    def open_add(self) -> Tuple[str, EditSession]:
        return self._register(EditSession(self.catalog))

    def open_edit(self, user_id: int) -> Tuple[str, EditSession]:
        source = self.roster.get(user_id)
        if source is None:
            raise SourceUserNotFoundError(user_id)
        return self._register(EditSession(self.catalog, source))

    def get(self, session_id: str) -> EditSession:
        session = self.sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        if self._is_expired(session_id):
            self.close(session_id)
            raise SessionNotFoundError(session_id)
        self._touch(session_id)
        return session

    def close(self, session_id: str) -> bool:
        self.expires.pop(session_id, None)
        return self.sessions.pop(session_id, None) is not None

    async def suggest(self, session_id: str) -> SuggestionOutcome:
        """
        Ask for suggestions for the session's current title and apply them.

        Never raises for the expected failures: a missing title or a failed
        provider call come back as ``error`` with the session untouched. An
        empty suggestion list is not applied.
        """
        session = self.get(session_id)
        title = session.title
        if not title:
            return SuggestionOutcome(applied=False, error=TITLE_REQUIRED_MESSAGE)

        if self.suggestion_client is None:
            logger.error("Suggestion requested but no suggestion client is configured")
            return SuggestionOutcome(applied=False, error=SUGGESTION_FAILED_MESSAGE)

        try:
            suggested = await self.suggestion_client.suggest(title, self.catalog.list())
        except SuggestionFailedError as e:
            logger.error(f"Suggestions failed for session {session_id}: {e}")
            return SuggestionOutcome(applied=False, error=SUGGESTION_FAILED_MESSAGE)

        if not suggested:
            logger.info(f"No usable suggestions for session {session_id}; permissions unchanged")
            return SuggestionOutcome(applied=False)

        session.apply_suggestions(suggested)
        return SuggestionOutcome(applied=True, suggested_permissions=suggested)

    def save(self, session_id: str) -> User:
        """
        Commit the session into the roster and close it.

        In edit mode the source user must still exist; otherwise
        ``SourceUserNotFoundError`` is raised and the session stays open.
        """
        session = self.get(session_id)
        record = session.commit()

        if session.mode is SessionMode.ADD:
            stored = self.roster.add(record)
        else:
            if not self.roster.update(record):
                raise SourceUserNotFoundError(record.id)
            stored = self.roster.get(record.id)

        self.close(session_id)
        logger.info(f"Saved session {session_id} as user {stored.id}")
        return stored
