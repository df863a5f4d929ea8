"""Request-scoped access to the stores built by the app factory."""

from fastapi import Request

from catalog.store import CatalogStore
from editing.service import EditSessionService
from roster.repository import RosterStore


def get_catalog(request: Request) -> CatalogStore:
    return request.app.state.catalog


def get_roster(request: Request) -> RosterStore:
    return request.app.state.roster


def get_session_service(request: Request) -> EditSessionService:
    return request.app.state.sessions
