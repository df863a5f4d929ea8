# FastAPI entrypoint: app factory, middleware and router registration

from typing import Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from loguru import logger
import uvicorn

from apps.api.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from apps.config import AppConfig
from catalog.catalog_routes import router as catalog_router
from catalog.store import load_catalog
from editing.service import EditSessionService
from editing.session_routes import router as session_router
from generation.suggestions import PermissionSuggestionClient
from orchestrator.observability import configure_logging, observability
from orchestrator.registry import Registry
from roster.repository import load_roster
from roster.roster_routes import router as roster_router
from roster.service import RosterService


def build_suggestion_client(registry: Registry, prompts_path: Optional[str] = None) -> Optional[PermissionSuggestionClient]:
    """Create the suggestion client, or None when the adapter can't be built."""
    try:
        adapter = registry.get("suggester")
    except ValueError as e:
        logger.warning(f"AI suggestions disabled: {e}")
        return None
    return PermissionSuggestionClient(adapter=adapter, prompts_path=prompts_path)


def create_app(config: Optional[AppConfig] = None, registry: Optional[Registry] = None) -> FastAPI:
    config = config or AppConfig()
    configure_logging(config.log_level)

    app = FastAPI(
        title="Access Desk",
        description="User roster and per-system permission console with AI suggestions",
        version="1.0.0"
    )

    # ==================== STATE ====================

    registry = registry or Registry(config.components_path)
    catalog = load_catalog(config.catalog_path)
    roster = load_roster(config.roster_seed_path, catalog)
    client = build_suggestion_client(registry, config.prompts_path)

    app.state.config = config
    app.state.registry = registry
    app.state.catalog = catalog
    app.state.roster = roster
    app.state.sessions = EditSessionService(catalog, roster, client, session_ttl=config.session_ttl)

    # ==================== MIDDLEWARE ====================

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=86400,
    )

    # ==================== BASE ROUTER ====================

    router = APIRouter(prefix="/api/base", tags=["base"])

    @router.get("/")
    async def base_root():
        """API information and routes."""
        routes = [
            {
                "path": route.path,
                "name": route.name,
                "methods": sorted(route.methods - {"HEAD", "OPTIONS"})
            }
            for route in app.routes
            if isinstance(route, APIRoute)
        ]
        return {"message": "Access Desk API", "version": app.version, "routes": routes}

    @router.get("/health")
    async def health_check(request: Request):
        """Component summary and catalog integrity check."""
        state = request.app.state
        sessions = state.sessions
        return {
            "status": "healthy",
            "systems": len(state.catalog),
            "users": len(state.roster),
            "open_sessions": len(sessions.sessions),
            "suggestions_enabled": sessions.suggestion_client is not None,
            "unknown_system_refs": RosterService.systems_without_catalog_entry(state.roster, state.catalog),
            "components": state.registry.list_components(),
            "metrics": observability.get_metrics(),
        }

    # ==================== ROUTER REGISTRATION ====================

    app.include_router(router)              # /api/base
    app.include_router(catalog_router)      # /api/systems
    app.include_router(roster_router)       # /api/users
    app.include_router(session_router)      # /api/sessions

    @app.get("/")
    async def root():
        return {
            "message": "Access Desk",
            "status": "running",
            "docs_url": "/docs",
            "api_base": "/api"
        }

    logger.info(
        f"Access Desk ready: {len(catalog)} systems, {len(roster)} users, "
        f"suggestions {'enabled' if client else 'disabled'}"
    )
    return app


def main() -> None:
    config = AppConfig()
    uvicorn.run(create_app(config), host=config.host, port=config.port)


if __name__ == "__main__":
    main()
