"""Shared pytest fixtures for the console tests."""

from collections.abc import AsyncIterator
import json

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from apps.api.main import create_app
from apps.config import AppConfig, CONFIG_DIR
from catalog.models import System
from catalog.store import CatalogStore
from generation.models.adapters.interface import GeneratorAdapter
from generation.suggestions import PermissionSuggestionClient
from orchestrator.observability import observability
from orchestrator.registry import Registry
from roster.models import Permission, User, UserStatus
from roster.repository import RosterStore


class FakeAdapter(GeneratorAdapter):
    """Returns queued response texts (or raises ``error``) and records calls."""

    def __init__(self, responses=(), error=None):
        self.responses = list(responses)
        self.error = error
        self.calls = []

    def reply_with(self, *suggested):
        self.responses.append(json.dumps({"suggested_permissions": list(suggested)}))

    async def generate_json(self, messages, schema, **kwargs):
        self.calls.append({"messages": messages, "schema": schema, **kwargs})
        if self.error is not None:
            raise self.error
        return self.responses.pop(0) if self.responses else ""

    def get_model_info(self):
        return {"provider": "fake"}


@pytest.fixture(autouse=True)
def _reset_metrics():
    observability.clear_metrics()
    yield
    observability.clear_metrics()


@pytest.fixture()
def catalog() -> CatalogStore:
    return CatalogStore([
        System("ad", "Active Directory", "User authentication and authorization."),
        System("mail", "Email Account", "Standard corporate email access."),
        System("devops", "DevOps Platform", "CI/CD and code repository access."),
        System("bi", "BI Tools", "Business Intelligence and reporting."),
    ])


@pytest.fixture()
def alice() -> User:
    return User(
        id=1,
        name="Alice Johnson",
        email="alice.j@example.com",
        title="Senior Software Engineer",
        company="Innovate Inc.",
        status=UserStatus.ACTIVE,
        permissions=[Permission("devops", "Contributor"), Permission("mail", "")],
        quota_email="50GB",
        computer_name="INNOV-LT-001",
        asset_code="ASSET-10234",
    )


@pytest.fixture()
def bob() -> User:
    return User(
        id=2,
        name="Bob Williams",
        email="bob.w@example.com",
        title="Project Manager",
        company="Innovate Inc.",
        permissions=[Permission("bi", "Sales Dashboard")],
    )


@pytest.fixture()
def roster(alice: User, bob: User) -> RosterStore:
    return RosterStore([alice, bob])


@pytest.fixture()
def fake_adapter() -> FakeAdapter:
    return FakeAdapter()


@pytest.fixture()
def suggestion_client(fake_adapter: FakeAdapter) -> PermissionSuggestionClient:
    return PermissionSuggestionClient(adapter=fake_adapter)


@pytest.fixture()
def app(fake_adapter: FakeAdapter) -> FastAPI:
    """Application wired to the bundled catalog and seed roster, with a fake LLM."""
    config = AppConfig(
        catalog_path=str(CONFIG_DIR / "catalog.yaml"),
        roster_seed_path=str(CONFIG_DIR / "roster.yaml"),
        prompts_path=str(CONFIG_DIR / "prompts.yaml"),
        log_level="WARNING",
        cors_origins=["http://localhost:5173"],
    )
    registry = Registry(config={})
    registry.register("suggester", fake_adapter)
    return create_app(config, registry=registry)


@pytest_asyncio.fixture()
async def async_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Provide an HTTPX async client bound to the FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
