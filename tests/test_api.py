"""HTTP-level tests against the app built from the bundled configs."""

import pytest
from httpx import AsyncClient

from editing.service import SUGGESTION_FAILED_MESSAGE, TITLE_REQUIRED_MESSAGE

from conftest import FakeAdapter

pytestmark = pytest.mark.asyncio


async def open_session(client: AsyncClient, **payload) -> dict:
    response = await client.post("/api/sessions", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def test_root_and_health(async_client: AsyncClient) -> None:
    root = await async_client.get("/")
    assert root.json()["status"] == "running"

    health = await async_client.get("/api/base/health")
    assert health.status_code == 200
    body = health.json()
    assert body["systems"] == 11
    assert body["users"] == 4
    assert body["suggestions_enabled"] is True
    assert body["unknown_system_refs"] == []


async def test_security_headers_are_set(async_client: AsyncClient) -> None:
    response = await async_client.get("/api/systems")
    assert response.headers["X-Content-Type-Options"] == "nosniff"


async def test_list_systems_in_catalog_order(async_client: AsyncClient) -> None:
    response = await async_client.get("/api/systems")

    assert response.status_code == 200
    ids = [s["id"] for s in response.json()]
    assert ids[:3] == ["ad", "eservice", "exact"]
    assert len(ids) == 11


async def test_list_users_unfiltered(async_client: AsyncClient) -> None:
    response = await async_client.get("/api/users")

    body = response.json()
    assert body["total"] == 4
    assert [u["id"] for u in body["users"]] == [1, 2, 3, 4]


@pytest.mark.parametrize(
    ("query", "expected"),
    [
        ("bob", [2]),
        ("SOLUTIONS", [3, 4]),
        ("engineer", [1]),
        ("@example.com", [1, 2, 3, 4]),
        ("nobody", []),
    ],
)
async def test_list_users_filtered(async_client: AsyncClient, query: str, expected: list) -> None:
    response = await async_client.get("/api/users", params={"q": query})

    body = response.json()
    assert body["query"] == query
    assert [u["id"] for u in body["users"]] == expected


async def test_get_user_includes_system_names(async_client: AsyncClient) -> None:
    response = await async_client.get("/api/users/2")

    assert response.status_code == 200
    user = response.json()
    assert user["name"] == "Bob Williams"
    assert user["permissions"][1] == {
        "system_id": "bi",
        "details": "Sales Dashboard",
        "system_name": "BI Tools",
    }


async def test_get_unknown_user(async_client: AsyncClient) -> None:
    response = await async_client.get("/api/users/99")
    assert response.status_code == 404


async def test_delete_user_is_idempotent(async_client: AsyncClient) -> None:
    assert (await async_client.delete("/api/users/3")).status_code == 204
    assert (await async_client.delete("/api/users/3")).status_code == 204
    assert (await async_client.delete("/api/users/99")).status_code == 204

    listing = (await async_client.get("/api/users")).json()
    assert [u["id"] for u in listing["users"]] == [1, 2, 4]


async def test_add_session_flow(async_client: AsyncClient, fake_adapter: FakeAdapter) -> None:
    session = await open_session(async_client, mode="add")
    sid = session["session_id"]
    assert session["mode"] == "add"
    assert session["source_id"] is None
    assert session["status"] == "active"
    assert session["permissions"] == []

    for field, value in [("name", "Erin Stone"), ("email", "erin.s@example.com"), ("title", "DevOps Engineer")]:
        response = await async_client.patch(f"/api/sessions/{sid}/fields", json={"field": field, "value": value})
        assert response.status_code == 200

    fake_adapter.reply_with("devops", "ghost", "ad")
    suggestion = await async_client.post(f"/api/sessions/{sid}/suggestions")
    assert suggestion.json() == {"applied": True, "suggested_permissions": ["devops", "ad"], "error": None}

    details = await async_client.put(f"/api/sessions/{sid}/permissions/devops/details", json={"details": "Admin"})
    assert details.json()["permissions"][0] == {
        "system_id": "devops",
        "details": "Admin",
        "system_name": "DevOps Platform",
    }

    saved = await async_client.post(f"/api/sessions/{sid}/save")
    assert saved.status_code == 200
    user = saved.json()
    assert user["id"] == 5
    assert user["title"] == "DevOps Engineer"
    assert [p["system_id"] for p in user["permissions"]] == ["devops", "ad"]

    assert (await async_client.get(f"/api/sessions/{sid}")).status_code == 404
    listing = (await async_client.get("/api/users")).json()
    assert listing["users"][-1]["name"] == "Erin Stone"


async def test_edit_session_flow(async_client: AsyncClient) -> None:
    session = await open_session(async_client, mode="edit", user_id=4)
    sid = session["session_id"]
    assert session["source_id"] == 4
    assert session["profile"]["name"] == "Diana Miller"

    status = await async_client.put(f"/api/sessions/{sid}/status", json={"status": "blocked"})
    assert status.json()["status"] == "blocked"

    toggled = await async_client.post(f"/api/sessions/{sid}/permissions/bi/toggle")
    assert toggled.json() == {"system_id": "bi", "selected": False}

    toggled = await async_client.post(f"/api/sessions/{sid}/permissions/onedrive/toggle")
    assert toggled.json() == {"system_id": "onedrive", "selected": True}

    saved = (await async_client.post(f"/api/sessions/{sid}/save")).json()
    assert saved["id"] == 4
    assert saved["status"] == "blocked"
    assert [p["system_id"] for p in saved["permissions"]] == ["groupmail", "mail", "onedrive"]

    listing = (await async_client.get("/api/users")).json()
    assert [u["id"] for u in listing["users"]] == [1, 2, 3, 4]


async def test_open_edit_session_validation(async_client: AsyncClient) -> None:
    missing_id = await async_client.post("/api/sessions", json={"mode": "edit"})
    assert missing_id.status_code == 422

    unknown = await async_client.post("/api/sessions", json={"mode": "edit", "user_id": 99})
    assert unknown.status_code == 404


async def test_session_input_errors(async_client: AsyncClient) -> None:
    sid = (await open_session(async_client))["session_id"]

    bad_field = await async_client.patch(f"/api/sessions/{sid}/fields", json={"field": "salary", "value": "1"})
    assert bad_field.status_code == 422

    bad_status = await async_client.put(f"/api/sessions/{sid}/status", json={"status": "suspended"})
    assert bad_status.status_code == 422

    bad_system = await async_client.post(f"/api/sessions/{sid}/permissions/ghost/toggle")
    assert bad_system.status_code == 422

    bad_details = await async_client.put(f"/api/sessions/{sid}/permissions/ghost/details", json={"details": "x"})
    assert bad_details.status_code == 422


async def test_details_for_unselected_system_is_ignored(async_client: AsyncClient) -> None:
    sid = (await open_session(async_client))["session_id"]

    response = await async_client.put(f"/api/sessions/{sid}/permissions/mail/details", json={"details": "x"})

    assert response.status_code == 200
    assert response.json()["permissions"] == []


async def test_suggestions_require_title(async_client: AsyncClient, fake_adapter: FakeAdapter) -> None:
    sid = (await open_session(async_client))["session_id"]

    response = await async_client.post(f"/api/sessions/{sid}/suggestions")

    assert response.status_code == 200
    assert response.json() == {"applied": False, "suggested_permissions": [], "error": TITLE_REQUIRED_MESSAGE}
    assert fake_adapter.calls == []


async def test_suggestion_failure_keeps_permissions(async_client: AsyncClient, fake_adapter: FakeAdapter) -> None:
    fake_adapter.error = RuntimeError("quota exceeded")
    sid = (await open_session(async_client, mode="edit", user_id=1))["session_id"]

    response = await async_client.post(f"/api/sessions/{sid}/suggestions")

    assert response.json()["error"] == SUGGESTION_FAILED_MESSAGE
    assert "quota" not in response.text
    draft = (await async_client.get(f"/api/sessions/{sid}")).json()
    assert [p["system_id"] for p in draft["permissions"]] == ["devops", "eservice", "mail", "ad"]


async def test_save_after_user_deleted(async_client: AsyncClient) -> None:
    sid = (await open_session(async_client, mode="edit", user_id=2))["session_id"]
    await async_client.delete("/api/users/2")

    response = await async_client.post(f"/api/sessions/{sid}/save")

    assert response.status_code == 404
    assert (await async_client.get(f"/api/sessions/{sid}")).status_code == 200


async def test_discard_session(async_client: AsyncClient) -> None:
    sid = (await open_session(async_client))["session_id"]

    assert (await async_client.delete(f"/api/sessions/{sid}")).status_code == 204
    assert (await async_client.delete(f"/api/sessions/{sid}")).status_code == 404
    assert (await async_client.post(f"/api/sessions/{sid}/save")).status_code == 404
