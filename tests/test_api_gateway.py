"""
Tests for the API Gateway component.
"""

import uuid
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from toolhub.api_gateway import create_app
from toolhub.config import Settings
from toolhub.tool_registry import ToolRegistry
from toolhub.utils.error_handling import RegistryError


FIGMA = {
    "title": "Figma",
    "link": "https://figma.com",
    "description": "Design tool",
    "tags": ["design"]
}


@pytest.fixture
def client():
    """Create a test client for an application with the default seeded catalog."""
    app = create_app(app_settings=Settings(seed_registry=True))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def empty_client():
    """Create a test client around an explicitly constructed, empty registry."""
    app = create_app(registry=ToolRegistry())
    with TestClient(app) as test_client:
        yield test_client


def test_root_greeting(client):
    """Test the plain text greeting."""
    response = client.get("/")

    assert response.status_code == 200
    assert response.text == "Hello world"
    assert response.headers["content-type"].startswith("text/plain")


def test_seeded_tool_listed(client):
    """Test that a fresh application serves the seeded tool."""
    response = client.get("/tools")

    assert response.status_code == 200
    tools = response.json()
    assert len(tools) == 1
    assert tools[0]["title"] == "Notion"
    assert tools[0]["tags"] == ["text"]
    assert uuid.UUID(tools[0]["id"]).version == 7


def test_seeding_can_be_disabled():
    """Test that seeding follows the configuration."""
    app = create_app(app_settings=Settings(seed_registry=False))
    with TestClient(app) as test_client:
        assert test_client.get("/tools").json() == []


def test_create_tool(empty_client):
    """Test creating a tool over HTTP."""
    response = empty_client.post("/tools", json=FIGMA)

    assert response.status_code == 201
    body = response.json()
    assert set(body) == {"id", "title", "link", "description", "tags"}
    assert uuid.UUID(body["id"])
    assert body["title"] == "Figma"
    assert body["tags"] == ["design"]


def test_create_ignores_client_supplied_id(empty_client):
    """Test that the server always assigns the identifier."""
    supplied = str(uuid.uuid4())

    response = empty_client.post("/tools", json={**FIGMA, "id": supplied})

    assert response.status_code == 201
    assert response.json()["id"] != supplied


def test_create_tool_missing_field(empty_client):
    """Test that a body missing required fields is rejected."""
    response = empty_client.post("/tools", json={"title": "Figma"})

    assert response.status_code == 422
    assert empty_client.get("/tools").json() == []


def test_create_tool_wrong_tag_shape(empty_client):
    """Test that tags must be a list of strings."""
    response = empty_client.post("/tools", json={**FIGMA, "tags": "design"})

    assert response.status_code == 422


def test_list_tools_by_tag(client):
    """Test filtering the list by tag."""
    client.post("/tools", json=FIGMA)

    text_tools = client.get("/tools", params={"tag": "text"}).json()
    other_tools = client.get("/tools", params={"tag": "other"}).json()

    assert [tool["title"] for tool in text_tools] == ["Notion"]
    assert other_tools == []


def test_delete_tool(empty_client):
    """Test deleting a tool."""
    tool_id = empty_client.post("/tools", json=FIGMA).json()["id"]

    response = empty_client.delete(f"/tools/{tool_id}")

    assert response.status_code == 200
    assert empty_client.get("/tools").json() == []


def test_delete_unknown_tool(client):
    """Test deleting an unknown tool returns not found and changes nothing."""
    before = client.get("/tools").json()

    response = client.delete(f"/tools/{uuid.uuid4()}")

    assert response.status_code == 404
    assert client.get("/tools").json() == before


def test_delete_invalid_id(client):
    """Test that a malformed identifier is rejected as a client error."""
    response = client.delete("/tools/not-a-uuid")

    assert response.status_code == 422


def test_example_flow(client):
    """Test the create, filter, delete flow against the seeded catalog."""
    created = client.post("/tools", json=FIGMA)
    assert created.status_code == 201
    figma_id = created.json()["id"]

    design_tools = client.get("/tools", params={"tag": "design"}).json()
    assert [tool["id"] for tool in design_tools] == [figma_id]

    assert client.delete(f"/tools/{figma_id}").status_code == 200
    assert client.get("/tools", params={"tag": "design"}).json() == []
    assert [tool["title"] for tool in client.get("/tools").json()] == ["Notion"]


def test_registry_is_shared_with_handlers():
    """Test that handlers operate on the injected registry."""
    registry = ToolRegistry()
    app = create_app(registry=registry)

    with TestClient(app) as test_client:
        tool_id = test_client.post("/tools", json=FIGMA).json()["id"]

    assert app.state.registry is registry
    assert uuid.UUID(tool_id) in registry._tools


def test_health(client):
    """Test the health endpoint."""
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["tool_count"] == 1
    assert body["uptime_seconds"] >= 0


def test_process_time_header(client):
    """Test that the logging middleware adds timing information."""
    response = client.get("/tools")

    assert response.headers["X-Process-Time"].endswith("ms")


def test_registry_error_returns_500(monkeypatch):
    """Test that registry errors are translated into a server error response."""
    registry = ToolRegistry()

    async def failing_create(**kwargs):
        raise RegistryError("Tool id already registered", component="tool_registry")

    monkeypatch.setattr(registry, "create", failing_create)
    app = create_app(registry=registry)

    with TestClient(app) as test_client:
        response = test_client.post("/tools", json=FIGMA)

    assert response.status_code == 500
    assert response.json() == {"detail": "Tool id already registered"}


def test_restarting_app_does_not_reseed():
    """Test that starting the same application twice keeps a single seeded tool."""
    app = create_app(app_settings=Settings(seed_registry=True))

    with TestClient(app):
        pass

    with TestClient(app) as test_client:
        titles = [tool["title"] for tool in test_client.get("/tools").json()]

    assert titles == ["Notion"]


def test_started_at_stamped_on_startup():
    """Test that uptime is measured from application startup, not construction."""
    app = create_app(registry=ToolRegistry())
    built_at = datetime.now()

    with TestClient(app) as test_client:
        assert app.state.started_at >= built_at
        assert test_client.get("/health").json()["uptime_seconds"] >= 0
