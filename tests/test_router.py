"""Tests router FastAPI /widget-builder + helpers d'intégration."""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from widget_builder.fastapi_integration import PageRouter, create_app, create_page_route

PAGE = {
    "title": "Home",
    "blocks": [
        {"id": "h1", "type": "heading", "content": {"text": "Hello", "style": {}}},
        {"id": "b1", "type": "button", "content": {"text": "Buy", "url": "/checkout"}},
    ],
}


@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c


# ── /normalize ───────────────────────────────────────────────────────────────

class TestNormalizeEndpoint:
    def test_legacy_container(self, client):
        r = client.post("/widget-builder/normalize", json={
            "type": "container",
            "content": {"backgroundColor": "#fff", "padding": 24, "maxWidth": "md"},
        })
        assert r.status_code == 200
        body = r.json()
        assert body["background"]["color"] == "#fff"
        assert body["advanced"]["padding"] == {"top": 24, "right": 24, "bottom": 24, "left": 24, "linked": True}
        assert body["advanced"]["maxWidth"] == "md"

    def test_defaults(self, client):
        r = client.post("/widget-builder/normalize", json={"type": "spacer"})
        assert r.json() == {"height": 40}

    def test_schema_version(self, client):
        r = client.post("/widget-builder/normalize", json={
            "type": "container", "content": {"backgroundColor": "#fff"}, "schemaVersion": 2,
        })
        assert r.json()["background"]["color"] == "transparent"

    def test_unknown_type(self, client):
        r = client.post("/widget-builder/normalize", json={"type": "mystery", "content": {}})
        assert r.status_code == 422


# ── /compile ─────────────────────────────────────────────────────────────────

class TestCompileEndpoint:
    def test_compile(self, client):
        r = client.post("/widget-builder/compile", json={
            "type": "heading",
            "content": {"text": "Hi", "style": {"typography": {"fontSize": {"desktop": 48, "mobile": 28}}}},
            "breakpoint": "mobile",
        })
        assert r.status_code == 200
        body = r.json()
        assert body["declarations"]["font-size"] == "28px"
        assert body["hints"]["tag"] == "h2"
        assert body["hidden"] is False

    def test_default_breakpoint(self, client):
        r = client.post("/widget-builder/compile", json={"type": "container"})
        assert r.json()["declarations"]["grid-template-columns"] == "repeat(4, 1fr)"

    def test_bad_breakpoint(self, client):
        r = client.post("/widget-builder/compile", json={"type": "heading", "breakpoint": "watch"})
        assert r.status_code == 422

    def test_unknown_type(self, client):
        r = client.post("/widget-builder/compile", json={"type": "mystery"})
        assert r.status_code == 422


# ── /render ──────────────────────────────────────────────────────────────────

class TestRenderEndpoint:
    def test_render(self, client):
        r = client.post("/widget-builder/render", json=PAGE)
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/html")
        assert "<title>Home</title>" in r.text
        assert ".widget-h1 {" in r.text
        assert 'href="/checkout"' in r.text

    def test_render_degrades_per_block(self, client):
        r = client.post("/widget-builder/render", json={"blocks": [
            {"id": "x", "type": "mystery"},
            {"id": "y", "type": "heading", "content": "corrupt"},
            {"id": "z", "type": "paragraph", "mode": "code"},
        ]})
        assert r.status_code == 200
        assert "Unknown block: mystery" in r.text
        assert "Your Heading Here" in r.text
        assert "<!-- Empty Code Block -->" in r.text


# ── /validate ────────────────────────────────────────────────────────────────

class TestValidateEndpoint:
    def test_valid(self, client):
        r = client.post("/widget-builder/validate", json={"type": "button", "content": {"text": "Buy", "url": "/checkout"}})
        assert r.json() == {"valid": True}

    def test_invalid_field(self, client):
        r = client.post("/widget-builder/validate", json={"type": "heading", "content": {"text": "Hi", "level": "h9"}})
        body = r.json()
        assert body["valid"] is False
        assert "level" in body["error"]

    def test_unknown_type(self, client):
        r = client.post("/widget-builder/validate", json={"type": "mystery", "content": {}})
        assert r.json()["valid"] is False
        assert "mystery" in r.json()["error"]

    def test_bad_migration(self, client):
        r = client.post("/widget-builder/validate", json={"type": "button", "content": {"text": "x", "size": "xl"}})
        assert r.json()["valid"] is False


# ── /catalog ─────────────────────────────────────────────────────────────────

class TestCatalogEndpoint:
    def test_catalog(self, client):
        r = client.get("/widget-builder/catalog")
        assert r.status_code == 200
        widgets = r.json()["widgets"]
        assert len(widgets) == 23
        heading = next(w for w in widgets if w["type"] == "heading")
        assert heading["category"] == "basic"
        assert "text" in heading["schema"]["properties"]


# ── Helpers d'intégration ────────────────────────────────────────────────────

class TestIntegration:
    def test_create_page_route(self):
        app = FastAPI()
        create_page_route(app, "/", lambda: PAGE)
        r = TestClient(app).get("/")
        assert r.status_code == 200
        assert "Hello" in r.text

    def test_page_router(self):
        app = FastAPI()
        pages = PageRouter()
        pages.add_page("/a", lambda: {"title": "A", "blocks": []})
        pages.add_page("/b", lambda: {"title": "B", "blocks": []})
        pages.register(app)
        client = TestClient(app)
        assert "<title>A</title>" in client.get("/a").text
        assert "<title>B</title>" in client.get("/b").text
