"""Tests for application wiring."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.email_regex.infrastructure.content import tutorial_loader
from app.email_regex.infrastructure.content.tutorial_loader import FileTutorialLoader
from app.main import create_app


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the full application, running the lifespan."""
    with TestClient(create_app()) as client:
        yield client


def test_routes_are_mounted(client: TestClient) -> None:
    assert client.get("/api/health").status_code == 200
    assert client.get("/api/pattern").status_code == 200
    assert client.get("/api/tutorial").status_code == 200
    assert client.get("/").status_code == 200


def test_validate_through_full_app(client: TestClient) -> None:
    response = client.post("/api/emails/validate", json={"email": "rene.malingre@gmail.com"})

    assert response.json()["is_valid"] is True


def test_startup_survives_unreadable_tutorial(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "untitled.md"
    path.write_text("No title heading here.\n", encoding="utf-8")
    monkeypatch.setattr(tutorial_loader, "_default_loader", FileTutorialLoader(str(path)))

    with TestClient(create_app()) as client:
        assert client.get("/api/health").status_code == 200
        assert client.get("/api/ready").json()["status"] == "not_ready"
        assert client.get("/api/tutorial").status_code == 503
        assert client.get("/").status_code == 200


def test_static_mount_is_absent() -> None:
    paths = {route.path for route in create_app().routes}

    assert "/static" not in paths
    assert "/api/tutorial" in paths
