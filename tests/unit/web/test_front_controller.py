"""Unit tests for the front controller routes."""

from pathlib import Path

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from ticketapp.config import Settings
from ticketapp.web import create_app
from ticketapp.web.routes import is_protected, load_json


@pytest.fixture
def app() -> FastAPI:
    """Front controller over the packaged templates and seed file."""
    return create_app(Settings())


@pytest.fixture
def client(app: FastAPI):
    """Create a test client."""
    with TestClient(app, raise_server_exceptions=False, follow_redirects=False) as client:
        yield client


def _templates(tmp_path: Path, *names: str) -> Path:
    for name in names:
        (tmp_path / name).write_text(f"<p>{name}</p>")
    return tmp_path


@pytest.mark.unit
class TestPublicPages:
    """Tests for unprotected routes."""

    @pytest.mark.parametrize(
        ("path", "marker"),
        [
            ("/", "decorFeatureBoxes"),
            ("/auth/login", 'id="login-form"'),
            ("/auth/signup", 'id="signup-form"'),
            ("/auth/login/", 'id="login-form"'),
        ],
    )
    def test_renders_template(self, client: TestClient, path: str, marker: str) -> None:
        response = client.get(path)

        assert response.status_code == 200
        assert marker in response.text

    def test_landing_does_not_need_cookie(self, client: TestClient) -> None:
        assert client.get("/").status_code == 200


@pytest.mark.unit
class TestRouteGuard:
    """Tests for cookie-presence gating."""

    @pytest.mark.parametrize("path", ["/dashboard", "/tickets", "/dashboard/", "/tickets/123"])
    def test_redirects_without_cookie(self, client: TestClient, path: str) -> None:
        response = client.get(path)

        assert response.status_code == status.HTTP_302_FOUND
        assert response.headers["location"] == "/auth/login"

    def test_any_cookie_value_passes(self, app: FastAPI) -> None:
        with TestClient(app, cookies={"ticketapp_session": "not-even-a-token"}) as client:
            dashboard = client.get("/dashboard")
            tickets = client.get("/tickets")

        assert dashboard.status_code == 200
        assert 'id="ticket-table-body"' in dashboard.text
        assert tickets.status_code == 200
        assert 'id="ticket-list"' in tickets.text

    def test_unknown_protected_subpath_is_404_with_cookie(self, app: FastAPI) -> None:
        with TestClient(app, cookies={"ticketapp_session": "tok_abc"}) as client:
            assert client.get("/tickets/123").status_code == 404

    def test_is_protected(self) -> None:
        assert is_protected("/dashboard")
        assert is_protected("/tickets/1")
        assert not is_protected("/")
        assert not is_protected("/auth/login")


@pytest.mark.unit
class TestNotFound:
    """Tests for unmapped paths."""

    def test_uses_404_template(self, client: TestClient) -> None:
        response = client.get("/nowhere")

        assert response.status_code == 404
        assert "404 - Not Found" in response.text
        assert "/nowhere" in response.text

    def test_fallback_without_404_template(self, tmp_path: Path) -> None:
        settings = Settings(templates_dir=_templates(tmp_path, "landing.html"))

        with TestClient(create_app(settings)) as client:
            response = client.get("/nowhere")

        assert response.status_code == 404
        assert response.text == "<h1>404 - Not Found</h1>"

    def test_missing_mapped_template(self, tmp_path: Path) -> None:
        settings = Settings(templates_dir=_templates(tmp_path, "landing.html"))

        with TestClient(create_app(settings), raise_server_exceptions=False) as client:
            response = client.get("/auth/login")

        assert response.status_code == 500
        assert "Template not found: login.html" in response.text


@pytest.mark.unit
class TestSeedEndpoint:
    """Tests for GET /data/tickets.json."""

    def test_serves_packaged_seed(self, client: TestClient) -> None:
        response = client.get("/data/tickets.json")

        assert response.status_code == 200
        data = response.json()
        assert isinstance(data, list)
        assert {"id", "title", "status"} <= set(data[0])

    def test_seed_is_public(self, client: TestClient) -> None:
        assert client.get("/data/tickets.json").status_code == 200

    def test_missing_file_serves_empty_array(self, tmp_path: Path) -> None:
        settings = Settings(seed_file=tmp_path / "absent.json")

        with TestClient(create_app(settings)) as client:
            assert client.get("/data/tickets.json").json() == []

    def test_load_json_corrupt_file(self, tmp_path: Path) -> None:
        path = tmp_path / "tickets.json"
        path.write_text("[{broken")

        assert load_json(path) == []
