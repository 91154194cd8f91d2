"""Tests for the application bootstrap and the generated API documentation."""

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from identity_vault.database.config.connection_engine import Database
from identity_vault.main import create_app

ENTITY_PATHS = ["/users", "/dids", "/resources", "/documents", "/documenttransactions"]


class TestCreateApp:

    def test_database_handle_on_state(self, settings, database):
        app = create_app(settings, database=database)

        assert app.state.database is database
        assert app.state.settings is settings

    def test_database_built_from_settings(self, settings):
        app = create_app(settings)

        assert isinstance(app.state.database, Database)
        assert app.state.database.url.get_backend_name() == "sqlite"

    def test_lifespan_disposes_pool(self, settings, database, monkeypatch):
        disposed = []
        monkeypatch.setattr(database, "dispose", lambda: disposed.append(True))

        with TestClient(create_app(settings, database=database)):
            assert disposed == []

        assert disposed == [True]

    def test_tokens_follow_app_settings(self, settings, database):
        app_settings = settings.model_copy(update={"JWT_SECRET": "app-secret"})
        client = TestClient(create_app(app_settings, database=database))
        client.post("/register", json={"name": "A", "email": "a@x.com", "password": "pw"})

        token = client.post("/login", json={"email": "a@x.com", "password": "pw"}).json()["token"]

        assert jwt.decode(token, "app-secret", algorithms=["HS256"])["email"] == "a@x.com"
        assert client.get("/users", headers={"Authorization": f"Bearer {token}"}).status_code == 200

    def test_unknown_route_uses_error_body(self, client):
        response = client.get("/nowhere")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}


class TestOpenApi:
    """The OpenAPI document is generated from the route declarations."""

    @pytest.fixture
    def schema(self, client):
        response = client.get("/api-docs.json")
        assert response.status_code == 200
        return response.json()

    def test_swagger_ui_served(self, client):
        response = client.get("/api-docs")

        assert response.status_code == 200
        assert "swagger" in response.text.lower()

    @pytest.mark.parametrize("path", ENTITY_PATHS)
    def test_entity_paths_documented(self, schema, path):
        assert set(schema["paths"][path]) == {"get", "post"}
        assert set(schema["paths"][f"{path}/{{id}}"]) == {"get", "put", "delete"}

    def test_status_codes_documented(self, schema):
        operations = schema["paths"]["/resources/{id}"]

        assert {"200", "404"} <= set(operations["get"]["responses"])
        assert {"200", "400", "404"} <= set(operations["put"]["responses"])
        assert {"204", "404"} <= set(operations["delete"]["responses"])
        assert {"201", "400"} <= set(schema["paths"]["/resources"]["post"]["responses"])

    def test_security_only_on_protected_routes(self, schema):
        assert "HTTPBearer" in schema["components"]["securitySchemes"]
        assert schema["paths"]["/users"]["get"]["security"] == [{"HTTPBearer": []}]
        assert "security" not in schema["paths"]["/documenttransactions"]["get"]
        assert "security" not in schema["paths"]["/login"]["post"]

    def test_auth_routes_documented(self, schema):
        assert "post" in schema["paths"]["/register"]
        assert "post" in schema["paths"]["/login"]

    def test_tags(self, schema):
        names = [tag["name"] for tag in schema["tags"]]

        assert names == ["Auth", "Resources", "Users", "DIDs", "Documents", "DocumentTransactions"]
