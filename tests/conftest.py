import pytest
from fastapi.testclient import TestClient

from catalog_service.config import Settings
from catalog_service.db import init_db
from catalog_service.main import create_app

TEST_SECRET = "test-secret"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'catalog.db'}",
        JWT_SECRET=TEST_SECRET,
        JWT_EXPIRES_IN="1h",
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(app):
    init_db(app.state.engine)
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def token_service(app):
    return app.state.token_service


@pytest.fixture
def auth_headers(client):
    client.post("/signup", json={"email": "owner@example.com", "password": "Secret123!"})
    login = client.post("/login", json={"email": "owner@example.com", "password": "Secret123!"})
    return {"Authorization": f"Bearer {login.json()['token']}"}
