# tests/conftest.py

import pytest
from fastapi.testclient import TestClient
from core.config import Settings
from core.context import AppContext
from main import create_app


TEST_SECRET = "test-secret-key"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        JWT_SECRET=TEST_SECRET,
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        BCRYPT_ROUNDS=4,
        DB_POOL_SIZE=5,
    )


@pytest.fixture
def ctx(settings):
    context = AppContext.from_settings(settings)
    context.db.init_db()
    yield context
    context.db.dispose()


@pytest.fixture
def db(ctx):
    session = ctx.db.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


def register_and_login(client, username, password="pw123", email=None):
    res = client.post("/auth/register", json={"username": username, "email": email, "password": password})
    assert res.status_code == 201, res.text
    res = client.post("/auth/login", json={"username": username, "password": password})
    assert res.status_code == 200, res.text
    return res.json()["token"]


def bearer(token):
    return {"Authorization": f"Bearer {token}"}
