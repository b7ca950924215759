"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("JWT_SECRET", "test-secret-do-not-use")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from docvault.db.session import Base, engine
from docvault.main import app
from docvault.models import user, document  # noqa: F401  (register tables)


@pytest.fixture(autouse=True)
def fresh_schema():
    """Every test starts with empty tables."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def make_client():
    """Build independent clients; each keeps its own cookie jar, i.e. its own user."""
    clients = []

    def _make(**kwargs) -> TestClient:
        c = TestClient(app, **kwargs)
        clients.append(c)
        return c

    yield _make
    for c in clients:
        c.close()


@pytest.fixture
def client(make_client):
    return make_client()


def _signup(c: TestClient, username: str, password: str = "secret123") -> int:
    r = c.post("/auth/register", json={"username": username, "password": password})
    assert r.status_code == 201, r.text
    return r.json()["userId"]


@pytest.fixture
def signup():
    return _signup


@pytest.fixture
def alice(make_client):
    c = make_client()
    c.user_id = _signup(c, "alice")
    return c


@pytest.fixture
def bob(make_client):
    c = make_client()
    c.user_id = _signup(c, "bob")
    return c
