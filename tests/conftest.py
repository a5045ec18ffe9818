import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from smartnotes.main import app
from smartnotes.shared.db import Base, get_db
from smartnotes.functions.llm import CompletionClient, get_completion_client


@pytest.fixture()
def db_engine():
    # one shared in-memory database per test
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def client(db_engine):
    TestSession = sessionmaker(bind=db_engine, autoflush=False, autocommit=False)

    def _get_db():
        db = TestSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def fake_llm(client):
    """Route the summarize-note upstream call to a handler(request) -> httpx.Response."""
    def install(handler):
        transport = httpx.MockTransport(handler)
        app.dependency_overrides[get_completion_client] = lambda: CompletionClient(transport=transport)
    return install


@pytest.fixture()
def signup(client):
    """Register + sign in; returns (user_id, auth headers)."""
    def _signup(email="alice@mail.com", password="secret123"):
        r = client.post("/auth/register", json={"email": email, "password": password})
        assert r.status_code == 201, r.text
        r = client.post("/auth/token", data={"username": email, "password": password})
        assert r.status_code == 200, r.text
        body = r.json()
        return body["user"]["id"], {"Authorization": f"Bearer {body['access_token']}"}
    return _signup
