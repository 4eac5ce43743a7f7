import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from empresas_api.core.settings import settings
from empresas_api.db import Base, get_db
from empresas_api.main import app
import empresas_api.models.company  # noqa: F401  (registra a tabela no metadata)

TEST_USERNAME = "admin"
TEST_PASSWORD = "senha-de-teste"
TEST_JWT_SECRET = "s" * 48


def _memory_engine():
    # StaticPool: todas as sessões enxergam o mesmo banco em memória
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


def _override_get_db(session_factory):
    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    return _get_db


@pytest.fixture()
def engine():
    eng = _memory_engine()
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def db_session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture()
def client(session_factory):
    app.dependency_overrides[get_db] = _override_get_db(session_factory)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def broken_client():
    """Cliente apontando para um banco sem a tabela `empresas`."""
    eng = _memory_engine()
    app.dependency_overrides[get_db] = _override_get_db(sessionmaker(bind=eng))
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    eng.dispose()


@pytest.fixture()
def auth_enabled(monkeypatch):
    monkeypatch.setattr(settings, "AUTH_ENABLED", True)
    monkeypatch.setattr(settings, "AUTH_USERNAME", TEST_USERNAME)
    monkeypatch.setattr(settings, "AUTH_PASSWORD", TEST_PASSWORD)
    monkeypatch.setattr(settings, "AUTH_PASSWORD_HASH", "")
    monkeypatch.setattr(settings, "AUTH_JWT_SECRET", TEST_JWT_SECRET)


@pytest.fixture()
def auth_header(client, auth_enabled):
    resp = client.post("/auth/login", json={"username": TEST_USERNAME, "password": TEST_PASSWORD})
    assert resp.status_code == 200
    token = resp.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}
