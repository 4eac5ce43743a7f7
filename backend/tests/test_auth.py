from passlib.hash import pbkdf2_sha256

from empresas_api.core.settings import settings
from conftest import TEST_PASSWORD, TEST_USERNAME


def test_login_disabled_returns_404(client):
    resp = client.post("/auth/login", json={"username": "x", "password": "y"})
    assert resp.status_code == 404
    assert "erro" in resp.json()


def test_empresas_open_when_auth_disabled(client):
    assert client.get("/empresas").status_code == 200


def test_empresas_require_token_when_enabled(client, auth_enabled):
    resp = client.get("/empresas")
    assert resp.status_code == 401
    assert resp.json() == {"erro": "Não autenticado."}


def test_empresas_with_token(client, auth_header):
    resp = client.get("/empresas", headers=auth_header)
    assert resp.status_code == 200
    assert resp.json() == []


def test_invalid_token(client, auth_enabled):
    resp = client.get("/empresas", headers={"Authorization": "Bearer nao.e.jwt"})
    assert resp.status_code == 401
    assert resp.json()["erro"] == "Token inválido."


def test_wrong_password(client, auth_enabled):
    resp = client.post("/auth/login", json={"username": TEST_USERNAME, "password": "errada"})
    assert resp.status_code == 401


def test_wrong_username(client, auth_enabled):
    resp = client.post("/auth/login", json={"username": "outro", "password": TEST_PASSWORD})
    assert resp.status_code == 401


def test_login_with_password_hash(client, auth_enabled, monkeypatch):
    monkeypatch.setattr(settings, "AUTH_PASSWORD", "")
    monkeypatch.setattr(settings, "AUTH_PASSWORD_HASH", pbkdf2_sha256.hash("hash-secreto"))

    ok = client.post("/auth/login", json={"username": TEST_USERNAME, "password": "hash-secreto"})
    assert ok.status_code == 200
    assert ok.json()["token_type"] == "bearer"

    bad = client.post("/auth/login", json={"username": TEST_USERNAME, "password": TEST_PASSWORD})
    assert bad.status_code == 401


def test_me(client, auth_header):
    resp = client.get("/auth/me", headers=auth_header)
    assert resp.status_code == 200
    assert resp.json()["sub"] == TEST_USERNAME


def test_docs_protected(client, auth_enabled, auth_header, monkeypatch):
    monkeypatch.setattr(settings, "AUTH_PROTECT_DOCS", True)

    assert client.get("/openapi.json").status_code == 401
    assert client.get("/openapi.json", headers=auth_header).status_code == 200
