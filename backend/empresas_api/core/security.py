from __future__ import annotations

import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from passlib.hash import pbkdf2_sha256

from empresas_api.core.settings import settings

bearer = HTTPBearer(auto_error=False)


def hash_password(plain: str) -> str:
    return pbkdf2_sha256.hash(plain)


def verify_password(plain: str) -> bool:
    # Prefere o hash; texto puro só como fallback de lab
    ph = (settings.AUTH_PASSWORD_HASH or "").strip()
    if ph:
        return pbkdf2_sha256.verify(plain, ph)
    expected = settings.AUTH_PASSWORD or ""
    if not expected:
        return False
    return secrets.compare_digest(plain.encode("utf-8"), expected.encode("utf-8"))


def _secret() -> str:
    sec = (settings.AUTH_JWT_SECRET or "").strip()
    if not sec:
        raise RuntimeError("SECURITY: AUTH_JWT_SECRET vazio (obrigatório quando AUTH_ENABLED=true)")
    if len(sec) < 32:
        raise RuntimeError("SECURITY: AUTH_JWT_SECRET fraco (min 32 chars)")
    return sec


def create_access_token(sub: str, ttl_min: int | None = None) -> str:
    ttl = int(ttl_min or settings.AUTH_JWT_TTL_MIN or 60)
    now = datetime.now(timezone.utc)
    payload: Dict[str, Any] = {
        "sub": sub,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=ttl)).timestamp()),
    }
    return jwt.encode(payload, _secret(), algorithm="HS256")


def decode_token(token: str) -> Dict[str, Any]:
    try:
        return jwt.decode(token, _secret(), algorithms=["HS256"])
    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token expirado.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except jwt.PyJWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token inválido.",
            headers={"WWW-Authenticate": "Bearer"},
        )


def require_token(creds: HTTPAuthorizationCredentials | None = Depends(bearer)) -> Dict[str, Any]:
    if not creds or (creds.scheme or "").lower() != "bearer" or not creds.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Não autenticado.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return decode_token(creds.credentials)


def require_auth(creds: HTTPAuthorizationCredentials | None = Depends(bearer)) -> Dict[str, Any] | None:
    """Exige bearer token apenas quando AUTH_ENABLED=true."""
    if not settings.AUTH_ENABLED:
        return None
    return require_token(creds)


def docs_protected() -> bool:
    return bool(settings.AUTH_ENABLED) and (settings.ENV == "prod" or bool(settings.AUTH_PROTECT_DOCS))


def require_docs_auth(creds: HTTPAuthorizationCredentials | None = Depends(bearer)) -> None:
    if docs_protected():
        require_token(creds)
