import secrets

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from empresas_api.core.settings import settings
from empresas_api.core.security import create_access_token, require_token, verify_password

router = APIRouter(prefix="/auth", tags=["auth"])


class LoginIn(BaseModel):
    username: str
    password: str


class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"


@router.post("/login", response_model=TokenOut)
def login(payload: LoginIn):
    if not settings.AUTH_ENABLED:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Autenticação desabilitada.")

    user = (settings.AUTH_USERNAME or "").strip()
    if not user:
        raise RuntimeError("SECURITY: AUTH_USERNAME obrigatório quando AUTH_ENABLED=true")

    if not secrets.compare_digest(payload.username.strip().encode("utf-8"), user.encode("utf-8")):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Credenciais inválidas.")

    if not verify_password(payload.password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Credenciais inválidas.")

    return TokenOut(access_token=create_access_token(sub=user))


@router.get("/me")
def me(claims=Depends(require_token)):
    return {"sub": claims.get("sub"), "iat": claims.get("iat"), "exp": claims.get("exp")}
