import logging

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, AliasChoices, model_validator


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "Empresas API"
    ENV: str = Field(default="lab", validation_alias=AliasChoices("EMPRESAS_ENV", "ENV"))  # lab|prod
    DATABASE_URL: str = Field(default="sqlite:///./empresas.db", validation_alias=AliasChoices("EMPRESAS_DATABASE_URL", "DATABASE_URL"))
    LOG_LEVEL: str = Field(default="INFO", validation_alias=AliasChoices("EMPRESAS_LOG_LEVEL", "LOG_LEVEL"))

    # Auth (JWT) - desligado por padrão
    AUTH_ENABLED: bool = Field(default=False, validation_alias=AliasChoices("EMPRESAS_AUTH_ENABLED", "AUTH_ENABLED"))
    AUTH_PROTECT_DOCS: bool = Field(default=False, validation_alias=AliasChoices("EMPRESAS_AUTH_PROTECT_DOCS", "AUTH_PROTECT_DOCS"))
    AUTH_USERNAME: str = Field(default="", validation_alias=AliasChoices("EMPRESAS_AUTH_USERNAME", "AUTH_USERNAME"))
    # Prefira AUTH_PASSWORD_HASH (pbkdf2_sha256) em prod. AUTH_PASSWORD é fallback (lab/dev).
    AUTH_PASSWORD: str = Field(default="", validation_alias=AliasChoices("EMPRESAS_AUTH_PASSWORD", "AUTH_PASSWORD"))
    AUTH_PASSWORD_HASH: str = Field(default="", validation_alias=AliasChoices("EMPRESAS_AUTH_PASSWORD_HASH", "AUTH_PASSWORD_HASH"))
    AUTH_JWT_SECRET: str = Field(default="", validation_alias=AliasChoices("EMPRESAS_AUTH_JWT_SECRET", "AUTH_JWT_SECRET", "JWT_SECRET"))
    AUTH_JWT_TTL_MIN: int = Field(default=60, validation_alias=AliasChoices("EMPRESAS_AUTH_JWT_TTL_MIN", "AUTH_JWT_TTL_MIN"))

    @model_validator(mode="after")
    def _invariants(self):
        level = (self.LOG_LEVEL or "").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"LOG_LEVEL inválido: {self.LOG_LEVEL!r}")
        self.LOG_LEVEL = level

        # Fail-fast de segurança
        if self.AUTH_PROTECT_DOCS and not self.AUTH_ENABLED:
            raise ValueError("SECURITY: AUTH_PROTECT_DOCS exige AUTH_ENABLED=true")

        if self.ENV == "prod" and not self.AUTH_ENABLED:
            raise ValueError("SECURITY: ENV=prod requer AUTH_ENABLED=true (failsafe)")

        if self.AUTH_ENABLED:
            user = (self.AUTH_USERNAME or "").strip()
            if not user:
                raise ValueError("SECURITY: AUTH_USERNAME vazio (obrigatório quando AUTH_ENABLED=true)")
            self.AUTH_USERNAME = user

            ph = str(self.AUTH_PASSWORD_HASH or "").strip()
            if not ph and not self.AUTH_PASSWORD:
                raise ValueError("SECURITY: AUTH_PASSWORD ou AUTH_PASSWORD_HASH obrigatório quando AUTH_ENABLED=true")
            self.AUTH_PASSWORD_HASH = ph

            sec = (self.AUTH_JWT_SECRET or "").strip()
            if not sec:
                raise ValueError("SECURITY: AUTH_JWT_SECRET vazio (obrigatório quando AUTH_ENABLED=true)")
            if len(sec) < 32:
                raise ValueError("SECURITY: AUTH_JWT_SECRET curto (min 32 chars)")
            self.AUTH_JWT_SECRET = sec

        return self


settings = Settings()
