from pydantic import BaseModel, ConfigDict, Field, field_validator

from empresas_api.core.cnpj import CNPJ_LENGTH, PHONE_LENGTH, normalize_cnpj, normalize_phone


class _CompanyFields(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    nome: str = Field(description="Nome da empresa", examples=["JAVA TESTE Ltda"])
    endereco: str | None = Field(default=None, description="Endereço da empresa", examples=["Rua do teste, 123"])
    telefone: str | None = Field(default=None, description="Telefone com DDD", examples=["(11) 12345-6789"])

    @field_validator("nome")
    @classmethod
    def _check_nome(cls, v: str) -> str:
        if not v:
            raise ValueError("O nome é obrigatório.")
        if len(v) > 100:
            raise ValueError("O nome pode ter no máximo 100 caracteres.")
        return v

    @field_validator("endereco")
    @classmethod
    def _check_endereco(cls, v: str | None) -> str | None:
        if v is not None and len(v) > 200:
            raise ValueError("O endereço pode ter no máximo 200 caracteres.")
        return v or None

    @field_validator("telefone")
    @classmethod
    def _check_telefone(cls, v: str | None) -> str | None:
        digits = normalize_phone(v)
        if digits is not None and len(digits) != PHONE_LENGTH:
            raise ValueError(f"O telefone deve conter {PHONE_LENGTH} dígitos (DDD + número).")
        return digits


class CompanyCreate(_CompanyFields):
    cnpj: str = Field(description="CNPJ da empresa, com ou sem máscara", examples=["12.345.678/0001-12"])

    @field_validator("cnpj")
    @classmethod
    def _check_cnpj(cls, v: str) -> str:
        digits = normalize_cnpj(v)
        if not digits:
            raise ValueError("O CNPJ é obrigatório.")
        if len(digits) != CNPJ_LENGTH:
            raise ValueError(f"O CNPJ deve ter exatamente {CNPJ_LENGTH} dígitos.")
        return digits


class CompanyUpdate(_CompanyFields):
    """Sobrescreve nome, endereço e telefone. O CNPJ vem do path e nunca muda."""


class CompanyOut(BaseModel):
    nome: str
    cnpj: str = Field(description="CNPJ formatado (XX.XXX.XXX/XXXX-XX)", examples=["12.345.678/0001-12"])
    endereco: str | None = None
    telefone: str | None = None

    model_config = ConfigDict(from_attributes=True)


class CompanyWriteResult(BaseModel):
    mensagem: str
    linhas_afetadas: int = Field(alias="linhasAfetadas")
    empresa: CompanyOut

    model_config = ConfigDict(populate_by_name=True)


class ErrorOut(BaseModel):
    erro: str
