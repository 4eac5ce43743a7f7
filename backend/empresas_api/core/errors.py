"""
Erros de domínio e handlers globais que os convertem em JSON {"erro": ...}.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class CompanyError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Requisição inválida."

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class InvalidCnpjError(CompanyError):
    message = "CNPJ inválido. Deve conter 14 dígitos numéricos."


class CompanyValidationError(CompanyError):
    message = "Dados da empresa inválidos."


class CompanyAlreadyExistsError(CompanyError):
    # 400 e não 409: contrato herdado dos clientes existentes
    message = "CNPJ já cadastrado."


class CompanyNotFoundError(CompanyError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Nenhuma empresa encontrada com o CNPJ fornecido."


class StorageError(CompanyError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Erro interno ao acessar o banco de dados."


_BODY_MESSAGES = {
    "json_invalid": "JSON inválido no corpo da requisição.",
    "json_type": "JSON inválido no corpo da requisição.",
    "model_attributes_type": "O corpo da requisição deve ser um objeto JSON.",
    "model_type": "O corpo da requisição deve ser um objeto JSON.",
    "dict_type": "O corpo da requisição deve ser um objeto JSON.",
}

_FIELD_MESSAGES = {
    "string_type": "O campo '{campo}' deve ser um texto.",
    "string_unicode": "O campo '{campo}' deve ser um texto válido.",
    "string_too_long": "O campo '{campo}' excede o tamanho máximo.",
    "string_too_short": "O campo '{campo}' é curto demais.",
    "none_required": "O campo '{campo}' deve ser nulo.",
}


def _validation_message(err: dict, campo: str) -> str:
    kind = err.get("type")
    if kind == "missing":
        return f"O campo '{campo}' é obrigatório." if campo else "Corpo da requisição é obrigatório."
    if kind == "value_error":
        # mensagens dos nossos validators já vêm em português
        msg = str(err.get("msg") or "")
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        if msg:
            return msg
    if kind in _BODY_MESSAGES:
        return _BODY_MESSAGES[kind]
    if kind in _FIELD_MESSAGES and campo:
        return _FIELD_MESSAGES[kind].format(campo=campo)
    return f"Valor inválido para o campo '{campo}'." if campo else "Dados de entrada inválidos."


def add_error_handlers(app: FastAPI) -> None:
    """Registra os handlers de erro globais da aplicação."""

    @app.exception_handler(CompanyError)
    async def company_error_handler(request: Request, exc: CompanyError):
        return JSONResponse(status_code=exc.status_code, content={"erro": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        logger.warning("Requisição inválida em %s: %s", request.url.path, errors)
        detalhes = []
        for e in errors:
            campo = ".".join(str(p) for p in e.get("loc", ())[1:])
            detalhes.append({"campo": campo, "mensagem": _validation_message(e, campo)})
        first = detalhes[0]["mensagem"] if detalhes else "Dados de entrada inválidos."
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"erro": first, "detalhes": detalhes},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"erro": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Erro não tratado em %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"erro": "Erro interno do servidor."},
        )
