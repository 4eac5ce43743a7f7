from contextlib import contextmanager
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError

from empresas_api.core.errors import StorageError
from empresas_api.deps import get_company_service
from empresas_api.schemas.company import CompanyCreate, CompanyOut, CompanyUpdate, CompanyWriteResult, ErrorOut
from empresas_api.services.company import CompanyService

router = APIRouter(prefix="/empresas", tags=["empresas"])

logger = logging.getLogger(__name__)

_ERRORS = {
    400: {"model": ErrorOut, "description": "CNPJ inválido, dados inválidos ou CNPJ já cadastrado"},
    404: {"model": ErrorOut, "description": "Empresa não encontrada"},
    500: {"model": ErrorOut, "description": "Erro interno"},
}


@contextmanager
def _db_errors(message: str, cnpj: str | None = None):
    # falhas de banco são terminais para a requisição: loga o detalhe, devolve 500 genérico
    try:
        yield
    except SQLAlchemyError:
        logger.exception("%s (cnpj=%s)", message, cnpj)
        raise StorageError(message)


@router.get("", response_model=list[CompanyOut], responses={500: _ERRORS[500]}, summary="Listar todas as empresas")
def list_companies(service: CompanyService = Depends(get_company_service)):
    with _db_errors("Erro interno ao buscar empresas."):
        return service.list_companies()


@router.get(
    "/{cnpj:path}",
    response_model=CompanyOut,
    responses={k: _ERRORS[k] for k in (400, 404, 500)},
    summary="Buscar uma empresa pelo CNPJ",
)
def get_company(cnpj: str, service: CompanyService = Depends(get_company_service)):
    """Aceita o CNPJ com ou sem máscara, inclusive `12.345.678/0001-12`."""
    with _db_errors("Erro inesperado ao tentar buscar a empresa.", cnpj):
        return service.get_by_cnpj(cnpj)


@router.post(
    "",
    response_model=CompanyWriteResult,
    status_code=status.HTTP_201_CREATED,
    responses={k: _ERRORS[k] for k in (400, 500)},
    summary="Cadastrar uma nova empresa",
)
def create_company(payload: CompanyCreate, service: CompanyService = Depends(get_company_service)):
    with _db_errors("Erro inesperado ao tentar cadastrar a empresa.", payload.cnpj):
        return service.create_company(payload)


@router.put(
    "/{cnpj:path}",
    response_model=CompanyWriteResult,
    responses={k: _ERRORS[k] for k in (400, 404, 500)},
    summary="Atualizar dados de uma empresa pelo CNPJ",
)
def update_company(cnpj: str, payload: CompanyUpdate, service: CompanyService = Depends(get_company_service)):
    """Sobrescreve nome, endereço e telefone. Campos omitidos ficam nulos."""
    with _db_errors("Erro inesperado ao tentar atualizar a empresa.", cnpj):
        return service.update_company(cnpj, payload)
