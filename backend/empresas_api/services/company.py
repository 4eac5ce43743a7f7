import logging

from sqlalchemy.exc import IntegrityError

from empresas_api.core.cnpj import CNPJ_LENGTH, PHONE_LENGTH, format_cnpj, normalize_cnpj, normalize_phone
from empresas_api.core.errors import (
    CompanyAlreadyExistsError,
    CompanyNotFoundError,
    CompanyValidationError,
    InvalidCnpjError,
)
from empresas_api.models.company import Company
from empresas_api.repositories.company import CompanyRepository
from empresas_api.schemas.company import CompanyCreate, CompanyOut, CompanyUpdate, CompanyWriteResult

logger = logging.getLogger(__name__)


def _display_cnpj(cnpj: str) -> str:
    # linhas gravadas fora desta API podem ter CNPJ malformado; não derrubam a listagem
    if len(cnpj or "") != CNPJ_LENGTH or normalize_cnpj(cnpj) != cnpj:
        logger.warning("CNPJ armazenado fora do padrão de %s dígitos: %r", CNPJ_LENGTH, cnpj)
        return cnpj
    return format_cnpj(cnpj)


def _to_out(company: Company) -> CompanyOut:
    return CompanyOut(
        nome=company.nome,
        cnpj=_display_cnpj(company.cnpj),
        endereco=company.endereco,
        telefone=company.telefone,
    )


def _check_phone(raw: str | None) -> str | None:
    telefone = normalize_phone(raw)
    if telefone is not None and len(telefone) != PHONE_LENGTH:
        raise CompanyValidationError(f"Telefone inválido. Deve conter {PHONE_LENGTH} dígitos (DDD + número).")
    return telefone


class CompanyService:
    """Regras de cadastro de empresas.

    Toda validação acontece antes de qualquer acesso ao banco. O CNPJ é
    persistido só com dígitos e devolvido formatado.
    """

    def __init__(self, repository: CompanyRepository):
        self.repository = repository

    def list_companies(self) -> list[CompanyOut]:
        return [_to_out(c) for c in self.repository.list_all()]

    def get_by_cnpj(self, raw_cnpj: str | None) -> CompanyOut:
        cnpj = normalize_cnpj(raw_cnpj)
        if len(cnpj) != CNPJ_LENGTH:
            logger.warning("Busca com CNPJ inválido após limpeza: %r", raw_cnpj)
            raise InvalidCnpjError()

        company = self.repository.find_by_cnpj(cnpj)
        if company is None:
            logger.warning("Nenhuma empresa encontrada com o CNPJ %s", cnpj)
            raise CompanyNotFoundError()

        return _to_out(company)

    def create_company(self, data: CompanyCreate) -> CompanyWriteResult:
        cnpj = normalize_cnpj(data.cnpj)
        if len(cnpj) != CNPJ_LENGTH:
            raise CompanyValidationError(f"CNPJ inválido. Deve conter {CNPJ_LENGTH} dígitos numéricos.")
        telefone = _check_phone(data.telefone)

        if self.repository.exists(cnpj):
            logger.warning("CNPJ %s já cadastrado", cnpj)
            raise CompanyAlreadyExistsError()

        try:
            rows = self.repository.insert(nome=data.nome, cnpj=cnpj, endereco=data.endereco, telefone=telefone)
        except IntegrityError:
            # outra requisição inseriu o mesmo CNPJ entre a checagem e o insert
            logger.warning("CNPJ %s já cadastrado (violação de chave no insert)", cnpj)
            raise CompanyAlreadyExistsError()

        logger.info("Empresa com CNPJ %s cadastrada com sucesso. Linhas afetadas: %s", cnpj, rows)

        return CompanyWriteResult(
            mensagem="Empresa cadastrada com sucesso.",
            linhas_afetadas=rows,
            empresa=CompanyOut(nome=data.nome, cnpj=format_cnpj(cnpj), endereco=data.endereco, telefone=telefone),
        )

    def update_company(self, raw_cnpj: str | None, data: CompanyUpdate) -> CompanyWriteResult:
        cnpj = normalize_cnpj(raw_cnpj)
        if len(cnpj) != CNPJ_LENGTH:
            logger.warning("Atualização com CNPJ inválido no path: %r", raw_cnpj)
            raise InvalidCnpjError(f"CNPJ do path inválido. Deve conter {CNPJ_LENGTH} dígitos numéricos.")
        telefone = _check_phone(data.telefone)

        if not self.repository.exists(cnpj):
            logger.warning("Atualização de CNPJ inexistente %s", cnpj)
            raise CompanyNotFoundError("Nenhuma empresa encontrada com o CNPJ fornecido para atualização.")

        rows = self.repository.update(cnpj, nome=data.nome, endereco=data.endereco, telefone=telefone)
        if rows == 0:
            logger.warning(
                "Nenhuma linha foi atualizada para o CNPJ %s, embora a empresa exista. Os dados podem ser os mesmos.",
                cnpj,
            )

        logger.info("Empresa com CNPJ %s atualizada. Linhas afetadas: %s", cnpj, rows)

        return CompanyWriteResult(
            mensagem="Empresa atualizada com sucesso.",
            linhas_afetadas=rows,
            empresa=CompanyOut(nome=data.nome, cnpj=format_cnpj(cnpj), endereco=data.endereco, telefone=telefone),
        )
