from sqlalchemy import func, insert, select, update
from sqlalchemy.orm import Session

from empresas_api.models.company import Company

empresas = Company.__table__


class CompanyRepository:
    """Acesso à tabela `empresas`. Todos os CNPJs recebidos já vêm normalizados."""

    def __init__(self, db: Session):
        self.db = db

    def exists(self, cnpj: str) -> bool:
        count = self.db.scalar(select(func.count()).select_from(empresas).where(empresas.c.cnpj == cnpj))
        return bool(count)

    def list_all(self) -> list[Company]:
        return list(self.db.scalars(select(Company).order_by(Company.nome, Company.cnpj)))

    def find_by_cnpj(self, cnpj: str) -> Company | None:
        return self.db.scalar(select(Company).where(Company.cnpj == cnpj))

    def insert(self, *, nome: str, cnpj: str, endereco: str | None, telefone: str | None) -> int:
        stmt = insert(empresas).values(nome=nome, cnpj=cnpj, endereco=endereco, telefone=telefone)
        return self._execute(stmt)

    def update(self, cnpj: str, *, nome: str, endereco: str | None, telefone: str | None) -> int:
        stmt = (
            update(empresas)
            .where(empresas.c.cnpj == cnpj)
            .values(nome=nome, endereco=endereco, telefone=telefone)
        )
        return self._execute(stmt)

    def _execute(self, stmt) -> int:
        # rollback explícito para a sessão continuar utilizável após erro
        try:
            result = self.db.execute(stmt)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return result.rowcount
