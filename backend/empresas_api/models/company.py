from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from empresas_api.db import Base


class Company(Base):
    __tablename__ = "empresas"

    # cnpj sempre normalizado (só dígitos); a máscara é aplicada apenas na saída
    cnpj: Mapped[str] = mapped_column(String(14), primary_key=True)
    nome: Mapped[str] = mapped_column(String(100), nullable=False)
    endereco: Mapped[str | None] = mapped_column(String(200), nullable=True)
    telefone: Mapped[str | None] = mapped_column(String(11), nullable=True)

    def __repr__(self) -> str:
        return f"Company(cnpj={self.cnpj!r}, nome={self.nome!r})"
