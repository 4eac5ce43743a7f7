"""create empresas

Revision ID: 0001_create_empresas
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "0001_create_empresas"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "empresas",
        sa.Column("cnpj", sa.String(length=14), nullable=False),
        sa.Column("nome", sa.String(length=100), nullable=False),
        sa.Column("endereco", sa.String(length=200), nullable=True),
        sa.Column("telefone", sa.String(length=11), nullable=True),
        sa.PrimaryKeyConstraint("cnpj"),
    )


def downgrade() -> None:
    op.drop_table("empresas")
