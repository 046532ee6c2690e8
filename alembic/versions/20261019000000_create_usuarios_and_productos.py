"""Create usuarios (accounts) and productos (catalog items) tables.

Revision ID: 20261019000000
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20261019000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

rol_enum = sa.Enum("admin", "standard", name="rol")


def upgrade() -> None:
    op.create_table(
        "usuarios",
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column("nombre", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("correo", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("rol", rol_enum, nullable=False, server_default="standard"),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_usuarios")),
    )
    op.create_index(
        op.f("ix_usuarios_correo"),
        "usuarios",
        ["correo"],
        unique=True,
    )
    op.create_table(
        "productos",
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column("nombre", sa.String(length=255), nullable=False),
        sa.Column("descripcion", sa.Text(), nullable=False),
        sa.Column("precio", sa.Float(), nullable=False),
        sa.Column("stock", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("categoria", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_productos")),
    )
    op.create_index(op.f("ix_productos_categoria"), "productos", ["categoria"])


def downgrade() -> None:
    op.drop_index(op.f("ix_productos_categoria"), table_name="productos")
    op.drop_table("productos")
    op.drop_index(op.f("ix_usuarios_correo"), table_name="usuarios")
    op.drop_table("usuarios")
    rol_enum.drop(op.get_bind(), checkfirst=True)
