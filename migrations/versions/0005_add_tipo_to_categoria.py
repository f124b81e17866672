"""add categoria.tipo enum

Revision ID: 0005
Revises: 0004
Create Date: 2025-07-22 16:45:00.000000

기존 카테고리는 모두 PRODUCTO 로 채워집니다.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0005"
down_revision: Union[str, None] = "0004"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

categoria_tipo_enum = sa.Enum("PRODUCTO", "SERVICIO", name="categoria_tipo_enum")


def upgrade() -> None:
    # PostgreSQL 에서는 컬럼 추가 전에 타입을 만들어야 합니다. (SQLite 는 VARCHAR 로 처리)
    categoria_tipo_enum.create(op.get_bind(), checkfirst=True)

    with op.batch_alter_table("categoria") as batch_op:
        batch_op.add_column(
            sa.Column("tipo", categoria_tipo_enum, nullable=False, server_default="PRODUCTO")
        )


def downgrade() -> None:
    with op.batch_alter_table("categoria") as batch_op:
        batch_op.drop_column("tipo")

    categoria_tipo_enum.drop(op.get_bind(), checkfirst=True)
