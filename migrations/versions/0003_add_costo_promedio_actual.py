"""add inventarios.costo_promedio_actual

Revision ID: 0003
Revises: 0002
Create Date: 2025-07-01 14:05:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0003"
down_revision: Union[str, None] = "0002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 기존 행은 0 으로 채워지며, 이후 입고부터 가중평균이 누적됩니다.
    with op.batch_alter_table("inventarios") as batch_op:
        batch_op.add_column(
            sa.Column(
                "costo_promedio_actual",
                sa.Numeric(12, 4),
                nullable=False,
                server_default="0",
                comment="Costo promedio ponderado actual del inventario",
            )
        )


def downgrade() -> None:
    with op.batch_alter_table("inventarios") as batch_op:
        batch_op.drop_column("costo_promedio_actual")
