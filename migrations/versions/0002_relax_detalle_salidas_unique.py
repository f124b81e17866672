"""relax detalle_salidas.id_movimiento_detalle uniqueness

Revision ID: 0002
Revises: 0001
Create Date: 2025-06-16 10:30:00.000000

출고 라인 하나에 여러 매출원가 기록이 연결될 수 있도록 유일성 제약을
일반 인덱스로 바꿉니다. 외래 키는 그대로 유지됩니다.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from app.core.exceptions import ConstraintViolation


# revision identifiers, used by Alembic.
revision: str = "0002"
down_revision: Union[str, None] = "0001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

UNIQUE_NAME = "uq_detalle_salidas_id_movimiento_detalle"
INDEX_NAME = "ix_detalle_salidas_id_movimiento_detalle"


def upgrade() -> None:
    with op.batch_alter_table("detalle_salidas") as batch_op:
        batch_op.drop_constraint(UNIQUE_NAME, type_="unique")
        batch_op.create_index(INDEX_NAME, ["id_movimiento_detalle"], unique=False)


def downgrade() -> None:
    # 이미 같은 라인을 참조하는 행이 여러 개면 유일성 제약을 복원할 수 없습니다.
    duplicates = op.get_bind().execute(
        sa.text(
            "SELECT id_movimiento_detalle, COUNT(*) FROM detalle_salidas "
            "GROUP BY id_movimiento_detalle HAVING COUNT(*) > 1"
        )
    ).fetchall()
    if duplicates:
        raise ConstraintViolation(
            "Cannot restore unique constraint on detalle_salidas.id_movimiento_detalle: "
            f"{len(duplicates)} movement detail(s) are referenced more than once "
            f"(e.g. id_movimiento_detalle={duplicates[0][0]})."
        )

    with op.batch_alter_table("detalle_salidas") as batch_op:
        batch_op.drop_index(INDEX_NAME)
        batch_op.create_unique_constraint(UNIQUE_NAME, ["id_movimiento_detalle"])
