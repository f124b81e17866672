"""add producto.nombre

Revision ID: 0004
Revises: 0003
Create Date: 2025-07-09 11:20:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0004"
down_revision: Union[str, None] = "0003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    with op.batch_alter_table("producto") as batch_op:
        batch_op.add_column(sa.Column("nombre", sa.String(length=255), nullable=True))


def downgrade() -> None:
    with op.batch_alter_table("producto") as batch_op:
        batch_op.drop_column("nombre")
