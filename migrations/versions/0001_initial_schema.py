"""initial schema

Revision ID: 0001
Revises:
Create Date: 2025-06-02 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

movimiento_tipo_enum = sa.Enum(
    "ENTRADA", "SALIDA", "AJUSTE_ENTRADA", "AJUSTE_SALIDA", name="movimiento_tipo_enum"
)
movimiento_direccion_enum = sa.Enum("ENTRADA", "SALIDA", name="movimiento_direccion_enum")


def _timestamps(updated: bool = True):
    columns = [sa.Column("fecha_creacion", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=True)]
    if updated:
        columns.append(
            sa.Column("fecha_actualizacion", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=True)
        )
    return columns


def upgrade() -> None:
    op.create_table(
        "categoria",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("nombre", sa.String(length=100), nullable=False),
        sa.Column("descripcion", sa.String(length=255), nullable=True),
        sa.Column("estado", sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_table(
        "almacen",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("nombre", sa.String(length=100), nullable=False),
        sa.Column("ubicacion", sa.String(length=255), nullable=False),
        sa.Column("descripcion", sa.String(length=255), nullable=True),
        sa.Column("capacidad_maxima", sa.Integer(), nullable=True),
        sa.Column("responsable", sa.String(length=100), nullable=True),
        sa.Column("telefono", sa.String(length=20), nullable=True),
        sa.Column("estado", sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_table(
        "producto",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("codigo", sa.String(length=50), nullable=True),
        sa.Column("descripcion", sa.String(length=255), nullable=False),
        sa.Column("unidad_medida", sa.String(length=20), nullable=False),
        sa.Column("precio", sa.Numeric(12, 2), server_default="0", nullable=False),
        sa.Column("stock_minimo", sa.Integer(), nullable=False),
        sa.Column("estado", sa.Boolean(), nullable=False),
        sa.Column("id_categoria", sa.Integer(), sa.ForeignKey("categoria.id"), nullable=True),
        sa.Column("observaciones", sa.Text(), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("codigo", name="uq_producto_codigo"),
    )
    op.create_table(
        "inventarios",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("id_producto", sa.Integer(), sa.ForeignKey("producto.id"), nullable=False),
        sa.Column("id_almacen", sa.Integer(), sa.ForeignKey("almacen.id"), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("id_producto", "id_almacen", name="uq_inventarios_producto_almacen"),
    )
    op.create_table(
        "inventario_lote",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("id_inventario", sa.Integer(), sa.ForeignKey("inventarios.id"), nullable=False),
        sa.Column("numero_lote", sa.String(length=100), nullable=False),
        sa.Column("fecha_ingreso", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("cantidad_inicial", sa.Numeric(14, 4), nullable=False),
        sa.Column("costo_unitario", sa.Numeric(12, 4), nullable=False),
        sa.Column("fecha_vencimiento", sa.Date(), nullable=True),
        sa.Column("observaciones", sa.Text(), nullable=True),
        *_timestamps(updated=False),
    )
    op.create_index("ix_inventario_lote_id_inventario", "inventario_lote", ["id_inventario"])
    op.create_index("ix_inventario_lote_numero_lote", "inventario_lote", ["numero_lote"])

    op.create_table(
        "movimientos",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("tipo", movimiento_tipo_enum, nullable=False),
        sa.Column("fecha", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("referencia", sa.String(length=100), nullable=True),
        sa.Column("observaciones", sa.Text(), nullable=True),
        *_timestamps(updated=False),
    )
    op.create_table(
        "movimiento_detalles",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("id_movimiento", sa.Integer(), sa.ForeignKey("movimientos.id"), nullable=False),
        sa.Column("id_inventario", sa.Integer(), sa.ForeignKey("inventarios.id"), nullable=False),
        sa.Column("id_lote", sa.Integer(), sa.ForeignKey("inventario_lote.id"), nullable=False),
        sa.Column("direccion", movimiento_direccion_enum, nullable=False),
        sa.Column("cantidad", sa.Numeric(14, 4), nullable=False),
        sa.Column("costo_unitario", sa.Numeric(12, 4), nullable=False),
        sa.Column("costo_total", sa.Numeric(16, 4), nullable=False),
    )
    op.create_index("ix_movimiento_detalles_id_movimiento", "movimiento_detalles", ["id_movimiento"])
    op.create_index("ix_movimiento_detalles_id_inventario", "movimiento_detalles", ["id_inventario"])
    op.create_index("ix_movimiento_detalles_id_lote", "movimiento_detalles", ["id_lote"])

    # 최초 배포 당시 출고 라인 하나당 매출원가 기록은 하나뿐이었습니다. (0002 에서 완화)
    op.create_table(
        "detalle_salidas",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("id_movimiento_detalle", sa.Integer(), sa.ForeignKey("movimiento_detalles.id"), nullable=False),
        sa.Column("cantidad", sa.Numeric(14, 4), nullable=False),
        sa.Column("costo_unitario", sa.Numeric(12, 4), nullable=False),
        sa.Column("costo_total", sa.Numeric(16, 4), nullable=False),
        *_timestamps(updated=False),
        sa.UniqueConstraint("id_movimiento_detalle", name="uq_detalle_salidas_id_movimiento_detalle"),
    )


def downgrade() -> None:
    op.drop_table("detalle_salidas")
    op.drop_index("ix_movimiento_detalles_id_lote", table_name="movimiento_detalles")
    op.drop_index("ix_movimiento_detalles_id_inventario", table_name="movimiento_detalles")
    op.drop_index("ix_movimiento_detalles_id_movimiento", table_name="movimiento_detalles")
    op.drop_table("movimiento_detalles")
    op.drop_table("movimientos")
    op.drop_index("ix_inventario_lote_numero_lote", table_name="inventario_lote")
    op.drop_index("ix_inventario_lote_id_inventario", table_name="inventario_lote")
    op.drop_table("inventario_lote")
    op.drop_table("inventarios")
    op.drop_table("producto")
    op.drop_table("almacen")
    op.drop_table("categoria")

    # PostgreSQL 은 테이블을 지워도 enum 타입이 남습니다.
    bind = op.get_bind()
    movimiento_direccion_enum.drop(bind, checkfirst=True)
    movimiento_tipo_enum.drop(bind, checkfirst=True)
