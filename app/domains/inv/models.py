# app/domains/inv/models.py

"""
'inv' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

- InventoryRecord (inventarios): (제품, 창고) 쌍별 재고 집계와 가중평균 단가
- Lot (inventario_lote): 입고 단위 로트. 현재 수량은 저장하지 않고 조회 시 계산합니다.
- Movement / MovementDetail: 재고 이동 헤더와 로트별 이동 라인
- StockOutDetail (detalle_salidas): 출고 라인별 매출원가 기록
"""

from typing import Optional, List
from datetime import datetime, date, UTC
from decimal import Decimal
from enum import Enum

from sqlmodel import Field, Relationship, SQLModel, Column
from sqlalchemy import Enum as SAEnum, Numeric, Text, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP, DATE

from app.core.enums import enum_values


# =============================================================================
# 열거형
# =============================================================================
class MovementType(str, Enum):
    STOCK_IN = "ENTRADA"
    STOCK_OUT = "SALIDA"
    ADJUSTMENT_IN = "AJUSTE_ENTRADA"
    ADJUSTMENT_OUT = "AJUSTE_SALIDA"


class MovementDirection(str, Enum):
    IN = "ENTRADA"
    OUT = "SALIDA"


class LotSelectionPolicy(str, Enum):
    """로트를 지정하지 않은 출고에서 로트를 소진하는 순서"""
    FIFO = "FIFO"  # 입고일 오름차순
    FEFO = "FEFO"  # 유통기한 오름차순 (유통기한 없는 로트는 마지막)
    LIFO = "LIFO"  # 입고일 내림차순


QUANTITY = Numeric(14, 4)
MONEY = Numeric(12, 4)
TOTAL = Numeric(16, 4)


# =============================================================================
# 1. inventarios 테이블 모델
# =============================================================================
class InventoryRecordBase(SQLModel):
    product_id: int = Field(foreign_key="producto.id", sa_column_kwargs={"name": "id_producto"})
    warehouse_id: int = Field(foreign_key="almacen.id", sa_column_kwargs={"name": "id_almacen"})


class InventoryRecord(InventoryRecordBase, table=True):
    __tablename__ = "inventarios"
    __table_args__ = (
        UniqueConstraint("id_producto", "id_almacen", name="uq_inventarios_producto_almacen"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    # 입고(ENTRADA)에서만 갱신됩니다. 출고/조정은 이 값을 바꾸지 않습니다.
    current_weighted_average_cost: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(
            "costo_promedio_actual", MONEY, nullable=False, server_default="0",
            comment="Costo promedio ponderado actual del inventario",
        ),
    )
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column("fecha_creacion", TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column("fecha_actualizacion", TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()),
        description="레코드 마지막 업데이트 일시"
    )


# =============================================================================
# 2. inventario_lote 테이블 모델
# =============================================================================
class Lot(SQLModel, table=True):
    """
    입고 단위 로트. cantidad_inicial 과 costo_unitario 는 생성 후 변경하지 않습니다.
    현재 수량 = cantidad_inicial - (해당 로트를 참조하는 출고 라인 수량 합계)
    """
    __tablename__ = "inventario_lote"

    id: Optional[int] = Field(default=None, primary_key=True)
    inventory_record_id: int = Field(
        foreign_key="inventarios.id", index=True, sa_column_kwargs={"name": "id_inventario"}
    )
    lot_number: str = Field(max_length=100, index=True, sa_column_kwargs={"name": "numero_lote"})
    received_date: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column("fecha_ingreso", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()),
    )
    initial_quantity: Decimal = Field(sa_column=Column("cantidad_inicial", QUANTITY, nullable=False))
    unit_cost: Decimal = Field(sa_column=Column("costo_unitario", MONEY, nullable=False))
    expiry_date: Optional[date] = Field(default=None, sa_column=Column("fecha_vencimiento", DATE))
    notes: Optional[str] = Field(default=None, sa_column=Column("observaciones", Text))
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column("fecha_creacion", TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )


# =============================================================================
# 3. movimientos 테이블 모델 (이동 헤더)
# =============================================================================
class Movement(SQLModel, table=True):
    __tablename__ = "movimientos"

    id: Optional[int] = Field(default=None, primary_key=True)
    type: MovementType = Field(
        sa_column=Column(
            "tipo",
            SAEnum(MovementType, name="movimiento_tipo_enum", values_callable=enum_values),
            nullable=False,
        )
    )
    movement_date: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column("fecha", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()),
    )
    reference: Optional[str] = Field(default=None, max_length=100, sa_column_kwargs={"name": "referencia"})
    notes: Optional[str] = Field(default=None, sa_column=Column("observaciones", Text))
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column("fecha_creacion", TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )

    details: List["MovementDetail"] = Relationship(
        back_populates="movement",
        sa_relationship_kwargs={"lazy": "selectin", "order_by": "MovementDetail.id"},
    )


# =============================================================================
# 4. movimiento_detalles 테이블 모델 (로트별 이동 라인)
# =============================================================================
class MovementDetail(SQLModel, table=True):
    __tablename__ = "movimiento_detalles"

    id: Optional[int] = Field(default=None, primary_key=True)
    movement_id: int = Field(
        foreign_key="movimientos.id", index=True, sa_column_kwargs={"name": "id_movimiento"}
    )
    inventory_record_id: int = Field(
        foreign_key="inventarios.id", index=True, sa_column_kwargs={"name": "id_inventario"}
    )
    # 여러 라인이 같은 로트를 참조할 수 있으므로 유일성 없이 인덱스만 둡니다.
    lot_id: int = Field(foreign_key="inventario_lote.id", index=True, sa_column_kwargs={"name": "id_lote"})
    direction: MovementDirection = Field(
        sa_column=Column(
            "direccion",
            SAEnum(MovementDirection, name="movimiento_direccion_enum", values_callable=enum_values),
            nullable=False,
        )
    )
    quantity: Decimal = Field(sa_column=Column("cantidad", QUANTITY, nullable=False))
    unit_cost: Decimal = Field(sa_column=Column("costo_unitario", MONEY, nullable=False))
    total_cost: Decimal = Field(sa_column=Column("costo_total", TOTAL, nullable=False))

    movement: Optional[Movement] = Relationship(back_populates="details")


# =============================================================================
# 5. detalle_salidas 테이블 모델 (출고 매출원가)
# =============================================================================
class StockOutDetail(SQLModel, table=True):
    """
    출고 라인(MovementDetail) 하나에 대한 매출원가 기록.
    id_movimiento_detalle 는 유일하지 않은 인덱스만 가지므로
    같은 라인을 여러 행이 참조할 수 있습니다.
    """
    __tablename__ = "detalle_salidas"

    id: Optional[int] = Field(default=None, primary_key=True)
    movement_detail_id: int = Field(
        foreign_key="movimiento_detalles.id", index=True, sa_column_kwargs={"name": "id_movimiento_detalle"}
    )
    quantity: Decimal = Field(sa_column=Column("cantidad", QUANTITY, nullable=False))
    unit_cost: Decimal = Field(sa_column=Column("costo_unitario", MONEY, nullable=False))
    total_cost: Decimal = Field(sa_column=Column("costo_total", TOTAL, nullable=False))
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column("fecha_creacion", TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )
