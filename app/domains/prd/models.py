# app/domains/prd/models.py

"""
'prd' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

테이블/컬럼 이름은 운영 데이터베이스의 스페인어 명칭을 유지하고,
파이썬 속성 이름은 영문을 사용합니다. (sa_column_kwargs 의 name 으로 매핑)
"""

from typing import Optional
from datetime import datetime, UTC
from decimal import Decimal
from enum import Enum

from sqlmodel import Field, SQLModel, Column
from sqlalchemy import Enum as SAEnum, Numeric, Text
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP

from app.core.enums import enum_values


class CategoryType(str, Enum):
    """카테고리 구분. DB 에는 값(PRODUCTO/SERVICIO)으로 저장됩니다."""
    PRODUCT = "PRODUCTO"
    SERVICE = "SERVICIO"


# 마이그레이션(0005)에서도 같은 이름의 타입을 사용합니다.
CATEGORY_TYPE_ENUM_NAME = "categoria_tipo_enum"


# =============================================================================
# 1. categoria 테이블 모델
# =============================================================================
class CategoryBase(SQLModel):
    name: str = Field(max_length=100, sa_column_kwargs={"name": "nombre"})
    description: Optional[str] = Field(default=None, max_length=255, sa_column_kwargs={"name": "descripcion"})
    is_active: bool = Field(default=True, sa_column_kwargs={"name": "estado"})


class Category(CategoryBase, table=True):
    __tablename__ = "categoria"

    id: Optional[int] = Field(default=None, primary_key=True)
    type: CategoryType = Field(
        default=CategoryType.PRODUCT,
        sa_column=Column(
            "tipo",
            SAEnum(CategoryType, name=CATEGORY_TYPE_ENUM_NAME, values_callable=enum_values),
            nullable=False,
            server_default=CategoryType.PRODUCT.value,
        ),
        description="카테고리 구분 (PRODUCTO | SERVICIO)"
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
# 2. producto 테이블 모델
# =============================================================================
class ProductBase(SQLModel):
    # nombre 는 최초 배포 이후 마이그레이션(0004)으로 추가되어 NULL 을 허용합니다.
    name: Optional[str] = Field(default=None, max_length=255, sa_column_kwargs={"name": "nombre"})
    code: Optional[str] = Field(default=None, max_length=50, unique=True, sa_column_kwargs={"name": "codigo"})
    description: str = Field(max_length=255, sa_column_kwargs={"name": "descripcion"})
    unit_of_measure: str = Field(max_length=20, sa_column_kwargs={"name": "unidad_medida"}, description="UND, KG, L 등")
    minimum_stock: int = Field(default=0, sa_column_kwargs={"name": "stock_minimo"})
    is_active: bool = Field(default=True, sa_column_kwargs={"name": "estado"})
    category_id: Optional[int] = Field(
        default=None, foreign_key="categoria.id", sa_column_kwargs={"name": "id_categoria"}
    )


class Product(ProductBase, table=True):
    __tablename__ = "producto"

    id: Optional[int] = Field(default=None, primary_key=True)
    price: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column("precio", Numeric(12, 2), nullable=False, server_default="0"),
        description="기준 판매 단가"
    )
    notes: Optional[str] = Field(default=None, sa_column=Column("observaciones", Text))
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
