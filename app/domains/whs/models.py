# app/domains/whs/models.py

"""
'whs' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import datetime, UTC

from sqlmodel import Field, SQLModel, Column
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP


# =============================================================================
# 1. almacen 테이블 모델
# =============================================================================
class WarehouseBase(SQLModel):
    name: str = Field(max_length=100, sa_column_kwargs={"name": "nombre"})
    location: str = Field(max_length=255, sa_column_kwargs={"name": "ubicacion"})
    description: Optional[str] = Field(default=None, max_length=255, sa_column_kwargs={"name": "descripcion"})
    max_capacity: Optional[int] = Field(default=None, sa_column_kwargs={"name": "capacidad_maxima"})
    manager: Optional[str] = Field(default=None, max_length=100, sa_column_kwargs={"name": "responsable"})
    phone: Optional[str] = Field(default=None, max_length=20, sa_column_kwargs={"name": "telefono"})
    is_active: bool = Field(default=True, sa_column_kwargs={"name": "estado"})


class Warehouse(WarehouseBase, table=True):
    __tablename__ = "almacen"

    id: Optional[int] = Field(default=None, primary_key=True)
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
