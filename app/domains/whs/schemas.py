# app/domains/whs/schemas.py

"""
'whs' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import datetime
from pydantic import Field
from sqlmodel import SQLModel


class WarehouseBase(SQLModel):
    name: str = Field(..., description="창고명")
    location: str = Field(..., description="창고 위치/주소")
    description: Optional[str] = Field(None, description="설명")
    max_capacity: Optional[int] = Field(None, description="최대 수용량")
    manager: Optional[str] = Field(None, description="담당자")
    phone: Optional[str] = Field(None, description="연락처")
    is_active: bool = Field(True, description="사용 여부")


class WarehouseCreate(WarehouseBase):
    pass


class WarehouseUpdate(SQLModel):
    name: Optional[str] = Field(None, description="창고명")
    location: Optional[str] = Field(None, description="창고 위치/주소")
    description: Optional[str] = Field(None, description="설명")
    max_capacity: Optional[int] = Field(None, description="최대 수용량")
    manager: Optional[str] = Field(None, description="담당자")
    phone: Optional[str] = Field(None, description="연락처")
    is_active: Optional[bool] = Field(None, description="사용 여부")


class WarehouseResponse(WarehouseBase):
    id: int = Field(..., description="창고 고유 ID")
    created_at: Optional[datetime] = Field(None, description="레코드 생성 일시")
    updated_at: Optional[datetime] = Field(None, description="레코드 마지막 업데이트 일시")

    class Config:
        from_attributes = True
