# app/domains/prd/schemas.py

"""
'prd' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.

길이/필수값 등 업무 규칙은 validators.py 의 명시적 검증 함수가 담당하고,
여기서는 필드 타입과 문서화만 정의합니다.
"""

from typing import Optional
from datetime import datetime
from decimal import Decimal
from pydantic import Field
from sqlmodel import SQLModel

from app.domains.prd.models import CategoryType


# =============================================================================
# 1. categoria 테이블 스키마
# =============================================================================
class CategoryBase(SQLModel):
    name: str = Field(..., description="카테고리 명칭")
    description: Optional[str] = Field(None, description="카테고리 설명")
    type: CategoryType = Field(CategoryType.PRODUCT, description="카테고리 구분 (PRODUCTO | SERVICIO)")
    is_active: bool = Field(True, description="사용 여부")


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(SQLModel):
    name: Optional[str] = Field(None, description="카테고리 명칭")
    description: Optional[str] = Field(None, description="카테고리 설명")
    type: Optional[CategoryType] = Field(None, description="카테고리 구분 (PRODUCTO | SERVICIO)")
    is_active: Optional[bool] = Field(None, description="사용 여부")


class CategoryResponse(CategoryBase):
    id: int = Field(..., description="카테고리 고유 ID")
    created_at: Optional[datetime] = Field(None, description="레코드 생성 일시")
    updated_at: Optional[datetime] = Field(None, description="레코드 마지막 업데이트 일시")

    class Config:
        from_attributes = True


# =============================================================================
# 2. producto 테이블 스키마
# =============================================================================
class ProductBase(SQLModel):
    name: Optional[str] = Field(None, description="제품명")
    code: Optional[str] = Field(None, description="제품 코드 (고유)")
    description: str = Field(..., description="제품 설명")
    unit_of_measure: str = Field(..., description="단위 (UND, KG, L 등)")
    price: Decimal = Field(Decimal("0"), description="기준 판매 단가")
    minimum_stock: int = Field(0, description="최소 재고 수준")
    is_active: bool = Field(True, description="사용 여부")
    category_id: Optional[int] = Field(None, description="카테고리 ID")
    notes: Optional[str] = Field(None, description="비고")


class ProductCreate(ProductBase):
    pass


class ProductUpdate(SQLModel):
    name: Optional[str] = Field(None, description="제품명")
    code: Optional[str] = Field(None, description="제품 코드 (고유)")
    description: Optional[str] = Field(None, description="제품 설명")
    unit_of_measure: Optional[str] = Field(None, description="단위")
    price: Optional[Decimal] = Field(None, description="기준 판매 단가")
    minimum_stock: Optional[int] = Field(None, description="최소 재고 수준")
    is_active: Optional[bool] = Field(None, description="사용 여부")
    category_id: Optional[int] = Field(None, description="카테고리 ID")
    notes: Optional[str] = Field(None, description="비고")


class ProductResponse(ProductBase):
    id: int = Field(..., description="제품 고유 ID")
    created_at: Optional[datetime] = Field(None, description="레코드 생성 일시")
    updated_at: Optional[datetime] = Field(None, description="레코드 마지막 업데이트 일시")

    class Config:
        from_attributes = True
