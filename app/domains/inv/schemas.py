# app/domains/inv/schemas.py

"""
'inv' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.

수량/단가의 업무 규칙(양수, 음수 불가)은 validators.py 와 valuation.py 에서
검증하므로 여기서는 제약을 두지 않습니다.
"""

from typing import Optional, List
from datetime import datetime, date
from decimal import Decimal
from pydantic import Field
from sqlmodel import SQLModel

from app.domains.inv.models import MovementDirection, MovementType


# =============================================================================
# 1. inventarios 스키마
# =============================================================================
class InventoryRecordResponse(SQLModel):
    id: int = Field(..., description="재고 레코드 고유 ID")
    product_id: int = Field(..., description="제품 ID")
    warehouse_id: int = Field(..., description="창고 ID")
    current_weighted_average_cost: Decimal = Field(..., description="현재 가중평균 단가 (소수점 4자리)")
    quantity_on_hand: Decimal = Field(Decimal("0"), description="현재 보유 수량 (로트 현재 수량 합계)")
    total_value: Decimal = Field(Decimal("0"), description="재고 금액 (보유 수량 × 가중평균 단가)")
    created_at: Optional[datetime] = Field(None, description="레코드 생성 일시")
    updated_at: Optional[datetime] = Field(None, description="레코드 마지막 업데이트 일시")

    class Config:
        from_attributes = True


# =============================================================================
# 2. inventario_lote 스키마
# =============================================================================
class LotResponse(SQLModel):
    id: int = Field(..., description="로트 고유 ID")
    inventory_record_id: int = Field(..., description="재고 레코드 ID")
    lot_number: str = Field(..., description="로트 번호")
    received_date: datetime = Field(..., description="입고 일시")
    initial_quantity: Decimal = Field(..., description="입고 수량 (변경 불가)")
    current_quantity: Decimal = Field(..., description="현재 수량 (출고 라인으로부터 계산)")
    unit_cost: Decimal = Field(..., description="입고 단가 (변경 불가)")
    expiry_date: Optional[date] = Field(None, description="유통기한")
    notes: Optional[str] = Field(None, description="비고")

    class Config:
        from_attributes = True


# =============================================================================
# 3. 이동 요청 스키마
# =============================================================================
class StockInRequest(SQLModel):
    product_id: int = Field(..., description="제품 ID")
    warehouse_id: int = Field(..., description="창고 ID")
    quantity: Decimal = Field(..., description="입고 수량 (> 0)")
    unit_cost: Decimal = Field(..., description="입고 단가 (>= 0)")
    lot_number: Optional[str] = Field(None, description="로트 번호. 생략 시 자동 생성")
    received_date: Optional[datetime] = Field(None, description="입고 일시. 생략 시 현재 시각")
    expiry_date: Optional[date] = Field(None, description="유통기한")
    reference: Optional[str] = Field(None, description="참조 번호 (구매 문서 등)")
    notes: Optional[str] = Field(None, description="비고")


class StockOutRequest(SQLModel):
    product_id: int = Field(..., description="제품 ID")
    warehouse_id: int = Field(..., description="창고 ID")
    quantity: Decimal = Field(..., description="출고 수량 (> 0)")
    lot_id: Optional[int] = Field(None, description="출고할 로트 ID. 생략 시 선택 정책 적용")
    reference: Optional[str] = Field(None, description="참조 번호 (판매 문서 등)")
    notes: Optional[str] = Field(None, description="비고")


class AdjustmentRequest(SQLModel):
    product_id: int = Field(..., description="제품 ID")
    warehouse_id: int = Field(..., description="창고 ID")
    direction: MovementDirection = Field(..., description="조정 방향 (ENTRADA | SALIDA)")
    quantity: Decimal = Field(..., description="조정 수량 (> 0)")
    lot_id: Optional[int] = Field(None, description="감소 조정 시 대상 로트 ID")
    lot_number: Optional[str] = Field(None, description="증가 조정 시 로트 번호")
    expiry_date: Optional[date] = Field(None, description="증가 조정 시 유통기한")
    reference: Optional[str] = Field(None, description="참조 번호 (실사 문서 등)")
    notes: Optional[str] = Field(None, description="조정 사유")


# =============================================================================
# 4. 이동 응답 스키마
# =============================================================================
class MovementDetailResponse(SQLModel):
    id: int
    movement_id: int
    inventory_record_id: int
    lot_id: int
    direction: MovementDirection
    quantity: Decimal
    unit_cost: Decimal
    total_cost: Decimal

    class Config:
        from_attributes = True


class StockOutDetailResponse(SQLModel):
    id: int
    movement_detail_id: int
    quantity: Decimal
    unit_cost: Decimal = Field(..., description="출고 시점의 가중평균 단가")
    total_cost: Decimal

    class Config:
        from_attributes = True


class MovementResponse(SQLModel):
    id: int = Field(..., description="이동 고유 ID")
    type: MovementType = Field(..., description="이동 유형")
    movement_date: datetime = Field(..., description="이동 일시")
    reference: Optional[str] = None
    notes: Optional[str] = None
    details: List[MovementDetailResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True


class StockInResponse(SQLModel):
    movement: MovementResponse
    lot: LotResponse
    inventory: InventoryRecordResponse


class StockOutResponse(SQLModel):
    movement: MovementResponse
    inventory: InventoryRecordResponse
    stock_out_details: List[StockOutDetailResponse] = Field(default_factory=list)


class AdjustmentResponse(SQLModel):
    movement: MovementResponse
    inventory: InventoryRecordResponse
    lot: Optional[LotResponse] = None


# =============================================================================
# 5. 수불부(Kardex)
# =============================================================================
class KardexEntry(SQLModel):
    movement_id: int
    movement_type: MovementType
    movement_date: datetime
    movement_detail_id: int
    lot_id: int
    direction: MovementDirection
    quantity: Decimal
    unit_cost: Decimal
    total_cost: Decimal
    balance: Decimal = Field(..., description="해당 라인 반영 후 잔량")
    average_cost: Decimal = Field(..., description="해당 라인 반영 후 가중평균 단가")
    balance_value: Decimal = Field(..., description="해당 라인 반영 후 재고 금액 (잔량 × 평균 단가)")


# =============================================================================
# 6. 재고 평가 보고서
# =============================================================================
class ValuationReport(SQLModel):
    records: List[InventoryRecordResponse] = Field(default_factory=list, description="재고 레코드별 평가")
    total_quantity: Decimal = Field(Decimal("0"), description="보유 수량 합계")
    total_value: Decimal = Field(Decimal("0"), description="재고 금액 합계")
