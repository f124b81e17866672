# app/domains/inv/validators.py

"""
'inv' 도메인 이동 요청에 대한 명시적 검증 함수입니다.

수량(> 0)과 단가(>= 0) 규칙은 valuation.validate_inbound / validate_outbound 가
도메인 예외(InvalidMovementQuantity, InvalidCost)로 처리하므로,
여기서는 그 외의 형식 규칙과 필드 간 규칙만 확인합니다.
"""

from datetime import date
from typing import Optional

from app.core.validation import ValidationResult, check_optional_text, collect
from app.domains.inv import schemas as inv_schemas
from app.domains.inv.models import MovementDirection


def _check_expiry_after_receipt(request: inv_schemas.StockInRequest) -> Optional[str]:
    if request.expiry_date is None:
        return None
    received = request.received_date.date() if request.received_date else date.today()
    if request.expiry_date <= received:
        return "expiry_date must be later than received_date."
    return None


def validate_stock_in(request: inv_schemas.StockInRequest) -> ValidationResult:
    return collect(
        check_optional_text("lot_number", request.lot_number, 100),
        check_optional_text("reference", request.reference, 100),
        _check_expiry_after_receipt(request),
    )


def validate_stock_out(request: inv_schemas.StockOutRequest) -> ValidationResult:
    return collect(check_optional_text("reference", request.reference, 100))


def validate_adjustment(request: inv_schemas.AdjustmentRequest) -> ValidationResult:
    inbound = request.direction == MovementDirection.IN
    return collect(
        check_optional_text("lot_number", request.lot_number, 100),
        check_optional_text("reference", request.reference, 100),
        "lot_id applies only to outbound adjustments." if inbound and request.lot_id is not None else None,
        "lot_number and expiry_date apply only to inbound adjustments."
        if not inbound and (request.lot_number or request.expiry_date) else None,
        # 조정은 사유 기록이 필수입니다.
        "notes is required for adjustments." if not (request.notes and request.notes.strip()) else None,
    )


def validate_date_range(date_from: Optional[date], date_to: Optional[date]) -> ValidationResult:
    return collect(
        "date_from must not be later than date_to."
        if date_from is not None and date_to is not None and date_from > date_to else None
    )
