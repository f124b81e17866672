# tests/test_validation.py

"""
명시적 검증 함수(app.core.validation 및 도메인 validators) 단위 테스트 모듈입니다.
"""

from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from app.core.exceptions import RequestValidationFailed
from app.core.validation import ValidationResult, check_positive, collect, ensure_valid
from app.domains.inv import schemas as inv_schemas
from app.domains.inv import validators as inv_validators
from app.domains.prd import schemas as prd_schemas
from app.domains.prd import validators as prd_validators
from app.domains.whs import schemas as whs_schemas
from app.domains.whs import validators as whs_validators


def test_collect_success_and_failure():
    assert collect(None, None) == ValidationResult.success()

    result = collect(None, "a is required.", "b is too long.")
    assert result.ok is False
    assert result.reasons == ["a is required.", "b is too long."]


def test_ensure_valid_raises_with_reasons():
    """(실패) 실패 결과는 사유 목록을 가진 RequestValidationFailed 로 변환되는지 테스트"""
    with pytest.raises(RequestValidationFailed) as exc_info:
        ensure_valid(ValidationResult.failure(["name is required."]))

    assert exc_info.value.status_code == 422
    assert exc_info.value.reasons == ["name is required."]


def test_category_name_too_long():
    result = prd_validators.validate_category_create(prd_schemas.CategoryCreate(name="x" * 101))

    assert result.reasons == ["name must be at most 100 characters."]


def test_category_update_without_type_is_valid():
    """(성공) tipo 를 보내지 않은 부분 업데이트는 유효한지 테스트"""
    result = prd_validators.validate_category_update(prd_schemas.CategoryUpdate(description="Nueva"))

    assert result.ok


def test_product_negative_minimum_stock():
    data = prd_schemas.ProductCreate(description="Sal", unit_of_measure="KG", minimum_stock=-1)

    assert prd_validators.validate_product_create(data).reasons == ["minimum_stock must not be negative."]


def test_product_update_price_zero_allowed():
    assert prd_validators.validate_product_update(prd_schemas.ProductUpdate(price=Decimal("0"))).ok


def test_warehouse_requires_location():
    result = whs_validators.validate_warehouse_create(whs_schemas.WarehouseCreate(name="Norte", location=" "))

    assert result.reasons == ["location is required."]


def test_stock_in_expiry_defaults_to_today():
    """(실패) 입고일이 없으면 오늘을 기준으로 유통기한을 검사하는지 테스트"""
    request = inv_schemas.StockInRequest(
        product_id=1, warehouse_id=1, quantity=Decimal("1"), unit_cost=Decimal("1"),
        expiry_date=date.today(),
    )

    assert inv_validators.validate_stock_in(request).reasons == ["expiry_date must be later than received_date."]


def test_stock_in_expiry_after_received_date():
    request = inv_schemas.StockInRequest(
        product_id=1, warehouse_id=1, quantity=Decimal("1"), unit_cost=Decimal("1"),
        received_date=datetime(2024, 1, 1, 9, 0), expiry_date=date(2024, 1, 1) + timedelta(days=1),
    )

    assert inv_validators.validate_stock_in(request).ok


def test_adjustment_field_rules():
    """(실패) 방향에 맞지 않는 필드를 보낸 조정 요청이 거부되는지 테스트"""
    inbound = inv_schemas.AdjustmentRequest(
        product_id=1, warehouse_id=1, direction="ENTRADA", quantity=Decimal("1"), lot_id=3, notes="x",
    )
    outbound = inv_schemas.AdjustmentRequest(
        product_id=1, warehouse_id=1, direction="SALIDA", quantity=Decimal("1"), lot_number="L-1", notes="x",
    )

    assert inv_validators.validate_adjustment(inbound).reasons == ["lot_id applies only to outbound adjustments."]
    assert inv_validators.validate_adjustment(outbound).reasons == [
        "lot_number and expiry_date apply only to inbound adjustments."
    ]


def test_check_positive():
    assert check_positive("max_capacity", None) is None
    assert check_positive("max_capacity", 1) is None
    assert check_positive("max_capacity", 0) == "max_capacity must be greater than zero."


def test_warehouse_update_rejects_negative_capacity():
    result = whs_validators.validate_warehouse_update(whs_schemas.WarehouseUpdate(max_capacity=-5))

    assert result.reasons == ["max_capacity must be greater than zero."]


def test_kardex_date_range():
    """(실패) 시작일이 종료일보다 늦으면 거부되는지 테스트"""
    assert inv_validators.validate_date_range(None, date(2024, 1, 1)).ok
    assert inv_validators.validate_date_range(date(2024, 1, 1), date(2024, 1, 1)).ok
    assert inv_validators.validate_date_range(date(2024, 1, 2), date(2024, 1, 1)).reasons == [
        "date_from must not be later than date_to."
    ]
