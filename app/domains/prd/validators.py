# app/domains/prd/validators.py

"""
'prd' 도메인 요청 데이터에 대한 명시적 검증 함수입니다.
각 함수는 ValidationResult 를 반환하며 예외를 던지지 않습니다.
"""

from typing import Optional

from app.core.validation import (
    ValidationResult,
    check_non_negative,
    check_optional_text,
    check_required_text,
    collect,
)
from app.domains.prd import schemas as prd_schemas
from app.domains.prd.models import CategoryType


def _check_category_type(value) -> Optional[str]:
    allowed = [member.value for member in CategoryType]
    if value is not None and getattr(value, "value", value) not in allowed:
        return f"type must be one of {allowed}."
    return None


def validate_category_create(data: prd_schemas.CategoryCreate) -> ValidationResult:
    return collect(
        check_required_text("name", data.name, 100),
        check_optional_text("description", data.description, 255),
        _check_category_type(data.type),
    )


def validate_category_update(data: prd_schemas.CategoryUpdate) -> ValidationResult:
    fields = data.model_fields_set
    return collect(
        check_required_text("name", data.name, 100) if "name" in fields else None,
        check_optional_text("description", data.description, 255),
        # 명시적으로 null 을 보낸 경우도 거부합니다.
        "type must not be null." if "type" in fields and data.type is None else None,
        _check_category_type(data.type),
    )


def validate_product_create(data: prd_schemas.ProductCreate) -> ValidationResult:
    return collect(
        check_optional_text("name", data.name, 255),
        check_optional_text("code", data.code, 50),
        check_required_text("description", data.description, 255),
        check_required_text("unit_of_measure", data.unit_of_measure, 20),
        check_non_negative("price", data.price),
        "minimum_stock must not be negative." if data.minimum_stock < 0 else None,
    )


def validate_product_update(data: prd_schemas.ProductUpdate) -> ValidationResult:
    fields = data.model_fields_set
    return collect(
        check_optional_text("name", data.name, 255),
        check_optional_text("code", data.code, 50),
        check_required_text("description", data.description, 255) if "description" in fields else None,
        check_required_text("unit_of_measure", data.unit_of_measure, 20) if "unit_of_measure" in fields else None,
        check_non_negative("price", data.price),
        "minimum_stock must not be negative."
        if data.minimum_stock is not None and data.minimum_stock < 0 else None,
    )
