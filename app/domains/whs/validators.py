# app/domains/whs/validators.py

from app.core.validation import (
    ValidationResult,
    check_optional_text,
    check_positive,
    check_required_text,
    collect,
)
from app.domains.whs import schemas as whs_schemas


def validate_warehouse_create(data: whs_schemas.WarehouseCreate) -> ValidationResult:
    return collect(
        check_required_text("name", data.name, 100),
        check_required_text("location", data.location, 255),
        check_optional_text("description", data.description, 255),
        check_optional_text("manager", data.manager, 100),
        check_optional_text("phone", data.phone, 20),
        check_positive("max_capacity", data.max_capacity),
    )


def validate_warehouse_update(data: whs_schemas.WarehouseUpdate) -> ValidationResult:
    fields = data.model_fields_set
    return collect(
        check_required_text("name", data.name, 100) if "name" in fields else None,
        check_required_text("location", data.location, 255) if "location" in fields else None,
        check_optional_text("description", data.description, 255),
        check_optional_text("manager", data.manager, 100),
        check_optional_text("phone", data.phone, 20),
        check_positive("max_capacity", data.max_capacity),
    )
