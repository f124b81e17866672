# app/core/validation.py

"""
요청 데이터 검증 결과를 표현하는 공용 유틸리티입니다.

각 도메인의 validators 모듈은 데코레이터 대신 순수 함수로 검증을 수행하고
ValidationResult 를 반환합니다. 라우터는 ensure_valid() 로 결과를 확인합니다.
"""

from decimal import Decimal
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from app.core.exceptions import RequestValidationFailed


class ValidationResult(BaseModel):
    """성공(ok=True) 또는 실패 사유 목록(reasons)을 담는 결과 객체"""

    model_config = ConfigDict(frozen=True)

    ok: bool
    reasons: List[str] = Field(default_factory=list)

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, reasons: List[str]) -> "ValidationResult":
        return cls(ok=False, reasons=list(reasons))

    @classmethod
    def from_reasons(cls, reasons: List[str]) -> "ValidationResult":
        return cls.failure(reasons) if reasons else cls.success()


def ensure_valid(result: ValidationResult) -> None:
    """검증 실패 시 RequestValidationFailed(422)를 발생시킵니다."""
    if not result.ok:
        raise RequestValidationFailed(result.reasons)


# =============================================================================
# 개별 규칙 헬퍼 (실패 시 사유 문자열, 성공 시 None)
# =============================================================================
def check_required_text(name: str, value: Optional[str], max_length: int) -> Optional[str]:
    if value is None or not value.strip():
        return f"{name} is required."
    if len(value) > max_length:
        return f"{name} must be at most {max_length} characters."
    return None


def check_optional_text(name: str, value: Optional[str], max_length: int) -> Optional[str]:
    if value is not None and len(value) > max_length:
        return f"{name} must be at most {max_length} characters."
    return None


def check_non_negative(name: str, value: Optional[Decimal]) -> Optional[str]:
    if value is not None and value < 0:
        return f"{name} must not be negative."
    return None


def check_positive(name: str, value: Optional[Union[int, Decimal]]) -> Optional[str]:
    if value is not None and value <= 0:
        return f"{name} must be greater than zero."
    return None


def collect(*checks: Optional[str]) -> ValidationResult:
    """개별 규칙 결과를 모아 ValidationResult 로 만듭니다."""
    return ValidationResult.from_reasons([reason for reason in checks if reason])
