# app/core/exceptions.py

"""
재고 도메인의 예외 계층을 정의하는 모듈입니다.

모든 예외는 InventoryError 를 상속하며, 라우터 밖(main.py)에 등록된
예외 핸들러가 status_code 와 메시지를 JSON 응답으로 변환합니다.
"""

from typing import List, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse


class InventoryError(Exception):
    """재고 도메인 예외의 기본 클래스"""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


# =============================================================================
# 입력값 오류 (422)
# =============================================================================
class InvalidMovementQuantity(InventoryError):
    """이동 수량이 0 이하인 경우"""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class InvalidCost(InventoryError):
    """단가가 음수인 경우"""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class RequestValidationFailed(InventoryError):
    """명시적 검증 함수가 실패 사유 목록을 반환한 경우"""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

    def __init__(self, reasons: List[str]):
        super().__init__("; ".join(reasons) or "Validation failed.")
        self.reasons = list(reasons)


# =============================================================================
# 조회/상태 오류 (404, 409)
# =============================================================================
class NotFoundError(InventoryError):
    status_code = status.HTTP_404_NOT_FOUND


class InsufficientLotQuantity(InventoryError):
    """로트(또는 로트 합계)의 가용 수량이 요청 수량보다 적은 경우"""

    status_code = status.HTTP_409_CONFLICT


class ResourceInUse(InventoryError):
    """다른 레코드가 참조 중이라 삭제할 수 없는 경우"""

    status_code = status.HTTP_409_CONFLICT


class InventoryRecordInUse(ResourceInUse):
    """로트를 보유한 재고 레코드는 삭제할 수 없습니다."""


class ConstraintViolation(InventoryError):
    """
    스키마 제약을 복원할 수 없는 경우 (예: 중복 행이 있는 상태에서
    detalle_salidas 유일성 제약을 되돌리는 마이그레이션 downgrade).
    """

    status_code = status.HTTP_409_CONFLICT


# =============================================================================
# FastAPI 예외 핸들러
# =============================================================================
async def inventory_error_handler(request: Request, exc: InventoryError) -> JSONResponse:
    """InventoryError 계열 예외를 일관된 JSON 본문으로 변환합니다."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.message,
            "error": type(exc).__name__,
            "reasons": getattr(exc, "reasons", []),
        },
    )
