# app/domains/inv/valuation.py

"""
재고 평가와 로트 수량 계산을 위한 순수 함수 모음입니다.

데이터베이스 세션에 의존하지 않으므로 crud.py 의 트랜잭션 로직과
단위 테스트에서 그대로 사용합니다.
"""

import logging
from datetime import date, datetime, UTC
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

from app.core.exceptions import (
    InsufficientLotQuantity,
    InvalidCost,
    InvalidMovementQuantity,
    NotFoundError,
)
from app.domains.inv.models import Lot, LotSelectionPolicy, MovementDirection, MovementType

logger = logging.getLogger(__name__)

COST_QUANTUM = Decimal("0.0001")  # DECIMAL(12,4)
ZERO = Decimal("0")

# 컬럼 정밀도별 상한 (정수부 자릿수 = 전체 자릿수 - 4)
MAX_QUANTITY = Decimal("1e10")  # NUMERIC(14,4)
MAX_COST = Decimal("1e8")       # NUMERIC(12,4)
MAX_TOTAL = Decimal("1e12")     # NUMERIC(16,4)


def quantize_cost(value: Decimal) -> Decimal:
    """단가/금액을 소수점 4자리로 반올림(half-up)합니다."""
    return Decimal(value).quantize(COST_QUANTUM, rounding=ROUND_HALF_UP)


def stock_value(quantity: Decimal, average_cost: Decimal) -> Decimal:
    """재고 금액 = 수량 × 평균 단가"""
    return quantize_cost(Decimal(quantity) * Decimal(average_cost))


def _fits_column(value: Decimal, limit: Decimal) -> bool:
    # 반올림 없이 소수점 4자리 컬럼에 그대로 저장될 수 있는 값인지
    if abs(value) >= limit:
        return False
    return value == value.quantize(COST_QUANTUM)


def _check_quantity(quantity: Decimal) -> Decimal:
    quantity = None if quantity is None else Decimal(quantity)
    if quantity is None or not quantity.is_finite() or quantity <= 0:
        raise InvalidMovementQuantity(f"Movement quantity must be greater than zero (got {quantity}).")
    if not _fits_column(quantity, MAX_QUANTITY):
        raise InvalidMovementQuantity(
            f"Movement quantity must have at most 4 decimal places and be below {MAX_QUANTITY:f} (got {quantity})."
        )
    return quantity


def validate_inbound(quantity: Decimal, unit_cost: Decimal) -> None:
    """
    입고 수량과 단가를 검증합니다. 어떤 행도 변경하기 전에 호출해야 합니다.
    컬럼에 저장될 때 반올림되거나 정밀도를 넘는 값도 거부합니다.
    """
    quantity = _check_quantity(quantity)
    unit_cost = None if unit_cost is None else Decimal(unit_cost)
    if unit_cost is None or not unit_cost.is_finite() or unit_cost < 0:
        raise InvalidCost(f"Unit cost must not be negative (got {unit_cost}).")
    if not _fits_column(unit_cost, MAX_COST):
        raise InvalidCost(
            f"Unit cost must have at most 4 decimal places and be below {MAX_COST:f} (got {unit_cost})."
        )
    if quantity * unit_cost >= MAX_TOTAL:
        raise InvalidCost(f"Line total {quantity * unit_cost} exceeds the storable maximum {MAX_TOTAL:f}.")


def validate_outbound(quantity: Decimal) -> None:
    _check_quantity(quantity)


# =============================================================================
# 1. 가중평균 단가 재계산
# =============================================================================
def recalculate_weighted_average(
    received_quantity: Decimal,
    current_average: Decimal,
    quantity: Decimal,
    unit_cost: Decimal,
) -> Decimal:
    """
    입고 한 건을 반영한 새 가중평균 단가를 계산합니다.

        A_new = (Q_old * A_old + q * c) / (Q_old + q)

    Q_old 는 지금까지 입고(ENTRADA)된 누적 수량입니다. 출고는 평균 단가를
    바꾸지 않으므로, 결과는 항상 (입고 금액 합계 / 입고 수량 합계) 와 같습니다.
    분모가 0 이하가 되는 경우는 기존 평균을 그대로 반환합니다.
    """
    validate_inbound(quantity, unit_cost)

    received_quantity = Decimal(received_quantity or 0)
    current_average = Decimal(current_average or 0)
    total_quantity = received_quantity + quantity

    if total_quantity <= 0:
        logger.warning(
            "Weighted average not recalculated: non-positive total quantity %s (Q_old=%s, q=%s)",
            total_quantity, received_quantity, quantity,
        )
        return quantize_cost(current_average)

    new_average = (received_quantity * current_average + quantity * unit_cost) / total_quantity
    return quantize_cost(new_average)


# =============================================================================
# 2. 로트 현재 수량
# =============================================================================
def derive_current_quantity(lot: Lot, details: Iterable) -> Decimal:
    """
    로트의 현재 수량 = 초기 수량 - (이 로트를 참조하는 출고 라인 수량 합계)

    details 는 MovementDetail 과 같은 속성(lot_id, direction, quantity)을 가진
    객체의 iterable 이며, 다른 로트나 입고 라인은 무시됩니다.
    """
    issued = sum(
        (
            Decimal(detail.quantity)
            for detail in details
            if detail.lot_id == lot.id and detail.direction == MovementDirection.OUT
        ),
        ZERO,
    )
    return Decimal(lot.initial_quantity) - issued


# =============================================================================
# 3. 출고 로트 할당
# =============================================================================
class LotAllocation(NamedTuple):
    lot: Lot
    quantity: Decimal


def _utc_naive(value: Optional[datetime]) -> datetime:
    # SQLite 는 tz 정보 없이, PostgreSQL 은 tz 포함으로 돌려주므로 UTC 기준으로 맞춥니다.
    if value is None:
        return datetime.min
    if value.tzinfo is not None:
        return value.astimezone(UTC).replace(tzinfo=None)
    return value


def sort_lots(lots: Iterable[Lot], policy: LotSelectionPolicy) -> List[Lot]:
    """정책에 따른 로트 소진 순서를 반환합니다."""
    if policy == LotSelectionPolicy.FEFO:
        return sorted(
            lots,
            key=lambda lot: (
                lot.expiry_date is None,
                lot.expiry_date or date.max,
                _utc_naive(lot.received_date),
                lot.id,
            ),
        )
    if policy == LotSelectionPolicy.LIFO:
        return sorted(lots, key=lambda lot: (_utc_naive(lot.received_date), lot.id), reverse=True)
    return sorted(lots, key=lambda lot: (_utc_naive(lot.received_date), lot.id))


def allocate_lots(
    candidates: Sequence[Tuple[Lot, Decimal]],
    quantity: Decimal,
    policy: LotSelectionPolicy = LotSelectionPolicy.FIFO,
    lot_id: Optional[int] = None,
) -> List[LotAllocation]:
    """
    출고 수량을 로트별로 나눕니다.

    candidates 는 (로트, 현재 수량) 쌍입니다. lot_id 가 주어지면 해당 로트에서만
    출고하며, 부족하면 InsufficientLotQuantity 를 발생시킵니다. 주어지지 않으면
    정책 순서대로 여러 로트에서 나누어 출고합니다.
    """
    validate_outbound(quantity)
    available = {lot.id: Decimal(qty) for lot, qty in candidates}

    if lot_id is not None:
        lot = next((lot for lot, _ in candidates if lot.id == lot_id), None)
        if lot is None:
            raise NotFoundError(f"Lot {lot_id} not found for this inventory record.")
        if available[lot_id] < quantity:
            raise InsufficientLotQuantity(
                f"Lot {lot.lot_number} has {available[lot_id]} available, {quantity} requested."
            )
        return [LotAllocation(lot, quantity)]

    total_available = sum(available.values(), ZERO)
    if total_available < quantity:
        raise InsufficientLotQuantity(
            f"Only {total_available} available across lots, {quantity} requested."
        )

    allocations: List[LotAllocation] = []
    remaining = quantity
    for lot in sort_lots((lot for lot, _ in candidates), policy):
        if remaining <= 0:
            break
        on_hand = available[lot.id]
        if on_hand <= 0:
            continue
        drawn = min(on_hand, remaining)
        allocations.append(LotAllocation(lot, drawn))
        remaining -= drawn
    return allocations


# =============================================================================
# 4. 수불부(Kardex) 잔량
# =============================================================================
class KardexBalance(NamedTuple):
    balance: Decimal
    average_cost: Decimal
    balance_value: Decimal


def valued_running_balance(
    entries: Iterable[Tuple[MovementType, MovementDirection, Decimal, Decimal]],
) -> List[KardexBalance]:
    """
    시간순 (전표 유형, 방향, 수량, 단가) 목록에 대해 라인별 누적 잔량,
    그 시점의 가중평균 단가, 재고 금액(잔량 × 평균 단가)을 계산합니다.

    평균 단가는 입고(ENTRADA) 라인에서만 다시 계산되므로, 마지막 라인의
    평균은 재고 레코드의 costo_promedio_actual 과 같습니다.
    """
    balance = ZERO
    received = ZERO
    average = ZERO
    lines: List[KardexBalance] = []
    for movement_type, direction, quantity, unit_cost in entries:
        quantity = Decimal(quantity)
        if direction == MovementDirection.IN:
            balance += quantity
            if movement_type == MovementType.STOCK_IN:
                average = recalculate_weighted_average(received, average, quantity, Decimal(unit_cost))
                received += quantity
        else:
            balance -= quantity
        lines.append(KardexBalance(balance, average, stock_value(balance, average)))
    return lines
