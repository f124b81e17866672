# app/domains/inv/crud.py

"""
'inv' 도메인의 CRUD 작업과 재고 이동 로직을 정의하는 모듈입니다.

- 입고(stock_in): 로트 생성 + 가중평균 단가 재계산
- 출고(stock_out): 로트 소진 + 매출원가(detalle_salidas) 기록, 평균 단가 불변
- 조정(adjust): 평균 단가를 바꾸지 않는 증가/감소
- 로트 현재 수량은 저장하지 않고 출고 라인 합계로부터 계산합니다.

모든 이동은 하나의 트랜잭션으로 처리되며, 재고 레코드와 소진 대상 로트는
SELECT ... FOR UPDATE 로 잠급니다. (SQLite 에서는 무시됨)
오류가 발생하면 롤백 후 예외를 그대로 전파합니다.
"""

import logging
from datetime import date, datetime, timedelta, UTC
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDBase
from app.core.exceptions import ConstraintViolation, InventoryRecordInUse, NotFoundError
from app.domains.inv import models as inv_models
from app.domains.inv import schemas as inv_schemas
from app.domains.inv import valuation
from app.domains.prd.models import Product
from app.domains.whs.models import Warehouse

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def _as_decimal(value) -> Decimal:
    # SQLite 드라이버는 집계 결과를 float/int 로 돌려줄 수 있습니다.
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def generate_lot_number(record: inv_models.InventoryRecord) -> str:
    """LOTE-{밀리초 타임스탬프}-{재고ID}-{제품ID} 형식의 로트 번호"""
    timestamp = int(datetime.now(UTC).timestamp() * 1000)
    return f"LOTE-{timestamp}-{record.id}-{record.product_id}"


# =============================================================================
# 1. inventarios CRUD
# =============================================================================
class InventoryRecordCRUD(CRUDBase[inv_models.InventoryRecord, SQLModel, SQLModel]):

    async def get_by_product_warehouse(
        self, db: AsyncSession, *, product_id: int, warehouse_id: int, lock: bool = False
    ) -> Optional[inv_models.InventoryRecord]:
        statement = select(self.model).where(
            self.model.product_id == product_id,
            self.model.warehouse_id == warehouse_id,
        )
        if lock:
            statement = statement.with_for_update()
        result = await db.execute(statement)
        return result.scalars().one_or_none()

    async def get_or_create_locked(
        self, db: AsyncSession, *, product_id: int, warehouse_id: int
    ) -> inv_models.InventoryRecord:
        """(제품, 창고) 재고 레코드를 잠근 채로 반환하고, 없으면 새로 만듭니다."""
        record = await self.get_by_product_warehouse(
            db, product_id=product_id, warehouse_id=warehouse_id, lock=True
        )
        if record is not None:
            return record

        if await db.get(Product, product_id) is None:
            raise NotFoundError(f"Product {product_id} not found.")
        if await db.get(Warehouse, warehouse_id) is None:
            raise NotFoundError(f"Warehouse {warehouse_id} not found.")

        record = self.model(product_id=product_id, warehouse_id=warehouse_id)
        db.add(record)
        try:
            await db.flush()
        except IntegrityError as e:
            # 같은 (제품, 창고) 레코드를 다른 트랜잭션이 먼저 생성한 경우
            raise ConstraintViolation(
                f"Inventory record for product {product_id} in warehouse {warehouse_id} "
                "was created concurrently; retry the movement."
            ) from e
        logger.info("Created inventory record id=%s (product=%s, warehouse=%s)", record.id, product_id, warehouse_id)
        return record

    async def get_existing_locked(
        self, db: AsyncSession, *, product_id: int, warehouse_id: int
    ) -> inv_models.InventoryRecord:
        record = await self.get_by_product_warehouse(
            db, product_id=product_id, warehouse_id=warehouse_id, lock=True
        )
        if record is None:
            raise NotFoundError(f"No inventory for product {product_id} in warehouse {warehouse_id}.")
        return record

    async def received_quantity(self, db: AsyncSession, *, record_id: int) -> Decimal:
        """입고(ENTRADA) 이동으로 들어온 누적 수량. 가중평균 계산의 Q_old 입니다."""
        statement = (
            select(func.coalesce(func.sum(inv_models.MovementDetail.quantity), 0))
            .select_from(inv_models.MovementDetail)
            .join(inv_models.Movement, inv_models.Movement.id == inv_models.MovementDetail.movement_id)
            .where(
                inv_models.MovementDetail.inventory_record_id == record_id,
                inv_models.MovementDetail.direction == inv_models.MovementDirection.IN,
                inv_models.Movement.type == inv_models.MovementType.STOCK_IN,
            )
        )
        result = await db.execute(statement)
        return _as_decimal(result.scalar_one())

    async def quantities_on_hand(self, db: AsyncSession, *, record_ids: Iterable[int]) -> Dict[int, Decimal]:
        """재고 레코드별 보유 수량 = 로트 초기 수량 합계 - 출고 라인 수량 합계"""
        ids = list(record_ids)
        if not ids:
            return {}

        lots_in = await db.execute(
            select(inv_models.Lot.inventory_record_id, func.sum(inv_models.Lot.initial_quantity))
            .where(inv_models.Lot.inventory_record_id.in_(ids))
            .group_by(inv_models.Lot.inventory_record_id)
        )
        issued = await db.execute(
            select(inv_models.MovementDetail.inventory_record_id, func.sum(inv_models.MovementDetail.quantity))
            .where(
                inv_models.MovementDetail.inventory_record_id.in_(ids),
                inv_models.MovementDetail.direction == inv_models.MovementDirection.OUT,
            )
            .group_by(inv_models.MovementDetail.inventory_record_id)
        )
        quantities = {record_id: ZERO for record_id in ids}
        for record_id, total in lots_in.all():
            quantities[record_id] += _as_decimal(total)
        for record_id, total in issued.all():
            quantities[record_id] -= _as_decimal(total)
        return quantities

    async def to_response(
        self, db: AsyncSession, record: inv_models.InventoryRecord
    ) -> inv_schemas.InventoryRecordResponse:
        quantities = await self.quantities_on_hand(db, record_ids=[record.id])
        return self._build_response(record, quantities[record.id])

    @staticmethod
    def _build_response(
        record: inv_models.InventoryRecord, quantity_on_hand: Decimal
    ) -> inv_schemas.InventoryRecordResponse:
        return inv_schemas.InventoryRecordResponse(
            **record.model_dump(),
            quantity_on_hand=quantity_on_hand,
            total_value=valuation.stock_value(quantity_on_hand, record.current_weighted_average_cost),
        )

    async def get_multi_with_quantity(
        self,
        db: AsyncSession,
        *,
        skip: int = 0,
        limit: int = 100,
        product_id: Optional[int] = None,
        warehouse_id: Optional[int] = None,
    ) -> List[inv_schemas.InventoryRecordResponse]:
        records = await self.get_multi(
            db, skip=skip, limit=limit, product_id=product_id, warehouse_id=warehouse_id
        )
        quantities = await self.quantities_on_hand(db, record_ids=[record.id for record in records])
        return [
            self._build_response(record, quantities[record.id])
            for record in records
        ]

    async def valuation_report(
        self,
        db: AsyncSession,
        *,
        product_id: Optional[int] = None,
        warehouse_id: Optional[int] = None,
    ) -> inv_schemas.ValuationReport:
        """제품/창고로 거른 전체 재고 레코드의 수량과 금액 합계"""
        statement = select(self.model).order_by(self.model.id)
        if product_id is not None:
            statement = statement.where(self.model.product_id == product_id)
        if warehouse_id is not None:
            statement = statement.where(self.model.warehouse_id == warehouse_id)
        result = await db.execute(statement)
        records = result.scalars().all()

        quantities = await self.quantities_on_hand(db, record_ids=[record.id for record in records])
        responses = [self._build_response(record, quantities[record.id]) for record in records]
        return inv_schemas.ValuationReport(
            records=responses,
            total_quantity=sum((item.quantity_on_hand for item in responses), ZERO),
            total_value=sum((item.total_value for item in responses), ZERO),
        )

    async def delete(self, db: AsyncSession, *, id: int) -> Optional[inv_models.InventoryRecord]:
        """로트를 보유한 재고 레코드는 삭제할 수 없습니다."""
        lots = await lot.count_by_attribute(db, attribute="inventory_record_id", value=id)
        if lots:
            raise InventoryRecordInUse(f"Inventory record {id} owns {lots} lot(s) and cannot be deleted.")
        return await super().delete(db, id=id)


# =============================================================================
# 2. inventario_lote CRUD
# =============================================================================
class LotCRUD(CRUDBase[inv_models.Lot, SQLModel, SQLModel]):

    async def issued_by_lot(self, db: AsyncSession, *, lot_ids: Iterable[int]) -> Dict[int, Decimal]:
        """로트별 출고 라인 수량 합계"""
        ids = list(lot_ids)
        if not ids:
            return {}
        result = await db.execute(
            select(inv_models.MovementDetail.lot_id, func.sum(inv_models.MovementDetail.quantity))
            .where(
                inv_models.MovementDetail.lot_id.in_(ids),
                inv_models.MovementDetail.direction == inv_models.MovementDirection.OUT,
            )
            .group_by(inv_models.MovementDetail.lot_id)
        )
        return {lot_id: _as_decimal(total) for lot_id, total in result.all()}

    async def with_current_quantity(
        self, db: AsyncSession, lots: List[inv_models.Lot]
    ) -> List[Tuple[inv_models.Lot, Decimal]]:
        issued = await self.issued_by_lot(db, lot_ids=[item.id for item in lots])
        return [
            (item, _as_decimal(item.initial_quantity) - issued.get(item.id, ZERO))
            for item in lots
        ]

    @staticmethod
    def to_response(item: inv_models.Lot, current_quantity: Decimal) -> inv_schemas.LotResponse:
        return inv_schemas.LotResponse(**item.model_dump(), current_quantity=current_quantity)

    async def _responses(
        self, db: AsyncSession, lots: List[inv_models.Lot], *, only_available: bool = False
    ) -> List[inv_schemas.LotResponse]:
        pairs = await self.with_current_quantity(db, lots)
        return [
            self.to_response(item, quantity)
            for item, quantity in pairs
            if not only_available or quantity > 0
        ]

    async def get_response(self, db: AsyncSession, *, id: int) -> Optional[inv_schemas.LotResponse]:
        item = await self.get(db, id=id)
        if item is None:
            return None
        responses = await self._responses(db, [item])
        return responses[0]

    async def get_candidates_locked(
        self, db: AsyncSession, *, record_id: int
    ) -> List[Tuple[inv_models.Lot, Decimal]]:
        """출고 대상 로트를 잠그고 (로트, 현재 수량) 쌍으로 반환합니다."""
        statement = (
            select(self.model)
            .where(self.model.inventory_record_id == record_id)
            .order_by(self.model.received_date, self.model.id)
            .with_for_update()
        )
        result = await db.execute(statement)
        return await self.with_current_quantity(db, list(result.scalars().all()))

    async def get_by_inventory(
        self, db: AsyncSession, *, record_id: int, only_available: bool = False
    ) -> List[inv_schemas.LotResponse]:
        statement = (
            select(self.model)
            .where(self.model.inventory_record_id == record_id)
            .order_by(self.model.received_date, self.model.id)
        )
        result = await db.execute(statement)
        return await self._responses(db, list(result.scalars().all()), only_available=only_available)

    async def get_expiring(
        self, db: AsyncSession, *, days: int, today: Optional[date] = None
    ) -> List[inv_schemas.LotResponse]:
        """오늘부터 days 일 이내에 유통기한이 도래하는, 수량이 남은 로트"""
        today = today or date.today()
        statement = (
            select(self.model)
            .where(
                self.model.expiry_date.is_not(None),
                self.model.expiry_date >= today,
                self.model.expiry_date <= today + timedelta(days=days),
            )
            .order_by(self.model.expiry_date, self.model.id)
        )
        result = await db.execute(statement)
        return await self._responses(db, list(result.scalars().all()), only_available=True)

    async def get_expired(self, db: AsyncSession, *, today: Optional[date] = None) -> List[inv_schemas.LotResponse]:
        """유통기한이 지났지만 수량이 남아 있는 로트"""
        today = today or date.today()
        statement = (
            select(self.model)
            .where(self.model.expiry_date.is_not(None), self.model.expiry_date < today)
            .order_by(self.model.expiry_date, self.model.id)
        )
        result = await db.execute(statement)
        return await self._responses(db, list(result.scalars().all()), only_available=True)

    async def get_by_lot_number(self, db: AsyncSession, *, lot_number: str) -> List[inv_schemas.LotResponse]:
        statement = select(self.model).where(self.model.lot_number == lot_number).order_by(self.model.id)
        result = await db.execute(statement)
        return await self._responses(db, list(result.scalars().all()))


# =============================================================================
# 3. movimientos CRUD (입고/출고/조정)
# =============================================================================
class MovementCRUD(CRUDBase[inv_models.Movement, SQLModel, SQLModel]):

    async def get_with_details(self, db: AsyncSession, *, id: int) -> Optional[inv_models.Movement]:
        statement = (
            select(self.model)
            .where(self.model.id == id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(statement)
        return result.scalars().one_or_none()

    async def get_response(self, db: AsyncSession, *, id: int) -> Optional[inv_schemas.MovementResponse]:
        db_movement = await self.get_with_details(db, id=id)
        if db_movement is None:
            return None
        return inv_schemas.MovementResponse.model_validate(db_movement)

    async def get_stock_out_details(
        self, db: AsyncSession, *, movement_id: int
    ) -> List[inv_models.StockOutDetail]:
        """출고 이동의 매출원가 기록 (라인 순)"""
        statement = (
            select(inv_models.StockOutDetail)
            .join(
                inv_models.MovementDetail,
                inv_models.MovementDetail.id == inv_models.StockOutDetail.movement_detail_id,
            )
            .where(inv_models.MovementDetail.movement_id == movement_id)
            .order_by(inv_models.StockOutDetail.id)
        )
        result = await db.execute(statement)
        return result.scalars().all()

    async def get_multi_filtered(
        self,
        db: AsyncSession,
        *,
        skip: int = 0,
        limit: int = 100,
        movement_type: Optional[inv_models.MovementType] = None,
        inventory_record_id: Optional[int] = None,
    ) -> List[inv_models.Movement]:
        statement = select(self.model)
        if movement_type is not None:
            statement = statement.where(self.model.type == movement_type)
        if inventory_record_id is not None:
            statement = statement.where(
                self.model.id.in_(
                    select(inv_models.MovementDetail.movement_id).where(
                        inv_models.MovementDetail.inventory_record_id == inventory_record_id
                    )
                )
            )
        statement = statement.order_by(self.model.id.desc()).offset(skip).limit(limit)
        result = await db.execute(statement)
        return result.scalars().all()

    # -------------------------------------------------------------------------
    # 입고
    # -------------------------------------------------------------------------
    async def stock_in(
        self, db: AsyncSession, *, request: inv_schemas.StockInRequest
    ) -> inv_schemas.StockInResponse:
        """
        입고를 처리합니다.

        1. 수량/단가 검증 (어떤 행도 변경하기 전)
        2. 재고 레코드 잠금 (없으면 생성)
        3. 가중평균 단가 재계산 후 저장
        4. 이동 헤더, 로트, 입고 라인 생성
        """
        valuation.validate_inbound(request.quantity, request.unit_cost)

        try:
            record = await inventory_record.get_or_create_locked(
                db, product_id=request.product_id, warehouse_id=request.warehouse_id
            )
            received = await inventory_record.received_quantity(db, record_id=record.id)
            previous_average = record.current_weighted_average_cost
            record.current_weighted_average_cost = valuation.recalculate_weighted_average(
                received, previous_average, request.quantity, request.unit_cost
            )
            db.add(record)

            movement = self._new_movement(inv_models.MovementType.STOCK_IN, request.reference, request.notes)
            if request.received_date is not None:
                movement.movement_date = request.received_date
            db.add(movement)

            new_lot = inv_models.Lot(
                inventory_record_id=record.id,
                lot_number=request.lot_number or generate_lot_number(record),
                initial_quantity=request.quantity,
                unit_cost=request.unit_cost,
                expiry_date=request.expiry_date,
                notes=request.notes,
            )
            if request.received_date is not None:
                new_lot.received_date = request.received_date
            db.add(new_lot)
            await db.flush()

            db.add(self._new_detail(
                movement, record, new_lot, inv_models.MovementDirection.IN, request.quantity, request.unit_cost
            ))
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        await db.refresh(record)
        await db.refresh(new_lot)
        logger.info(
            "Stock-in: record=%s lot=%s qty=%s cost=%s average %s -> %s",
            record.id, new_lot.lot_number, request.quantity, request.unit_cost,
            previous_average, record.current_weighted_average_cost,
        )
        return inv_schemas.StockInResponse(
            movement=await self.get_response(db, id=movement.id),
            lot=lot.to_response(new_lot, new_lot.initial_quantity),
            inventory=await inventory_record.to_response(db, record),
        )

    # -------------------------------------------------------------------------
    # 출고
    # -------------------------------------------------------------------------
    async def stock_out(
        self,
        db: AsyncSession,
        *,
        request: inv_schemas.StockOutRequest,
        policy: inv_models.LotSelectionPolicy = inv_models.LotSelectionPolicy.FIFO,
    ) -> inv_schemas.StockOutResponse:
        """
        출고를 처리합니다. 로트별로 출고 라인을 만들고, 각 라인에 대해
        현재 가중평균 단가로 매출원가(detalle_salidas)를 기록합니다.
        가중평균 단가는 변경하지 않습니다.
        """
        valuation.validate_outbound(request.quantity)

        try:
            record = await inventory_record.get_existing_locked(
                db, product_id=request.product_id, warehouse_id=request.warehouse_id
            )
            candidates = await lot.get_candidates_locked(db, record_id=record.id)
            allocations = valuation.allocate_lots(candidates, request.quantity, policy, lot_id=request.lot_id)

            movement = self._new_movement(inv_models.MovementType.STOCK_OUT, request.reference, request.notes)
            db.add(movement)
            await db.flush()

            details = await self._consume_lots(db, movement, record, allocations)

            average = record.current_weighted_average_cost
            stock_out_details = [
                inv_models.StockOutDetail(
                    movement_detail_id=detail.id,
                    quantity=detail.quantity,
                    unit_cost=average,
                    total_cost=valuation.quantize_cost(detail.quantity * average),
                )
                for detail in details
            ]
            db.add_all(stock_out_details)
            await db.flush()
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        logger.info(
            "Stock-out: record=%s qty=%s lots=%s policy=%s",
            record.id, request.quantity, [a.lot.id for a in allocations], policy.value,
        )
        return inv_schemas.StockOutResponse(
            movement=await self.get_response(db, id=movement.id),
            inventory=await inventory_record.to_response(db, record),
            stock_out_details=[inv_schemas.StockOutDetailResponse.model_validate(item) for item in stock_out_details],
        )

    # -------------------------------------------------------------------------
    # 조정
    # -------------------------------------------------------------------------
    async def adjust(
        self,
        db: AsyncSession,
        *,
        request: inv_schemas.AdjustmentRequest,
        policy: inv_models.LotSelectionPolicy = inv_models.LotSelectionPolicy.FIFO,
    ) -> inv_schemas.AdjustmentResponse:
        """
        재고 조정. 증가 조정은 현재 가중평균 단가로 로트를 만들고,
        감소 조정은 출고와 같은 규칙으로 로트를 소진합니다.
        어느 쪽도 가중평균 단가를 다시 계산하지 않으며 매출원가를 기록하지 않습니다.
        """
        valuation.validate_outbound(request.quantity)
        inbound = request.direction == inv_models.MovementDirection.IN
        new_lot = None

        try:
            if inbound:
                record = await inventory_record.get_or_create_locked(
                    db, product_id=request.product_id, warehouse_id=request.warehouse_id
                )
                valuation.validate_inbound(request.quantity, record.current_weighted_average_cost)
                movement = self._new_movement(inv_models.MovementType.ADJUSTMENT_IN, request.reference, request.notes)
                db.add(movement)
                new_lot = inv_models.Lot(
                    inventory_record_id=record.id,
                    lot_number=request.lot_number or generate_lot_number(record),
                    initial_quantity=request.quantity,
                    unit_cost=record.current_weighted_average_cost,
                    expiry_date=request.expiry_date,
                    notes=request.notes,
                )
                db.add(new_lot)
                await db.flush()
                db.add(self._new_detail(
                    movement, record, new_lot, inv_models.MovementDirection.IN,
                    request.quantity, new_lot.unit_cost,
                ))
            else:
                record = await inventory_record.get_existing_locked(
                    db, product_id=request.product_id, warehouse_id=request.warehouse_id
                )
                candidates = await lot.get_candidates_locked(db, record_id=record.id)
                allocations = valuation.allocate_lots(candidates, request.quantity, policy, lot_id=request.lot_id)
                movement = self._new_movement(inv_models.MovementType.ADJUSTMENT_OUT, request.reference, request.notes)
                db.add(movement)
                await db.flush()
                await self._consume_lots(db, movement, record, allocations)
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        if new_lot is not None:
            await db.refresh(new_lot)
        logger.info("Adjustment %s: record=%s qty=%s", request.direction.value, record.id, request.quantity)
        return inv_schemas.AdjustmentResponse(
            movement=await self.get_response(db, id=movement.id),
            inventory=await inventory_record.to_response(db, record),
            lot=lot.to_response(new_lot, new_lot.initial_quantity) if new_lot is not None else None,
        )

    # -------------------------------------------------------------------------
    # 수불부
    # -------------------------------------------------------------------------
    async def kardex(
        self,
        db: AsyncSession,
        *,
        record_id: int,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> List[inv_schemas.KardexEntry]:
        """
        재고 레코드의 이동 라인을 처리 순서대로 나열하고 누적 잔량, 평균 단가,
        재고 금액을 붙입니다.

        잔량은 항상 첫 이동부터 계산한 뒤 기간(date_from ~ date_to, 양 끝 포함)으로
        거르므로, 기간 첫 라인의 잔량에는 이전 이동이 반영되어 있습니다.
        """
        statement = (
            select(inv_models.MovementDetail, inv_models.Movement)
            .join(inv_models.Movement, inv_models.Movement.id == inv_models.MovementDetail.movement_id)
            .where(inv_models.MovementDetail.inventory_record_id == record_id)
            .order_by(inv_models.Movement.id, inv_models.MovementDetail.id)
        )
        result = await db.execute(statement)
        rows = result.all()
        balances = valuation.valued_running_balance(
            (movement.type, detail.direction, detail.quantity, detail.unit_cost) for detail, movement in rows
        )
        entries = []
        for (detail, movement), line in zip(rows, balances):
            day = movement.movement_date.date()
            if date_from is not None and day < date_from:
                continue
            if date_to is not None and day > date_to:
                continue
            entries.append(
                inv_schemas.KardexEntry(
                    movement_id=movement.id,
                    movement_type=movement.type,
                    movement_date=movement.movement_date,
                    movement_detail_id=detail.id,
                    lot_id=detail.lot_id,
                    direction=detail.direction,
                    quantity=detail.quantity,
                    unit_cost=detail.unit_cost,
                    total_cost=detail.total_cost,
                    balance=line.balance,
                    average_cost=line.average_cost,
                    balance_value=line.balance_value,
                )
            )
        return entries


    # -------------------------------------------------------------------------
    # 내부 헬퍼
    # -------------------------------------------------------------------------
    @staticmethod
    def _new_movement(
        movement_type: inv_models.MovementType, reference: Optional[str], notes: Optional[str]
    ) -> inv_models.Movement:
        return inv_models.Movement(type=movement_type, reference=reference, notes=notes)

    @staticmethod
    def _new_detail(
        movement: inv_models.Movement,
        record: inv_models.InventoryRecord,
        target: inv_models.Lot,
        direction: inv_models.MovementDirection,
        quantity: Decimal,
        unit_cost: Decimal,
    ) -> inv_models.MovementDetail:
        return inv_models.MovementDetail(
            movement_id=movement.id,
            inventory_record_id=record.id,
            lot_id=target.id,
            direction=direction,
            quantity=quantity,
            unit_cost=unit_cost,
            total_cost=valuation.quantize_cost(quantity * unit_cost),
        )

    async def _consume_lots(
        self,
        db: AsyncSession,
        movement: inv_models.Movement,
        record: inv_models.InventoryRecord,
        allocations: List[valuation.LotAllocation],
    ) -> List[inv_models.MovementDetail]:
        """할당된 로트마다 출고 라인을 하나씩 만듭니다. (로트 단가 기준)"""
        details = [
            self._new_detail(
                movement, record, allocation.lot, inv_models.MovementDirection.OUT,
                allocation.quantity, allocation.lot.unit_cost,
            )
            for allocation in allocations
        ]
        db.add_all(details)
        await db.flush()
        return details


inventory_record = InventoryRecordCRUD(inv_models.InventoryRecord)
lot = LotCRUD(inv_models.Lot)
movement = MovementCRUD(inv_models.Movement)
