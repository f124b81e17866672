# app/domains/inv/routers.py

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from app.core.config import settings
from app.core.validation import ensure_valid
from app.domains.inv import crud as inv_crud, schemas as inv_schemas, validators
from app.domains.inv.models import LotSelectionPolicy, MovementType

router = APIRouter(
    tags=["Inventory Management (재고 관리)"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. inventarios 엔드포인트
# =============================================================================
@router.get("/inventories", response_model=List[inv_schemas.InventoryRecordResponse])
async def read_inventories(
    skip: int = 0,
    limit: int = 100,
    product_id: Optional[int] = None,
    warehouse_id: Optional[int] = None,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """재고 레코드 목록을 보유 수량과 함께 조회합니다."""
    return await inv_crud.inventory_record.get_multi_with_quantity(
        db, skip=skip, limit=limit, product_id=product_id, warehouse_id=warehouse_id
    )


@router.get("/inventories/{inventory_id}", response_model=inv_schemas.InventoryRecordResponse)
async def read_inventory(inventory_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    db_record = await inv_crud.inventory_record.get(db, id=inventory_id)
    if db_record is None:
        raise HTTPException(status_code=404, detail="Inventory record not found.")
    return await inv_crud.inventory_record.to_response(db, db_record)


@router.delete("/inventories/{inventory_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_inventory(inventory_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    """재고 레코드를 삭제합니다. 로트를 보유하고 있으면 409 를 반환합니다."""
    db_record = await inv_crud.inventory_record.delete(db, id=inventory_id)
    if db_record is None:
        raise HTTPException(status_code=404, detail="Inventory record not found.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/inventories/{inventory_id}/lots", response_model=List[inv_schemas.LotResponse])
async def read_inventory_lots(
    inventory_id: int,
    only_available: bool = Query(False, description="현재 수량이 남은 로트만 조회"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """재고 레코드의 로트를 입고 순으로 조회합니다. 현재 수량은 조회 시점에 계산됩니다."""
    if await inv_crud.inventory_record.get(db, id=inventory_id) is None:
        raise HTTPException(status_code=404, detail="Inventory record not found.")
    return await inv_crud.lot.get_by_inventory(db, record_id=inventory_id, only_available=only_available)


@router.get("/inventories/{inventory_id}/kardex", response_model=List[inv_schemas.KardexEntry])
async def read_inventory_kardex(
    inventory_id: int,
    date_from: Optional[date] = Query(None, description="조회 시작일 (포함)"),
    date_to: Optional[date] = Query(None, description="조회 종료일 (포함)"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    재고 레코드의 수불부(이동 라인 + 누적 잔량, 평균 단가, 재고 금액)를 조회합니다.
    기간을 지정해도 잔량은 첫 이동부터 누적된 값입니다.
    """
    ensure_valid(validators.validate_date_range(date_from, date_to))
    if await inv_crud.inventory_record.get(db, id=inventory_id) is None:
        raise HTTPException(status_code=404, detail="Inventory record not found.")
    return await inv_crud.movement.kardex(db, record_id=inventory_id, date_from=date_from, date_to=date_to)


@router.get("/valuation", response_model=inv_schemas.ValuationReport)
async def read_valuation_report(
    product_id: Optional[int] = None,
    warehouse_id: Optional[int] = None,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """재고 평가 보고서: 레코드별 수량과 금액, 전체 합계"""
    return await inv_crud.inventory_record.valuation_report(db, product_id=product_id, warehouse_id=warehouse_id)


# =============================================================================
# 2. inventario_lote 엔드포인트
# =============================================================================
# 고정 경로(/lots/expiring 등)를 /lots/{lot_id} 보다 먼저 등록합니다.
@router.get("/lots/expiring", response_model=List[inv_schemas.LotResponse])
async def read_expiring_lots(
    days: Optional[int] = Query(None, ge=0, description="오늘부터 며칠 이내 (기본값: EXPIRY_ALERT_DAYS)"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    days = settings.EXPIRY_ALERT_DAYS if days is None else days
    return await inv_crud.lot.get_expiring(db, days=days)


@router.get("/lots/expired", response_model=List[inv_schemas.LotResponse])
async def read_expired_lots(db: AsyncSession = Depends(deps.get_db_session)):
    return await inv_crud.lot.get_expired(db)


@router.get("/lots/by-number/{lot_number}", response_model=List[inv_schemas.LotResponse])
async def read_lots_by_number(lot_number: str, db: AsyncSession = Depends(deps.get_db_session)):
    lots = await inv_crud.lot.get_by_lot_number(db, lot_number=lot_number)
    if not lots:
        raise HTTPException(status_code=404, detail="Lot not found.")
    return lots


@router.get("/lots/{lot_id}", response_model=inv_schemas.LotResponse)
async def read_lot(lot_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    db_lot = await inv_crud.lot.get_response(db, id=lot_id)
    if db_lot is None:
        raise HTTPException(status_code=404, detail="Lot not found.")
    return db_lot


# =============================================================================
# 3. movimientos 엔드포인트
# =============================================================================
@router.post(
    "/movements/stock-in",
    response_model=inv_schemas.StockInResponse,
    status_code=status.HTTP_201_CREATED,
)
async def stock_in(
    request: inv_schemas.StockInRequest,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """입고: 새 로트를 만들고 가중평균 단가를 다시 계산합니다."""
    ensure_valid(validators.validate_stock_in(request))
    return await inv_crud.movement.stock_in(db, request=request)


@router.post(
    "/movements/stock-out",
    response_model=inv_schemas.StockOutResponse,
    status_code=status.HTTP_201_CREATED,
)
async def stock_out(
    request: inv_schemas.StockOutRequest,
    policy: LotSelectionPolicy = Depends(deps.get_lot_selection_policy),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    출고: 지정 로트 또는 선택 정책(FIFO/FEFO/LIFO)에 따라 로트를 소진합니다.
    가용 수량이 부족하면 409 를 반환하며 아무것도 기록하지 않습니다.
    """
    ensure_valid(validators.validate_stock_out(request))
    return await inv_crud.movement.stock_out(db, request=request, policy=policy)


@router.post(
    "/movements/adjustments",
    response_model=inv_schemas.AdjustmentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def adjust_stock(
    request: inv_schemas.AdjustmentRequest,
    policy: LotSelectionPolicy = Depends(deps.get_lot_selection_policy),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """재고 조정 (실사 차이 등). 가중평균 단가는 변경되지 않습니다."""
    ensure_valid(validators.validate_adjustment(request))
    return await inv_crud.movement.adjust(db, request=request, policy=policy)


@router.get("/movements", response_model=List[inv_schemas.MovementResponse])
async def read_movements(
    skip: int = 0,
    limit: int = 100,
    type: Optional[MovementType] = None,
    inventory_id: Optional[int] = None,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await inv_crud.movement.get_multi_filtered(
        db, skip=skip, limit=limit, movement_type=type, inventory_record_id=inventory_id
    )


@router.get("/movements/{movement_id}", response_model=inv_schemas.MovementResponse)
async def read_movement(movement_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    db_movement = await inv_crud.movement.get_with_details(db, id=movement_id)
    if db_movement is None:
        raise HTTPException(status_code=404, detail="Movement not found.")
    return db_movement


@router.get(
    "/movements/{movement_id}/stock-out-details",
    response_model=List[inv_schemas.StockOutDetailResponse],
)
async def read_movement_stock_out_details(movement_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    """출고 이동의 매출원가 기록을 조회합니다."""
    if await inv_crud.movement.get(db, id=movement_id) is None:
        raise HTTPException(status_code=404, detail="Movement not found.")
    return await inv_crud.movement.get_stock_out_details(db, movement_id=movement_id)
