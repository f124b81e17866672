# app/domains/whs/routers.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from app.core.validation import ensure_valid
from app.domains.whs import crud as whs_crud, schemas as whs_schemas, validators

router = APIRouter(
    tags=["Warehouse Management (창고 관리)"],
    responses={404: {"description": "Not found"}},
)


@router.post(
    "/warehouses",
    response_model=whs_schemas.WarehouseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_warehouse(
    warehouse_create: whs_schemas.WarehouseCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """새로운 창고를 생성합니다."""
    ensure_valid(validators.validate_warehouse_create(warehouse_create))
    if await whs_crud.warehouse.get_by_name(db, name=warehouse_create.name):
        raise HTTPException(status_code=400, detail="Warehouse with this name already exists.")
    return await whs_crud.warehouse.create(db=db, obj_in=warehouse_create)


@router.get("/warehouses", response_model=List[whs_schemas.WarehouseResponse])
async def read_warehouses(
    skip: int = 0,
    limit: int = 100,
    is_active: Optional[bool] = None,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await whs_crud.warehouse.get_multi(db, skip=skip, limit=limit, is_active=is_active)


@router.get("/warehouses/{warehouse_id}", response_model=whs_schemas.WarehouseResponse)
async def read_warehouse(warehouse_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    db_warehouse = await whs_crud.warehouse.get(db, id=warehouse_id)
    if db_warehouse is None:
        raise HTTPException(status_code=404, detail="Warehouse not found.")
    return db_warehouse


@router.put("/warehouses/{warehouse_id}", response_model=whs_schemas.WarehouseResponse)
async def update_warehouse(
    warehouse_id: int,
    warehouse_update: whs_schemas.WarehouseUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    ensure_valid(validators.validate_warehouse_update(warehouse_update))
    db_warehouse = await whs_crud.warehouse.get(db, id=warehouse_id)
    if db_warehouse is None:
        raise HTTPException(status_code=404, detail="Warehouse not found.")
    return await whs_crud.warehouse.update(db=db, db_obj=db_warehouse, obj_in=warehouse_update)


@router.delete("/warehouses/{warehouse_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_warehouse(warehouse_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    """창고를 삭제합니다. 재고 레코드가 있으면 409 를 반환합니다."""
    db_warehouse = await whs_crud.warehouse.delete(db, id=warehouse_id)
    if db_warehouse is None:
        raise HTTPException(status_code=404, detail="Warehouse not found.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
