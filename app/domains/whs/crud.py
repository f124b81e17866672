# app/domains/whs/crud.py

"""
'whs' 도메인의 CRUD 작업을 정의하는 모듈입니다.
"""

import logging
from typing import Any, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDBase
from app.core.exceptions import ResourceInUse
from app.domains.whs import models as whs_models
from app.domains.whs import schemas as whs_schemas
from app.domains.inv import models as inv_models

logger = logging.getLogger(__name__)


class WarehouseCRUD(CRUDBase[whs_models.Warehouse, whs_schemas.WarehouseCreate, whs_schemas.WarehouseUpdate]):

    async def get_by_name(self, db: AsyncSession, *, name: str) -> Optional[whs_models.Warehouse]:
        statement = select(self.model).where(self.model.name == name)
        result = await db.execute(statement)
        return result.scalars().first()

    async def delete(self, db: AsyncSession, *, id: Any) -> Optional[whs_models.Warehouse]:
        """재고 레코드가 있는 창고는 삭제할 수 없습니다."""
        statement = select(inv_models.InventoryRecord.id).where(inv_models.InventoryRecord.warehouse_id == id)
        result = await db.execute(statement)
        if result.first() is not None:
            logger.warning("Refusing to delete warehouse %s: inventory records exist", id)
            raise ResourceInUse(f"Warehouse {id} has inventory records.")
        return await super().delete(db, id=id)


warehouse = WarehouseCRUD(whs_models.Warehouse)
