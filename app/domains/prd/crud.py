# app/domains/prd/crud.py

"""
'prd' 도메인의 CRUD(Create, Read, Update, Delete) 작업을 위한 함수들을 정의하는 모듈입니다.
"""

import logging
from typing import Any, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDBase
from app.core.exceptions import ResourceInUse
from app.domains.prd import models as prd_models
from app.domains.prd import schemas as prd_schemas
from app.domains.inv import models as inv_models

logger = logging.getLogger(__name__)


# =============================================================================
# 1. categoria CRUD
# =============================================================================
class CategoryCRUD(CRUDBase[prd_models.Category, prd_schemas.CategoryCreate, prd_schemas.CategoryUpdate]):

    async def delete(self, db: AsyncSession, *, id: Any) -> Optional[prd_models.Category]:
        """제품이 참조 중인 카테고리는 삭제할 수 없습니다."""
        products = await product.count_by_attribute(db, attribute="category_id", value=id)
        if products:
            logger.warning("Refusing to delete category %s: %s product(s) reference it", id, products)
            raise ResourceInUse(f"Category {id} is referenced by {products} product(s).")
        return await super().delete(db, id=id)


# =============================================================================
# 2. producto CRUD
# =============================================================================
class ProductCRUD(CRUDBase[prd_models.Product, prd_schemas.ProductCreate, prd_schemas.ProductUpdate]):

    async def get_by_code(self, db: AsyncSession, *, code: str) -> Optional[prd_models.Product]:
        statement = select(self.model).where(self.model.code == code)
        result = await db.execute(statement)
        return result.scalars().one_or_none()

    async def delete(self, db: AsyncSession, *, id: Any) -> Optional[prd_models.Product]:
        """재고 레코드가 있는 제품은 삭제할 수 없습니다."""
        statement = select(inv_models.InventoryRecord.id).where(inv_models.InventoryRecord.product_id == id)
        result = await db.execute(statement)
        if result.first() is not None:
            logger.warning("Refusing to delete product %s: inventory records exist", id)
            raise ResourceInUse(f"Product {id} has inventory records.")
        return await super().delete(db, id=id)


category = CategoryCRUD(prd_models.Category)
product = ProductCRUD(prd_models.Product)
