# app/domains/models/__init__.py

"""
이 파일은 모든 도메인의 SQLModel 모델들을 한 곳에서 중앙 관리하여,
다른 모듈에서 쉽게 임포트할 수 있도록 하는 역할을 합니다.
SQLModel.metadata가 모든 테이블을 인식하도록 보장합니다. (Alembic env.py 포함)
"""

# prd (Category, Product)
from app.domains.prd.models import Category, CategoryType, Product

# whs (Warehouse)
from app.domains.whs.models import Warehouse

# inv (InventoryRecord, Lot, Movement, MovementDetail, StockOutDetail)
from app.domains.inv.models import (
    InventoryRecord, Lot, Movement, MovementDetail, StockOutDetail,
    MovementType, MovementDirection, LotSelectionPolicy,
)

__all__ = [
    "Category", "CategoryType", "Product",
    "Warehouse",
    "InventoryRecord", "Lot", "Movement", "MovementDetail", "StockOutDetail",
    "MovementType", "MovementDirection", "LotSelectionPolicy",
]
