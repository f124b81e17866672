# app/domains/whs/__init__.py

"""
FastAPI 애플리케이션의 'whs' 도메인 패키지입니다.

창고(Warehouse, 테이블 almacen) 마스터 데이터를 관리합니다.
재고 레코드는 (제품, 창고) 쌍마다 하나씩 존재하므로, 재고 레코드가
참조 중인 창고는 삭제할 수 없습니다.
"""

__title__ = "Inventario Warehouse Domain"
__description__ = "Manages warehouses."
__version__ = "0.5.0"
__all__ = []
