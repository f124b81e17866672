# app/domains/inv/__init__.py

"""
FastAPI 애플리케이션의 'inv' 도메인 패키지입니다.

(제품, 창고) 쌍별 재고 레코드(InventoryRecord), 입고 로트(Lot),
재고 이동(Movement / MovementDetail)과 출고 매출원가(StockOutDetail)를 관리합니다.

- 가중평균 단가는 입고에서만 다시 계산합니다.
- 로트 현재 수량은 저장하지 않고 출고 라인 합계로부터 조회 시점에 계산합니다.
- 로트를 지정하지 않은 출고는 FIFO(입고일) 또는 FEFO(유통기한) 순으로 소진합니다.

주요 서브모듈:
- `models.py`: SQLModel 테이블 정의.
- `valuation.py`: 가중평균/로트 수량/할당 순수 함수.
- `schemas.py`, `validators.py`: 요청/응답 스키마와 명시적 검증 함수.
- `crud.py`: 트랜잭션 단위의 입고/출고/조정 로직.
- `routers.py`: API 엔드포인트.
- `tasks.py`: 유통기한 알림 ARQ 작업.
"""

__title__ = "Inventario Inventory Domain"
__description__ = "Inventory valuation (weighted average) and lot tracking."
__version__ = "0.5.0"
__all__ = []
