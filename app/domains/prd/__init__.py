# app/domains/prd/__init__.py

"""
FastAPI 애플리케이션의 'prd' 도메인 패키지입니다.

카테고리(Category)와 제품(Product) 마스터 데이터를 관리합니다.
카테고리는 제품/서비스 구분(tipo)을 가지며, 이 컬럼은 최초 배포 이후
마이그레이션으로 추가되어 기존 행은 PRODUCTO 로 채워집니다.

주요 서브모듈:
- `models.py`: categoria, producto 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 및 응답 스키마.
- `validators.py`: 요청 데이터에 대한 명시적 검증 함수.
- `crud.py`: 비동기 CRUD 로직.
- `routers.py`: API 엔드포인트 정의.
"""

__title__ = "Inventario Product Domain"
__description__ = "Manages product categories and products."
__version__ = "0.5.0"
__all__ = []
