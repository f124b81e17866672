# tests/__init__.py

"""
Inventario API 테스트 스위트 패키지입니다.

- `conftest.py`: 테스트 데이터베이스(SQLite 기본, TEST_DATABASE_URL 로 변경 가능),
  AsyncClient, 마스터 데이터 팩토리 픽스처.
- `domains/`: prd, whs, inv 도메인 API 통합 테스트.
- `test_valuation.py`, `test_validation.py`: 데이터베이스 없이 실행되는 단위 테스트.
- `test_migrations.py`: Alembic revision 별 upgrade/downgrade 테스트.
"""

# 패키지 메타데이터 (선택 사항)
__title__ = "Inventario API Tests"
__description__ = "Test suite for the Inventario FastAPI application."
__version__ = "0.5.0"
__all__ = []
