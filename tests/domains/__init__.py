# tests/domains/__init__.py

"""
도메인별 API 통합 테스트 패키지입니다.

- `test_prd_n.py`: 카테고리 및 제품.
- `test_whs_n.py`: 창고.
- `test_inv_n.py`: 입고/출고/조정, 로트 조회, 수불부.
"""

__title__ = "Inventario Domain Tests"
__all__ = []
