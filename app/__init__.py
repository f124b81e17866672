# app/__init__.py

"""
Inventario FastAPI 애플리케이션의 메인 패키지입니다.

FastAPI 애플리케이션의 진입점 (main.py)과
공통 설정, 데이터베이스 연결, 예외/검증 유틸리티를 담는 core 서브패키지,
그리고 각 비즈니스 도메인(prd, whs, inv)을 대표하는 domains 서브패키지로 구성됩니다.
"""

APP_NAME = "Inventario FastAPI API"
APP_VERSION = "0.5.0"
API_PREFIX = "/api/v1"  # API 라우트의 공통 접두사 (main.py에서 적용)


# PEP 440 버전 정보 (pyproject.toml 과 동일하게 유지)
__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Inventory valuation and lot-tracking API backend."
__license__ = "MIT"
__all__ = []
