# app/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

- `config.py`: 애플리케이션 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 비동기 엔진과 세션 관리 (SQLModel + AsyncSQLAlchemy).
- `dependencies.py`: FastAPI 의존성 함수 (DB 세션, 로트 선택 정책).
- `exceptions.py`: 재고 도메인 예외 계층과 JSON 예외 핸들러.
- `validation.py`: 명시적 검증 결과(ValidationResult)와 규칙 헬퍼.
- `enums.py`: Enum 컬럼을 값으로 저장하기 위한 공용 헬퍼.
- `crud_base.py`: 마스터 데이터 공통 CRUD 기본 클래스.
- `tasks.py`: ARQ 워커용 공통 백그라운드 작업.
"""

# 패키지 메타데이터 (선택 사항)
__title__ = "Inventario Core"
__description__ = "Core components for the Inventario FastAPI application."
__version__ = "0.5.0"
__all__ = []  # 'from app.core import *' 시 내보낼 이름 목록. 일반적으로 비워둡니다.
