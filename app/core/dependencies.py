# app/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 관리 (get_db_session).
- 출고 시 사용할 로트 선택 정책 (get_lot_selection_policy).
"""

from typing import AsyncGenerator, Optional

from fastapi import Query
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings
from app.core.database import get_session as get_main_app_session
from app.domains.inv.models import LotSelectionPolicy


# --- 데이터베이스 세션 의존성 주입 ---
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    app.core.database.get_session을 래핑하여 사용합니다.
    """
    async for session in get_main_app_session():
        yield session


# --- 로트 선택 정책 ---
def get_lot_selection_policy(
    policy: Optional[LotSelectionPolicy] = Query(
        None, description="출고 로트 선택 정책 (FIFO | FEFO | LIFO). 생략 시 설정값 사용"
    ),
) -> LotSelectionPolicy:
    """쿼리 파라미터가 없으면 LOT_SELECTION_POLICY 설정값을 사용합니다."""
    if policy is not None:
        return policy
    return LotSelectionPolicy(settings.LOT_SELECTION_POLICY)
