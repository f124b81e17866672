# tests/test_main.py

"""
FastAPI 애플리케이션의 메인 엔드포인트에 대한 통합 테스트를 정의하는 모듈입니다.

- 애플리케이션의 루트 경로 (`/`) 응답을 테스트합니다.
- 데이터베이스 연결 헬스 체크 엔드포인트 (`/health-check`)를 테스트합니다.
- 도메인 예외 핸들러의 응답 형식을 테스트합니다.
"""

import pytest
from httpx import AsyncClient

from app.main import ArqWorkerSettings


@pytest.mark.asyncio
async def test_read_root(client: AsyncClient):
    """(성공) 루트 엔드포인트가 환영 메시지를 반환하는지 테스트"""
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to Inventario API. Visit /docs for interactive API documentation."}


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """(성공) 헬스 체크가 데이터베이스 연결 상태를 반환하는지 테스트"""
    response = await client.get("/health-check")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database_connection": "successful"}


@pytest.mark.asyncio
async def test_inventory_error_response_shape(client: AsyncClient):
    """(실패) 도메인 예외가 detail/error/reasons 를 가진 JSON 으로 변환되는지 테스트"""
    response = await client.post(
        "/api/v1/inv/movements/stock-out",
        json={"product_id": 999, "warehouse_id": 999, "quantity": "1"},
    )

    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "NotFoundError"
    assert body["reasons"] == []
    assert "999" in body["detail"]


def test_arq_worker_settings_register_cron_functions():
    """(성공) ARQ cron 작업이 등록된 태스크 함수를 가리키는지 테스트"""
    registered = {f"{func.__module__}.{func.__name__}" for func in ArqWorkerSettings.functions}

    for job in ArqWorkerSettings.jobs:
        assert job["function"] in registered
