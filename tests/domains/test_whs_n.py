# tests/domains/test_whs_n.py

"""
'whs' 도메인 (창고 관리) API 엔드포인트에 대한 통합 테스트 모듈입니다.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_warehouse(client: AsyncClient):
    """(성공) 창고 생성 테스트"""
    # [When]
    response = await client.post(
        "/api/v1/whs/warehouses",
        json={
            "name": "Almacén Norte",
            "location": "Calle 8 #45",
            "max_capacity": 5000,
            "manager": "R. Quispe",
            "phone": "+51 1 555 0101",
        },
    )

    # [Then]
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Almacén Norte"
    assert data["max_capacity"] == 5000
    assert data["is_active"] is True


@pytest.mark.asyncio
async def test_create_warehouse_duplicate_name(client: AsyncClient, warehouse_factory):
    """(실패) 같은 이름의 창고 생성 시 400 을 반환하는지 테스트"""
    await warehouse_factory(name="Central")

    response = await client.post("/api/v1/whs/warehouses", json={"name": "Central", "location": "Otro"})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_create_warehouse_invalid_capacity(client: AsyncClient):
    """(실패) 0 이하의 최대 수용량은 422 를 반환하는지 테스트"""
    response = await client.post(
        "/api/v1/whs/warehouses",
        json={"name": "Sur", "location": "Km 5", "max_capacity": 0},
    )

    assert response.status_code == 422
    assert "max_capacity must be greater than zero." in response.json()["reasons"]


@pytest.mark.asyncio
async def test_update_and_filter_warehouses(client: AsyncClient, warehouse_factory):
    """(성공) 창고 비활성화 후 is_active 필터로 조회하는 테스트"""
    # [Given]
    first = await warehouse_factory(name="Uno")
    await warehouse_factory(name="Dos")

    # [When]
    response = await client.put(f"/api/v1/whs/warehouses/{first['id']}", json={"is_active": False})
    assert response.status_code == 200

    response = await client.get("/api/v1/whs/warehouses", params={"is_active": True})

    # [Then]
    assert [item["name"] for item in response.json()] == ["Dos"]


@pytest.mark.asyncio
async def test_read_warehouse_not_found(client: AsyncClient):
    """(실패) 존재하지 않는 창고 조회 시 404 를 반환하는지 테스트"""
    response = await client.get("/api/v1/whs/warehouses/999")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_warehouse_with_inventory(client: AsyncClient, test_product, test_warehouse):
    """(실패) 재고 레코드가 있는 창고 삭제 시 409 를 반환하는지 테스트"""
    await client.post(
        "/api/v1/inv/movements/stock-in",
        json={
            "product_id": test_product["id"],
            "warehouse_id": test_warehouse["id"],
            "quantity": "1",
            "unit_cost": "1",
        },
    )

    response = await client.delete(f"/api/v1/whs/warehouses/{test_warehouse['id']}")

    assert response.status_code == 409
    assert response.json()["error"] == "ResourceInUse"


@pytest.mark.asyncio
async def test_delete_warehouse(client: AsyncClient, test_warehouse):
    """(성공) 재고가 없는 창고 삭제 테스트"""
    response = await client.delete(f"/api/v1/whs/warehouses/{test_warehouse['id']}")

    assert response.status_code == 204
