# app/domains/prd/routers.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from app.core.validation import ensure_valid
from app.domains.prd import crud as prd_crud, schemas as prd_schemas, validators
from app.domains.prd.models import CategoryType

router = APIRouter(
    tags=["Product Management (제품 관리)"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. categoria 엔드포인트
# =============================================================================
@router.post(
    "/categories",
    response_model=prd_schemas.CategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_category(
    category_create: prd_schemas.CategoryCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """새로운 카테고리를 생성합니다. tipo 를 생략하면 PRODUCTO 입니다."""
    ensure_valid(validators.validate_category_create(category_create))
    return await prd_crud.category.create(db=db, obj_in=category_create)


@router.get("/categories", response_model=List[prd_schemas.CategoryResponse])
async def read_categories(
    skip: int = 0,
    limit: int = 100,
    type: Optional[CategoryType] = None,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """카테고리 목록을 조회합니다. type 으로 제품/서비스 카테고리를 걸러낼 수 있습니다."""
    return await prd_crud.category.get_multi(db, skip=skip, limit=limit, type=type)


@router.get("/categories/{category_id}", response_model=prd_schemas.CategoryResponse)
async def read_category(category_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    db_category = await prd_crud.category.get(db, id=category_id)
    if db_category is None:
        raise HTTPException(status_code=404, detail="Category not found.")
    return db_category


@router.put("/categories/{category_id}", response_model=prd_schemas.CategoryResponse)
async def update_category(
    category_id: int,
    category_update: prd_schemas.CategoryUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """카테고리를 부분 업데이트합니다."""
    ensure_valid(validators.validate_category_update(category_update))
    db_category = await prd_crud.category.get(db, id=category_id)
    if db_category is None:
        raise HTTPException(status_code=404, detail="Category not found.")
    return await prd_crud.category.update(db=db, db_obj=db_category, obj_in=category_update)


@router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    """카테고리를 삭제합니다. 제품이 참조 중이면 409 를 반환합니다."""
    db_category = await prd_crud.category.delete(db, id=category_id)
    if db_category is None:
        raise HTTPException(status_code=404, detail="Category not found.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# 2. producto 엔드포인트
# =============================================================================
@router.post(
    "/products",
    response_model=prd_schemas.ProductResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_product(
    product_create: prd_schemas.ProductCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """새로운 제품을 생성합니다."""
    ensure_valid(validators.validate_product_create(product_create))
    if product_create.code and await prd_crud.product.get_by_code(db, code=product_create.code):
        raise HTTPException(status_code=400, detail="Product with this code already exists.")
    if product_create.category_id is not None and await prd_crud.category.get(db, id=product_create.category_id) is None:
        raise HTTPException(status_code=404, detail="Category not found.")
    return await prd_crud.product.create(db=db, obj_in=product_create)


@router.get("/products", response_model=List[prd_schemas.ProductResponse])
async def read_products(
    skip: int = 0,
    limit: int = 100,
    category_id: Optional[int] = None,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await prd_crud.product.get_multi(db, skip=skip, limit=limit, category_id=category_id)


@router.get("/products/{product_id}", response_model=prd_schemas.ProductResponse)
async def read_product(product_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    db_product = await prd_crud.product.get(db, id=product_id)
    if db_product is None:
        raise HTTPException(status_code=404, detail="Product not found.")
    return db_product


@router.put("/products/{product_id}", response_model=prd_schemas.ProductResponse)
async def update_product(
    product_id: int,
    product_update: prd_schemas.ProductUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """제품을 부분 업데이트합니다."""
    ensure_valid(validators.validate_product_update(product_update))
    db_product = await prd_crud.product.get(db, id=product_id)
    if db_product is None:
        raise HTTPException(status_code=404, detail="Product not found.")
    if product_update.code and product_update.code != db_product.code:
        if await prd_crud.product.get_by_code(db, code=product_update.code):
            raise HTTPException(status_code=400, detail="Product with this code already exists.")
    return await prd_crud.product.update(db=db, db_obj=db_product, obj_in=product_update)


@router.delete("/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    """제품을 삭제합니다. 재고 레코드가 있으면 409 를 반환합니다."""
    db_product = await prd_crud.product.delete(db, id=product_id)
    if db_product is None:
        raise HTTPException(status_code=404, detail="Product not found.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
