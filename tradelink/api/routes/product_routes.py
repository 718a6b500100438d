"""셀러 상품 엔드포인트"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tradelink.core.database import get_db
from tradelink.core.security import CurrentUser, SecurityValidator, require_role
from tradelink.repositories.impl.product_repository import ProductRepository
from tradelink.schemas.common_schema import MessageResponse
from tradelink.schemas.trade_schema import ProductCreate, ProductOut

router = APIRouter(prefix="/api/seller-products", tags=["products"])


@router.post("", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
async def create_product(
    payload: ProductCreate,
    user: CurrentUser = Depends(require_role("seller")),
    db: Session = Depends(get_db),
):
    """상품 등록 (같은 셀러 내 이름 중복 시 409)"""
    return ProductRepository(db).create(
        seller_id=user.id,
        name=payload.name,
        price=payload.price,
        stock=payload.stock,
        category=payload.category,
        description=payload.description,
    )


@router.get("", response_model=List[ProductOut])
async def list_products(
    user: CurrentUser = Depends(require_role("seller")),
    db: Session = Depends(get_db),
):
    return ProductRepository(db).list_by_seller(user.id)


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: str,
    user: CurrentUser = Depends(require_role("seller")),
    db: Session = Depends(get_db),
):
    product_id = SecurityValidator.validate_identifier(product_id, "product_id")
    ProductRepository(db).delete(user.id, product_id)
    return MessageResponse(message="Product deleted successfully")
