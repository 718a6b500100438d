"""공개 상품 카탈로그 엔드포인트 (인증 불필요)"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from tradelink.core.database import get_db
from tradelink.core.security import SecurityValidator
from tradelink.repositories.impl.product_repository import ProductRepository
from tradelink.schemas.trade_schema import CatalogProductOut, ProductSellerOut

router = APIRouter(prefix="/api/products", tags=["catalog"])


@router.get("", response_model=List[CatalogProductOut])
async def list_catalog(
    category: Optional[str] = Query(None, max_length=100),
    db: Session = Depends(get_db),
):
    """활성 셀러의 상품 목록 (없으면 빈 목록)"""
    return ProductRepository(db).list_catalog(category)


@router.get("/{product_id}", response_model=CatalogProductOut)
async def get_catalog_product(product_id: str, db: Session = Depends(get_db)):
    product_id = SecurityValidator.validate_identifier(product_id, "product_id")
    return ProductRepository(db).get_catalog_entry(product_id)


@router.get("/{product_id}/sellers", response_model=List[ProductSellerOut])
async def list_product_sellers(product_id: str, db: Session = Depends(get_db)):
    """같은 상품을 공급하는 셀러 (단가 오름차순)"""
    product_id = SecurityValidator.validate_identifier(product_id, "product_id")
    return ProductRepository(db).list_sellers_for(product_id)
