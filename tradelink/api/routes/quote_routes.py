"""견적 요청 엔드포인트"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tradelink.core.database import get_db
from tradelink.core.logging import logger
from tradelink.core.security import CurrentUser, SecurityValidator, require_role
from tradelink.repositories.impl.quote_repository import QuoteRepository
from tradelink.schemas.trade_schema import QuoteCreate, QuoteOut

router = APIRouter(prefix="/api/quotes", tags=["quotes"])


@router.post("", response_model=QuoteOut, status_code=status.HTTP_201_CREATED)
async def request_quote(
    payload: QuoteCreate,
    user: CurrentUser = Depends(require_role("buyer")),
    db: Session = Depends(get_db),
):
    """견적 요청 (상태 Pending, 상품 없으면 404)"""
    product_id = SecurityValidator.validate_identifier(payload.product_id, "product_id")
    quote = QuoteRepository(db).create(user.id, product_id, payload.quantity)
    logger.info(f"[API] Quote {quote.id} requested by buyer {user.id}")
    return quote


@router.get("", response_model=List[QuoteOut])
async def list_quotes(
    user: CurrentUser = Depends(require_role("buyer", "seller")),
    db: Session = Depends(get_db),
):
    """내 견적 목록 (바이어: 요청한 것, 셀러: 받은 것)"""
    return QuoteRepository(db).list_for_user(user.id, user.role)
