"""주문 엔드포인트"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tradelink.core.database import get_db
from tradelink.core.logging import logger
from tradelink.core.security import CurrentUser, SecurityValidator, get_current_user, require_role
from tradelink.repositories.impl.order_repository import OrderRepository
from tradelink.schemas.trade_schema import OrderCreate, OrderOut, OrderStatusUpdate

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post("", response_model=OrderOut, status_code=status.HTTP_201_CREATED)
async def place_order(
    payload: OrderCreate,
    user: CurrentUser = Depends(require_role("buyer")),
    db: Session = Depends(get_db),
):
    """주문 생성 (총액 = 단가 x 수량, 상태 Pending)"""
    product_id = SecurityValidator.validate_identifier(payload.product_id, "product_id")
    return OrderRepository(db).create(user.id, product_id, payload.quantity)


@router.get("", response_model=List[OrderOut])
async def list_orders(
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """내 주문 목록 (바이어는 주문한 것, 셀러는 받은 것)"""
    return OrderRepository(db).list_for_user(user.id, user.role)


@router.patch("/{order_id}/status", response_model=OrderOut)
async def update_order_status(
    order_id: str,
    payload: OrderStatusUpdate,
    user: CurrentUser = Depends(require_role("seller")),
    db: Session = Depends(get_db),
):
    order_id = SecurityValidator.validate_identifier(order_id, "order_id")
    order = OrderRepository(db).update_status(user.id, order_id, payload.status)
    logger.info(f"[API] Order {order_id} updated by seller {user.id}")
    return order
