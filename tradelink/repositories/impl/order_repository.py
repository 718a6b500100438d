"""주문 리포지토리 - DB 접근 로직"""
from datetime import datetime
from typing import List

from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tradelink.core.logging import logger
from tradelink.core.exceptions import (
    AuthorizationException,
    DatabaseQueryException,
    ValidationException,
    OrderNotFoundException,
    ProductNotFoundException,
)
from tradelink.repositories.models import Order, Product

PENDING = "Pending"
ORDER_STATUSES = ("Pending", "Accepted", "Shipped", "Completed", "Cancelled")


class OrderRepository:
    """주문 데이터 액세스 레이어"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, buyer_id: str, product_id: str, quantity: int) -> Order:
        """주문 생성 (상태: Pending)"""
        try:
            product = self.db.get(Product, product_id)
            if product is None:
                raise ProductNotFoundException(product_id)

            order = Order(
                buyer_id=buyer_id,
                seller_id=product.seller_id,
                product_id=product.id,
                quantity=quantity,
                total_amount=round(product.price * quantity, 2),
                status=PENDING,
            )
            self.db.add(order)
            self.db.commit()
            self.db.refresh(order)
            logger.info(f"Order placed: {order.id} (buyer={buyer_id}, seller={order.seller_id})")
            return order
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create order: {e}")
            raise DatabaseQueryException("create_order", type(e).__name__)

    def list_for_user(self, user_id: str, role: str) -> List[Order]:
        """역할별 주문 목록 (바이어: 주문한 것, 셀러: 받은 것)"""
        column = Order.seller_id if role == "seller" else Order.buyer_id
        try:
            return list(
                self.db.execute(
                    select(Order).where(column == user_id).order_by(desc(Order.created_at))
                ).scalars()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to list orders: {e}")
            raise DatabaseQueryException("list_orders", type(e).__name__)

    def update_status(self, seller_id: str, order_id: str, status: str) -> Order:
        """주문 상태 변경

        Pending에서 처음 벗어날 때 셀러 응답 시간(시간 단위)을 기록합니다.
        """
        if status not in ORDER_STATUSES:
            raise ValidationException("status", f"must be one of {ORDER_STATUSES}")

        try:
            order = self.db.get(Order, order_id)
            if order is None:
                raise OrderNotFoundException(order_id)
            if order.seller_id != seller_id:
                raise AuthorizationException("order belongs to another seller", {"order_id": order_id})

            if order.status == PENDING and status != PENDING and order.response_time_hours is None:
                created_at = order.created_at or datetime.utcnow()
                elapsed = datetime.utcnow() - created_at
                order.response_time_hours = max(elapsed.total_seconds() / 3600, 0.0)

            order.status = status
            self.db.commit()
            self.db.refresh(order)
            logger.info(f"Order {order_id} status -> {status}")
            return order
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to update order status: {e}")
            raise DatabaseQueryException("update_order_status", type(e).__name__)
