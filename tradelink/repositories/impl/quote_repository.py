"""견적 요청 리포지토리 - DB 접근 로직"""
from typing import Any, List

from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, aliased

from tradelink.core.logging import logger
from tradelink.core.exceptions import DatabaseQueryException, ProductNotFoundException
from tradelink.repositories.models import Product, Quote, User

PENDING = "Pending"


class QuoteRepository:
    """견적 요청 데이터 액세스 레이어"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, buyer_id: str, product_id: str, quantity: int) -> Quote:
        """견적 요청 (상태: Pending)

        Raises:
            ProductNotFoundException: 상품이 없거나 활성 셀러의 상품이 아님
        """
        try:
            row = self.db.execute(
                select(Product.id, Product.seller_id)
                .join(User, User.id == Product.seller_id)
                .where(Product.id == product_id, User.role == "seller", User.is_active.is_(True))
            ).first()
            if row is None:
                raise ProductNotFoundException(product_id)

            quote = Quote(
                product_id=row.id,
                buyer_id=buyer_id,
                seller_id=row.seller_id,
                quantity=quantity,
                status=PENDING,
            )
            self.db.add(quote)
            self.db.commit()
            self.db.refresh(quote)
            logger.info(f"Quote requested: {quote.id} (buyer={buyer_id}, seller={quote.seller_id})")
            return quote
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create quote: {e}")
            raise DatabaseQueryException("create_quote", type(e).__name__)

    def list_for_user(self, user_id: str, role: str) -> List[dict[str, Any]]:
        """역할별 견적 목록 (최신순)

        바이어는 요청한 견적과 셀러 이름, 셀러는 받은 견적과 바이어 이름을 봅니다.
        """
        counterpart = aliased(User)
        if role == "seller":
            owner_column, counterpart_column = Quote.seller_id, Quote.buyer_id
        else:
            owner_column, counterpart_column = Quote.buyer_id, Quote.seller_id

        try:
            rows = self.db.execute(
                select(
                    Quote.id,
                    Quote.product_id,
                    Product.name.label("product_name"),
                    Quote.buyer_id,
                    Quote.seller_id,
                    counterpart.full_name.label("counterpart_name"),
                    Quote.quantity,
                    Quote.status,
                    Quote.requested_at,
                )
                .join(Product, Product.id == Quote.product_id)
                .join(counterpart, counterpart.id == counterpart_column)
                .where(owner_column == user_id)
                .order_by(desc(Quote.requested_at))
            ).all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to list quotes: {e}")
            raise DatabaseQueryException("list_quotes", type(e).__name__)

        return [dict(row._mapping) for row in rows]
