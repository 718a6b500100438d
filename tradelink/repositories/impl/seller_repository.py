"""셀러 프로필 리포지토리 - DB 접근 로직"""
from typing import Any, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tradelink.core.logging import logger
from tradelink.core.exceptions import (
    DatabaseQueryException,
    EmptyUpdateException,
    SellerNotFoundException,
)
from tradelink.repositories.models import User

# 수정 가능한 필드 → 컬럼 (이 목록 밖의 필드는 무시)
SELLER_PROFILE_FIELDS = {
    "company_name": User.company_name,
    "years_of_experience": User.years_of_experience,
    "location": User.location,
    "phone_number": User.phone_number,
    "address": User.address,
}


class SellerRepository:
    """셀러 프로필 데이터 액세스 레이어"""

    def __init__(self, db: Session):
        self.db = db

    def get_seller(self, seller_id: str) -> Optional[User]:
        """셀러 조회 (없거나 셀러가 아니면 None)"""
        try:
            return self.db.execute(
                select(User).where(User.id == seller_id, User.role == "seller")
            ).scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch seller: {e}")
            raise DatabaseQueryException("get_seller", type(e).__name__)

    def update_profile(self, seller_id: str, changes: dict[str, Any]) -> User:
        """허용 필드만 파라미터 바인딩으로 갱신

        Raises:
            EmptyUpdateException: 허용 필드가 하나도 없음
            SellerNotFoundException: 셀러 없음
        """
        values = {
            SELLER_PROFILE_FIELDS[name]: value
            for name, value in changes.items()
            if name in SELLER_PROFILE_FIELDS
        }
        if not values:
            raise EmptyUpdateException({"allowed_fields": sorted(SELLER_PROFILE_FIELDS)})

        try:
            result = self.db.execute(
                update(User)
                .where(User.id == seller_id, User.role == "seller")
                .values(values)
            )
            if result.rowcount == 0:
                self.db.rollback()
                raise SellerNotFoundException(seller_id)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to update seller profile: {e}")
            raise DatabaseQueryException("update_seller_profile", type(e).__name__)

        logger.info(f"Seller profile updated: {seller_id}, fields={[c.key for c in values]}")
        seller = self.get_seller(seller_id)
        if seller is None:
            raise SellerNotFoundException(seller_id)
        return seller
