"""바이어 프로필 리포지토리 - DB 접근 로직"""
import json
from typing import Any, Callable, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tradelink.core.logging import logger
from tradelink.core.exceptions import DatabaseQueryException, NotFoundException
from tradelink.repositories.models import BuyerProfile, User


class BuyerRepository:
    """바이어 프로필 데이터 액세스 레이어"""

    def __init__(self, db: Session):
        self.db = db

    def get_profile(self, buyer_id: str) -> Optional[BuyerProfile]:
        """바이어 프로필 조회 (없으면 None)"""
        try:
            return self.db.get(BuyerProfile, buyer_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch buyer profile: {e}")
            raise DatabaseQueryException("get_buyer_profile", type(e).__name__)

    def get_profile_view(self, buyer_id: str) -> Optional[dict[str, Any]]:
        """프로필 + 사용자 정보 결합 조회 (응답용)"""
        try:
            row = self.db.execute(
                select(User.email, User.full_name, BuyerProfile.product_interests, BuyerProfile.location)
                .join(BuyerProfile, BuyerProfile.user_id == User.id)
                .where(User.id == buyer_id)
            ).first()
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch buyer profile view: {e}")
            raise DatabaseQueryException("get_buyer_profile_view", type(e).__name__)

        if row is None:
            return None

        interests: Any = []
        if row.product_interests:
            try:
                interests = json.loads(row.product_interests)
            except (json.JSONDecodeError, ValueError):
                logger.warning(f"Stored buyer interests are not valid JSON: buyer_id={buyer_id}")
                interests = []

        return {
            "user_id": buyer_id,
            "email": row.email,
            "full_name": row.full_name,
            "productInterests": interests if isinstance(interests, list) else [],
            "location": row.location or "",
        }

    def upsert_profile(self, buyer_id: str, product_interests: list[str], location: Optional[str] = None) -> BuyerProfile:
        """프로필 생성/갱신

        location이 None이면 기존 값을 유지합니다.
        """
        try:
            if self.db.get(User, buyer_id) is None:
                raise NotFoundException("User", buyer_id, "USER_NOT_FOUND")

            profile = self.db.get(BuyerProfile, buyer_id)
            if profile is None:
                profile = BuyerProfile(user_id=buyer_id)
                self.db.add(profile)

            profile.product_interests = json.dumps(product_interests, ensure_ascii=False)
            if location is not None:
                profile.location = location

            self.db.commit()
            self.db.refresh(profile)
            logger.info(f"Buyer profile saved: {buyer_id}")
            return profile
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to save buyer profile: {e}")
            raise DatabaseQueryException("upsert_buyer_profile", type(e).__name__)


class ScopedBuyerProfiles:
    """호출마다 독립 세션으로 프로필 조회 (작업 스레드용)

    반환된 프로필은 세션이 닫힌 detached 객체이며, 컬럼 값만 읽습니다.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get_profile(self, buyer_id: str) -> Optional[BuyerProfile]:
        with self.session_factory() as db:
            return BuyerRepository(db).get_profile(buyer_id)
