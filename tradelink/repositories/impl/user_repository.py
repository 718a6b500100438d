"""사용자 계정 리포지토리 - 회원가입/로그인용 DB 접근"""
from typing import Optional

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from tradelink.core.logging import logger
from tradelink.core.exceptions import ConflictException, DatabaseQueryException
from tradelink.repositories.models import User


class UserRepository:
    """사용자 계정 데이터 액세스 레이어"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_username(self, username: str) -> Optional[User]:
        try:
            return self.db.execute(select(User).where(User.username == username)).scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch user by username: {e}")
            raise DatabaseQueryException("get_user_by_username", type(e).__name__)

    def create(
        self,
        username: str,
        email: str,
        password_hash: str,
        role: str,
        full_name: str,
        company_name: Optional[str] = None,
        phone_number: Optional[str] = None,
        address: Optional[str] = None,
    ) -> User:
        """계정 생성

        Raises:
            ConflictException: username 또는 email 중복
        """
        try:
            existing = self.db.execute(
                select(User.id).where(
                    or_(User.username == username, func.lower(User.email) == email.lower())
                )
            ).first()
            if existing is not None:
                raise ConflictException("Username or email already exists", {"username": username})

            user = User(
                username=username,
                email=email,
                password_hash=password_hash,
                role=role,
                full_name=full_name,
                company_name=company_name,
                phone_number=phone_number,
                address=address,
            )
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            logger.info(f"User registered: {user.id} (role={role})")
            return user
        except IntegrityError:
            self.db.rollback()
            raise ConflictException("Username or email already exists", {"username": username})
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create user: {e}")
            raise DatabaseQueryException("create_user", type(e).__name__)
