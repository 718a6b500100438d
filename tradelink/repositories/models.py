"""데이터베이스 모델"""
import uuid
from datetime import datetime
from sqlalchemy import (
    Boolean, Column, DateTime, Float, ForeignKey, Index, Integer, String, Text, UniqueConstraint,
)
from tradelink.core.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    """사용자 테이블 (바이어/셀러 공통)

    셀러 프로필 정보(회사명, 경력 등)도 이 테이블에 저장됩니다.
    """

    __tablename__ = "users"

    id = Column(String(64), primary_key=True, default=_new_id)
    email = Column(String(255), nullable=False, unique=True, index=True)
    username = Column(String(64), nullable=True, unique=True, index=True)
    password_hash = Column(String(255), nullable=True)
    full_name = Column(String(255), nullable=True)
    role = Column(String(20), nullable=False, index=True)  # buyer, seller, admin
    company_name = Column(String(255), nullable=True)
    years_of_experience = Column(Integer, nullable=True)
    average_rating = Column(Float, nullable=True)
    location = Column(String(255), nullable=True)
    phone_number = Column(String(50), nullable=True)
    address = Column(String(255), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, role={self.role})>"


class BuyerProfile(Base):
    """바이어 소싱 관심사

    - product_interests: 관심 품목 목록을 JSON 텍스트로 저장 (예: '["coffee", "tea"]')
    """

    __tablename__ = "buyer_profiles"

    user_id = Column(String(64), ForeignKey("users.id"), primary_key=True)
    product_interests = Column(Text, nullable=True)
    location = Column(String(255), nullable=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<BuyerProfile(user_id={self.user_id})>"


class Product(Base):
    """셀러가 공급하는 상품"""

    __tablename__ = "products"

    id = Column(String(64), primary_key=True, default=_new_id)
    seller_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    category = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint("seller_id", "name", name="uq_products_seller_name"),
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name={self.name})>"


class Order(Base):
    """주문 테이블

    - response_time_hours: Pending에서 처음 벗어난 시점까지 걸린 시간 (셀러 응답 속도 지표)
    """

    __tablename__ = "orders"

    id = Column(String(64), primary_key=True, default=_new_id)
    buyer_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    seller_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    product_id = Column(String(64), ForeignKey("products.id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    total_amount = Column(Float, nullable=False)
    status = Column(String(20), nullable=False, default="Pending", index=True)
    response_time_hours = Column(Float, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index("idx_orders_seller_status", "seller_id", "status"),
    )

    def __repr__(self) -> str:
        return f"<Order(id={self.id}, status={self.status})>"


class Message(Base):
    """1:1 채팅 메시지"""

    __tablename__ = "messages"

    id = Column(String(64), primary_key=True, default=_new_id)
    sender_id = Column(String(64), nullable=False, index=True)
    recipient_id = Column(String(64), nullable=False, index=True)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    __table_args__ = (
        Index("idx_messages_pair_created", "sender_id", "recipient_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Message(id={self.id}, sender={self.sender_id})>"


class Quote(Base):
    """견적 요청 (바이어 → 상품 셀러)"""

    __tablename__ = "quotes"

    id = Column(String(64), primary_key=True, default=_new_id)
    product_id = Column(String(64), ForeignKey("products.id"), nullable=False)
    buyer_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    seller_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    status = Column(String(20), nullable=False, default="Pending")
    requested_at = Column(DateTime, default=datetime.utcnow, index=True)

    def __repr__(self) -> str:
        return f"<Quote(id={self.id}, status={self.status})>"
