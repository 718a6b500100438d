"""메시지 리포지토리 - DB 접근 로직"""
from typing import Any, List

from sqlalchemy import and_, desc, func, or_, select, union_all
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tradelink.core.logging import logger
from tradelink.core.exceptions import DatabaseQueryException
from tradelink.repositories.models import Message


class MessageRepository:
    """채팅 메시지 데이터 액세스 레이어"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, sender_id: str, recipient_id: str, content: str) -> Message:
        """메시지 저장"""
        try:
            message = Message(sender_id=sender_id, recipient_id=recipient_id, content=content)
            self.db.add(message)
            self.db.commit()
            self.db.refresh(message)
            logger.debug(f"Message saved: {message.id}")
            return message
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to save message: {e}")
            raise DatabaseQueryException("create_message", type(e).__name__)

    def get_conversation(self, user_id: str, other_id: str, limit: int = 50) -> List[Message]:
        """두 사용자 간 최근 메시지 (오래된 순)"""
        try:
            rows = list(
                self.db.execute(
                    select(Message)
                    .where(
                        or_(
                            and_(Message.sender_id == user_id, Message.recipient_id == other_id),
                            and_(Message.sender_id == other_id, Message.recipient_id == user_id),
                        )
                    )
                    .order_by(desc(Message.created_at))
                    .limit(limit)
                ).scalars()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch conversation: {e}")
            raise DatabaseQueryException("get_conversation", type(e).__name__)

        rows.reverse()
        return rows

    def list_partners(self, user_id: str) -> List[dict[str, Any]]:
        """대화 상대 목록 ([{"user_id", "last_message_at"}, ...], 최근 순)"""
        sent = select(
            Message.recipient_id.label("partner_id"), Message.created_at.label("created_at")
        ).where(Message.sender_id == user_id)
        received = select(
            Message.sender_id.label("partner_id"), Message.created_at.label("created_at")
        ).where(Message.recipient_id == user_id)
        pairs = union_all(sent, received).subquery()

        try:
            rows = self.db.execute(
                select(pairs.c.partner_id, func.max(pairs.c.created_at).label("last_message_at"))
                .group_by(pairs.c.partner_id)
                .order_by(desc("last_message_at"))
            ).all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to list conversation partners: {e}")
            raise DatabaseQueryException("list_partners", type(e).__name__)

        return [
            {"user_id": row.partner_id, "last_message_at": row.last_message_at}
            for row in rows
        ]
