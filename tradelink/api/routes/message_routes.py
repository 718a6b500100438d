"""메시지 REST 엔드포인트

실시간 전달은 chat_routes의 WebSocket 방으로 함께 브로드캐스트합니다.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tradelink.core.config import settings
from tradelink.core.database import get_db
from tradelink.core.logging import logger
from tradelink.core.security import CurrentUser, SecurityValidator, get_current_user
from tradelink.repositories.impl.message_repository import MessageRepository
from tradelink.schemas.message_schema import ConversationListResponse, MessageCreate, MessageOut
from tradelink.services.impl.chat_service import chat_manager, room_id_for

router = APIRouter(prefix="/api/messages", tags=["messages"])


@router.post("", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
async def send_message(
    payload: MessageCreate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    recipient_id = SecurityValidator.validate_identifier(payload.recipient_id, "recipient_id")
    message = MessageRepository(db).create(user.id, recipient_id, payload.content)

    out = MessageOut.model_validate(message)
    delivered = await chat_manager.broadcast(
        room_id_for(user.id, recipient_id),
        {"type": "message", "message": out.model_dump(mode="json")},
    )
    logger.debug(f"[API] Message {out.id} delivered to {delivered} live connection(s)")
    return out


@router.get("", response_model=ConversationListResponse)
async def list_conversations(
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """대화 상대 목록 (최근 메시지 순)"""
    return ConversationListResponse(conversations=MessageRepository(db).list_partners(user.id))


@router.get("/{user_id}", response_model=List[MessageOut])
async def get_conversation(
    user_id: str,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """상대방과의 최근 대화 (오래된 순)"""
    other_id = SecurityValidator.validate_identifier(user_id, "user_id")
    return MessageRepository(db).get_conversation(user.id, other_id, limit=settings.chat_history_limit)
