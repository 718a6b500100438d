"""실시간 채팅 (WebSocket)

Events (client → server):
    {"type": "join_chat", "recipient_id": "..."}
    {"type": "send_message", "recipient_id": "...", "text": "..."}

Events (server → client):
    history, message, presence, error
"""
import json
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, WebSocket, WebSocketDisconnect, status
from sqlalchemy.orm import Session

from tradelink.core.config import settings
from tradelink.core.database import get_db
from tradelink.core.exceptions import AuthenticationException, TradeLinkException
from tradelink.core.logging import logger
from tradelink.core.security import CurrentUser, SecurityValidator, decode_access_token, get_current_user
from tradelink.repositories.impl.message_repository import MessageRepository
from tradelink.schemas.message_schema import MAX_MESSAGE_LENGTH, MessageOut, PresenceResponse
from tradelink.services.impl.chat_service import chat_manager, room_id_for

router = APIRouter(tags=["chat"])


def _serialize(message) -> dict[str, Any]:
    return MessageOut.model_validate(message).model_dump(mode="json")


async def _join_chat(user: CurrentUser, websocket: WebSocket, event: dict, repository: MessageRepository) -> None:
    recipient_id = SecurityValidator.validate_identifier(event.get("recipient_id"), "recipient_id")
    room_id = room_id_for(user.id, recipient_id)
    chat_manager.join(room_id, websocket)

    history = repository.get_conversation(user.id, recipient_id, limit=settings.chat_history_limit)
    await websocket.send_json({
        "type": "history",
        "room_id": room_id,
        "messages": [_serialize(m) for m in history],
    })
    await chat_manager.broadcast(room_id, {"type": "presence", "user_id": user.id, "online": True})


async def _send_message(user: CurrentUser, websocket: WebSocket, event: dict, repository: MessageRepository) -> None:
    recipient_id = SecurityValidator.validate_identifier(event.get("recipient_id"), "recipient_id")
    text = event.get("text")
    if not isinstance(text, str) or not text.strip() or len(text) > MAX_MESSAGE_LENGTH:
        await websocket.send_json({"type": "error", "error_code": "VALIDATION_ERROR", "message": "text is invalid"})
        return

    room_id = room_id_for(user.id, recipient_id)
    chat_manager.join(room_id, websocket)

    message = repository.create(user.id, recipient_id, text)
    await chat_manager.broadcast(room_id, {"type": "message", "message": _serialize(message)})


EVENT_HANDLERS = {
    "join_chat": _join_chat,
    "send_message": _send_message,
}


@router.websocket("/ws/chat")
async def chat_socket(
    websocket: WebSocket,
    token: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """채팅 WebSocket (토큰은 query string으로 전달)"""
    try:
        user = decode_access_token(token)
    except AuthenticationException as e:
        logger.warning(f"[Chat] Rejected connection: {e.message}")
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await chat_manager.connect(user.id, websocket)
    repository = MessageRepository(db)

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                event = json.loads(raw)
            except json.JSONDecodeError:
                await websocket.send_json({"type": "error", "error_code": "BAD_EVENT", "message": "event must be JSON"})
                continue

            event_type = event.get("type") if isinstance(event, dict) else None
            handler = EVENT_HANDLERS.get(event_type) if isinstance(event_type, str) else None
            if handler is None:
                await websocket.send_json({"type": "error", "error_code": "BAD_EVENT", "message": "unknown event type"})
                continue

            try:
                await handler(user, websocket, event, repository)
            except TradeLinkException as e:
                await websocket.send_json({"type": "error", "error_code": e.error_code, "message": e.message})
    except WebSocketDisconnect:
        logger.info(f"[Chat] Socket closed by client: {user.id}")
    except Exception as e:
        logger.error(f"[Chat] Socket handler failed: user_id={user.id}, error={type(e).__name__}")
        raise
    finally:
        # 어떤 경로로 끝나든 연결/방 정리
        rooms = chat_manager.disconnect(user.id, websocket)
        online = chat_manager.is_online(user.id)
        for room_id in rooms:
            await chat_manager.broadcast(room_id, {"type": "presence", "user_id": user.id, "online": online})


@router.get("/api/chat/presence/{user_id}", response_model=PresenceResponse)
async def get_presence(user_id: str, user: CurrentUser = Depends(get_current_user)):
    user_id = SecurityValidator.validate_identifier(user_id, "user_id")
    return PresenceResponse(user_id=user_id, online=chat_manager.is_online(user_id))
