"""실시간 채팅 연결 관리 - 방(room) 단위 브로드캐스트와 접속 상태"""
from collections import defaultdict
from typing import Any

from fastapi import WebSocket

from tradelink.core.logging import logger


def room_id_for(user_a: str, user_b: str) -> str:
    """1:1 대화방 ID (정렬된 두 사용자 ID를 '-'로 연결)"""
    return "-".join(sorted([user_a, user_b]))


class ChatConnectionManager:
    """WebSocket 연결/방 관리자 (단일 프로세스 pub/sub)

    전달 보장, 순서 프로토콜, 재연결 백필은 없습니다.
    재접속한 클라이언트는 join_chat 응답의 history로 최근 메시지를 받습니다.
    """

    def __init__(self):
        self._connections: dict[str, set[WebSocket]] = defaultdict(set)
        self._rooms: dict[str, set[WebSocket]] = defaultdict(set)
        self._memberships: dict[WebSocket, set[str]] = defaultdict(set)

    async def connect(self, user_id: str, websocket: WebSocket) -> None:
        await websocket.accept()
        self._connections[user_id].add(websocket)
        logger.info(f"[Chat] User connected: {user_id}")

    def disconnect(self, user_id: str, websocket: WebSocket) -> set[str]:
        """연결 해제

        Returns:
            이 연결이 속해 있던 방 ID 목록
        """
        self._connections[user_id].discard(websocket)
        if not self._connections[user_id]:
            del self._connections[user_id]

        rooms = self._memberships.pop(websocket, set())
        for room_id in rooms:
            self._rooms[room_id].discard(websocket)
            if not self._rooms[room_id]:
                del self._rooms[room_id]

        logger.info(f"[Chat] User disconnected: {user_id}")
        return rooms

    def join(self, room_id: str, websocket: WebSocket) -> None:
        self._rooms[room_id].add(websocket)
        self._memberships[websocket].add(room_id)

    def is_online(self, user_id: str) -> bool:
        return bool(self._connections.get(user_id))

    def room_size(self, room_id: str) -> int:
        return len(self._rooms.get(room_id, ()))

    async def broadcast(self, room_id: str, payload: dict[str, Any]) -> int:
        """방의 모든 연결에 전송

        Returns:
            전송 성공 수
        """
        delivered = 0
        for websocket in list(self._rooms.get(room_id, ())):
            try:
                await websocket.send_json(payload)
                delivered += 1
            except Exception as e:
                logger.warning(f"[Chat] Failed to deliver to room {room_id}: {type(e).__name__}")
        return delivered


chat_manager = ChatConnectionManager()
