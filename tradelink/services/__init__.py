"""비즈니스 로직 서비스 - export only."""

from .impl import CacheService, ChatConnectionManager, chat_manager, room_id_for

__all__ = ["CacheService", "ChatConnectionManager", "chat_manager", "room_id_for"]
