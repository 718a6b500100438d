"""Services implementation package."""

from .cache_service import CacheService
from .chat_service import ChatConnectionManager, chat_manager, room_id_for

__all__ = ["CacheService", "ChatConnectionManager", "chat_manager", "room_id_for"]
