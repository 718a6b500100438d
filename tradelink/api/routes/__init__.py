"""API routes package."""

from .matchmaking_routes import router as matchmaking_router, get_cache_service, get_cache_adapter
from .buyer_routes import router as buyer_router
from .seller_routes import router as seller_router
from .product_routes import router as product_router
from .order_routes import router as order_router
from .message_routes import router as message_router
from .chat_routes import router as chat_router
from .health_routes import router as health_router
from .auth_routes import router as auth_router
from .catalog_routes import router as catalog_router
from .quote_routes import router as quote_router

__all__ = [
    "health_router",
    "matchmaking_router",
    "buyer_router",
    "seller_router",
    "product_router",
    "order_router",
    "message_router",
    "chat_router",
    "auth_router",
    "catalog_router",
    "quote_router",
    "get_cache_service",
    "get_cache_adapter",
]
