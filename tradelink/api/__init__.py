"""API 엔드포인트 패키지 - export only."""

from .routes import (
    health_router,
    matchmaking_router,
    buyer_router,
    seller_router,
    product_router,
    order_router,
    message_router,
    chat_router,
    auth_router,
    catalog_router,
    quote_router,
    get_cache_service,
)

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
]
