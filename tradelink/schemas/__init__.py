"""Pydantic 스키마 - export only."""

from .common_schema import ErrorResponse, HealthResponse, MessageResponse
from .matchmaking_schema import MatchDetailsOut, MatchmakingResponse, MatchResultOut, PerformanceMetricsOut
from .message_schema import (
    ConversationListResponse,
    ConversationPartner,
    MessageCreate,
    MessageOut,
    PresenceResponse,
)
from .profile_schema import (
    BuyerProfileResponse,
    BuyerProfileUpdate,
    SellerProfileResponse,
    SellerProfileUpdate,
)
from .auth_schema import LoginRequest, RegisterRequest, RegisterResponse, TokenResponse
from .trade_schema import (
    CatalogProductOut,
    OrderCreate,
    OrderOut,
    OrderStatusUpdate,
    ProductCreate,
    ProductOut,
    ProductSellerOut,
    QuoteCreate,
    QuoteOut,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
    "MatchDetailsOut",
    "MatchmakingResponse",
    "MatchResultOut",
    "PerformanceMetricsOut",
    "ConversationListResponse",
    "ConversationPartner",
    "MessageCreate",
    "MessageOut",
    "PresenceResponse",
    "BuyerProfileResponse",
    "BuyerProfileUpdate",
    "SellerProfileResponse",
    "SellerProfileUpdate",
    "OrderCreate",
    "OrderOut",
    "OrderStatusUpdate",
    "ProductCreate",
    "ProductOut",
    "CatalogProductOut",
    "ProductSellerOut",
    "QuoteCreate",
    "QuoteOut",
    "LoginRequest",
    "RegisterRequest",
    "RegisterResponse",
    "TokenResponse",
]
