"""Repositories implementation package."""

from .buyer_repository import BuyerRepository, ScopedBuyerProfiles
from .message_repository import MessageRepository
from .order_repository import OrderRepository
from .product_repository import ProductRepository
from .quote_repository import QuoteRepository
from .seller_repository import SellerRepository
from .user_repository import UserRepository

__all__ = [
    "BuyerRepository",
    "ScopedBuyerProfiles",
    "MessageRepository",
    "OrderRepository",
    "ProductRepository",
    "QuoteRepository",
    "SellerRepository",
    "UserRepository",
]
