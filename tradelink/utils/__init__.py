"""공용 유틸리티"""

from .cache_keys import build_cache_key, buyer_profile_key, matchmaking_key, seller_profile_key

__all__ = ["build_cache_key", "buyer_profile_key", "matchmaking_key", "seller_profile_key"]
