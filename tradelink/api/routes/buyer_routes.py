"""바이어 프로필 엔드포인트"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tradelink.api.routes.matchmaking_routes import get_cache_adapter
from tradelink.core.config import settings
from tradelink.core.database import get_db
from tradelink.core.exceptions import BuyerProfileNotFoundException
from tradelink.core.logging import logger
from tradelink.core.security import CurrentUser, require_role
from tradelink.engine import CacheAdapter
from tradelink.repositories.impl.buyer_repository import BuyerRepository
from tradelink.schemas.common_schema import MessageResponse
from tradelink.schemas.profile_schema import BuyerProfileResponse, BuyerProfileUpdate
from tradelink.utils.cache_keys import buyer_profile_key, matchmaking_key

router = APIRouter(prefix="/api/buyers", tags=["buyers"])


@router.get("/profile", response_model=BuyerProfileResponse)
async def get_buyer_profile(
    user: CurrentUser = Depends(require_role("buyer")),
    db: Session = Depends(get_db),
    cache: CacheAdapter = Depends(get_cache_adapter),
):
    """바이어 프로필 조회 (Cache-Aside)"""
    cache_key = buyer_profile_key(user.id)
    cached = await cache.get(cache_key)
    if isinstance(cached, dict):
        logger.debug(f"[API] Buyer profile cache hit: {user.id}")
        return cached

    profile = BuyerRepository(db).get_profile_view(user.id)
    if profile is None:
        raise BuyerProfileNotFoundException(user.id)

    await cache.set(cache_key, profile, ttl=settings.profile_cache_ttl)
    return profile


@router.put("/profile", response_model=MessageResponse)
async def update_buyer_profile(
    payload: BuyerProfileUpdate,
    user: CurrentUser = Depends(require_role("buyer")),
    db: Session = Depends(get_db),
    cache: CacheAdapter = Depends(get_cache_adapter),
):
    """바이어 관심 상품/지역 저장

    저장 후 프로필 캐시와 매칭 결과 캐시를 함께 무효화합니다.
    """
    BuyerRepository(db).upsert_profile(user.id, payload.product_interests, payload.location)
    await cache.invalidate(buyer_profile_key(user.id), matchmaking_key(user.id))
    logger.info(f"[API] Buyer profile updated: {user.id}, interests={len(payload.product_interests)}")
    return MessageResponse(message="Buyer profile updated successfully")
