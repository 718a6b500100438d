"""셀러 프로필 엔드포인트"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tradelink.api.routes.matchmaking_routes import get_cache_adapter
from tradelink.core.config import settings
from tradelink.core.database import get_db
from tradelink.core.exceptions import SellerNotFoundException
from tradelink.core.logging import logger
from tradelink.core.security import CurrentUser, require_role
from tradelink.engine import CacheAdapter
from tradelink.repositories.impl.seller_repository import SellerRepository
from tradelink.repositories.models import User
from tradelink.schemas.profile_schema import SellerProfileResponse, SellerProfileUpdate
from tradelink.utils.cache_keys import seller_profile_key

router = APIRouter(prefix="/api/sellers", tags=["sellers"])


def _to_response(seller: User) -> SellerProfileResponse:
    return SellerProfileResponse(
        seller_id=seller.id,
        company_name=seller.company_name or "",
        years_of_experience=seller.years_of_experience or 0,
        location=seller.location or "",
        phone_number=seller.phone_number or "",
        address=seller.address or "",
    )


@router.get("/profile", response_model=SellerProfileResponse)
async def get_seller_profile(
    user: CurrentUser = Depends(require_role("seller")),
    db: Session = Depends(get_db),
    cache: CacheAdapter = Depends(get_cache_adapter),
):
    cache_key = seller_profile_key(user.id)
    cached = await cache.get(cache_key)
    if isinstance(cached, dict):
        return cached

    seller = SellerRepository(db).get_seller(user.id)
    if seller is None:
        raise SellerNotFoundException(user.id)

    response = _to_response(seller)
    await cache.set(cache_key, response.model_dump(), ttl=settings.profile_cache_ttl)
    return response


@router.put("/profile", response_model=SellerProfileResponse)
async def update_seller_profile(
    payload: SellerProfileUpdate,
    user: CurrentUser = Depends(require_role("seller")),
    db: Session = Depends(get_db),
    cache: CacheAdapter = Depends(get_cache_adapter),
):
    """셀러 프로필 부분 수정

    요청에 포함된 필드만 갱신합니다. 허용 필드가 없으면 400.
    """
    seller = SellerRepository(db).update_profile(user.id, payload.model_dump(exclude_unset=True))
    await cache.invalidate(seller_profile_key(user.id))
    logger.info(f"[API] Seller profile updated: {user.id}")
    return _to_response(seller)
