"""Matchmaking Routes (Engine Layer)

HTTP Layer는 인증된 바이어 ID를 Engine Layer로 넘기는 Translator 역할만 수행합니다.
"""

import time
from typing import Optional

from fastapi import APIRouter, Depends

from tradelink.core.config import settings
from tradelink.core.database import SessionLocal
from tradelink.core.exceptions import CacheConnectionException
from tradelink.core.logging import logger
from tradelink.core.security import CurrentUser, require_role
from tradelink.engine import CacheAdapter, MatchmakingOrchestrator, SellerCatalogFetcher, build_scorer
from tradelink.repositories.impl.buyer_repository import ScopedBuyerProfiles
from tradelink.schemas.matchmaking_schema import MatchmakingResponse
from tradelink.services.impl.cache_service import CacheService

router = APIRouter(prefix="/api", tags=["matchmaking"])

# 싱글톤 서비스
_cache_service: Optional[CacheService] = None
# 연결 실패 후 다음 재시도 시각 (time.monotonic 기준)
_cache_retry_at: float = 0.0


def get_cache_service() -> Optional[CacheService]:
    """CacheService 싱글톤

    Redis에 연결할 수 없으면 None을 반환하고 캐시 없이 동작합니다.
    실패 후 cache_retry_interval_s 동안은 재연결을 시도하지 않습니다.
    """
    global _cache_service, _cache_retry_at
    if _cache_service is not None:
        return _cache_service

    now = time.monotonic()
    if now < _cache_retry_at:
        return None

    try:
        _cache_service = CacheService()
    except CacheConnectionException as e:
        _cache_retry_at = now + settings.cache_retry_interval_s
        logger.warning(
            f"[API] Cache unavailable, serving uncached for {settings.cache_retry_interval_s}s: {e.error_code}"
        )
        return None
    return _cache_service


def get_cache_adapter(
    cache_service: Optional[CacheService] = Depends(get_cache_service),
) -> CacheAdapter:
    return CacheAdapter(cache_service)


def get_orchestrator(
    cache: CacheAdapter = Depends(get_cache_adapter),
) -> MatchmakingOrchestrator:
    """요청 단위 MatchmakingOrchestrator

    저장소 호출은 타임아웃이 걸린 작업 스레드에서 실행되므로
    요청 세션 대신 호출마다 새 세션을 여는 저장소를 주입합니다.
    """
    return MatchmakingOrchestrator(
        cache=cache,
        buyer_repository=ScopedBuyerProfiles(SessionLocal),
        catalog_fetcher=SellerCatalogFetcher(SessionLocal),
        scorer=build_scorer(settings.matchmaking_score_policy),
        fetch_timeout_s=settings.matchmaking_fetch_timeout_s,
        cache_ttl=settings.matchmaking_cache_ttl,
    )


@router.get("/matchmaking", response_model=MatchmakingResponse)
async def get_matches(
    user: CurrentUser = Depends(require_role("buyer")),
    orchestrator: MatchmakingOrchestrator = Depends(get_orchestrator),
):
    """바이어-셀러 매칭 API

    Flow:
        1. 인증된 바이어 확인 (buyer 역할만)
        2. Engine에 위임 (Cache → 프로필 → 카탈로그 → 점수 → 정렬)
        3. {"matches": [...]} 반환

    오류 응답은 app.py의 예외 핸들러가 변환합니다 (404/400/503).
    """
    logger.info(f"[API] Matchmaking request: buyer_id={user.id}, policy={settings.matchmaking_score_policy}")
    return await orchestrator.find_matches(user.id)
