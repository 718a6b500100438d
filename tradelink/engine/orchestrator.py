"""Matchmaking Orchestrator - 매칭 엔진 진입점

바이어 한 명에 대한 매칭 파이프라인:
1. 바이어 ID 검증 (저장소 접근 전)
2. Cache 조회 (read-through, 실패 시 계산으로 진행)
3. 바이어 프로필 조회 → 관심 품목 정규화
4. 셀러 카탈로그 조회 (타임아웃 적용)
5. 점수 계산 → 정렬 → 캐시 저장
"""

import asyncio
from typing import Any, Callable, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from tradelink.core.logging import logger
from tradelink.core.exceptions import (
    BuyerProfileNotFoundException,
    CatalogTimeoutException,
    DatabaseQueryException,
)
from tradelink.core.security import SecurityValidator
from tradelink.utils.cache_keys import matchmaking_key

from .cache_adapter import CacheAdapter
from .normalizer import normalize_interests
from .ranker import build_response

T = TypeVar("T")


class MatchmakingOrchestrator:
    """매칭 엔진 오케스트레이터

    모든 협력 객체는 생성자로 주입됩니다 (전역 DB 핸들 없음).
    요청 간 공유 상태가 없으므로 요청마다 새로 만들어도 됩니다.
    """

    def __init__(
        self,
        cache: CacheAdapter,
        buyer_repository,
        catalog_fetcher,
        scorer,
        fetch_timeout_s: float = 5.0,
        cache_ttl: int = 600,
    ):
        """
        Args:
            cache: 캐시 어댑터 (get/set)
            buyer_repository: get_profile(buyer_id) 구현
            catalog_fetcher: fetch() 구현
            scorer: score(interests, seller) 구현
            fetch_timeout_s: 저장소 호출 타임아웃 (초)
            cache_ttl: 결과 캐시 TTL (초)
        """
        if buyer_repository is None:
            raise ValueError("buyer_repository must not be None")
        if catalog_fetcher is None:
            raise ValueError("catalog_fetcher must not be None")
        if scorer is None:
            raise ValueError("scorer must not be None")

        self.cache = cache or CacheAdapter(None)
        self.buyers = buyer_repository
        self.catalog = catalog_fetcher
        self.scorer = scorer
        self.fetch_timeout_s = fetch_timeout_s
        self.cache_ttl = cache_ttl

    async def find_matches(self, buyer_id: str) -> dict[str, Any]:
        """매칭 실행

        Returns:
            {"matches": [...]} (매칭이 없으면 빈 목록)

        Raises:
            InvalidIdentifierException: 바이어 ID 형식 오류
            BuyerProfileNotFoundException: 프로필 없음
            CatalogTimeoutException / DatabaseQueryException: 저장소 장애 (재시도 가능)
        """
        buyer_id = SecurityValidator.validate_identifier(buyer_id, "buyer_id")
        cache_key = matchmaking_key(buyer_id)

        cached = await self._try_cache(cache_key)
        if cached is not None:
            logger.info(f"Matchmaking served from cache: buyer_id={buyer_id}")
            return cached

        profile = await self._run_store("get_buyer_profile", self.buyers.get_profile, buyer_id)
        if profile is None:
            logger.warning(f"Buyer profile not found: buyer_id={buyer_id}")
            raise BuyerProfileNotFoundException(buyer_id)

        interests = normalize_interests(getattr(profile, "product_interests", None))
        if not interests:
            logger.info(f"Buyer has no usable interests, returning empty matches: buyer_id={buyer_id}")
            return {"matches": []}

        sellers = await self._run_store("catalog_fetch", self.catalog.fetch)

        response = build_response(self.scorer.score(interests, seller) for seller in sellers)
        logger.info(
            f"Matchmaking completed: buyer_id={buyer_id}, interests={len(interests)}, "
            f"sellers={len(sellers)}, matches={len(response['matches'])}"
        )

        await self.cache.set(cache_key, response, ttl=self.cache_ttl)
        return response

    async def _try_cache(self, cache_key: str) -> Optional[dict[str, Any]]:
        """캐시 조회 (형식이 맞지 않으면 miss 처리)"""
        cached = await self.cache.get(cache_key)
        if cached is None:
            return None
        if not isinstance(cached, dict) or not isinstance(cached.get("matches"), list):
            logger.warning(f"Invalid matchmaking cache entry ignored: key={cache_key}")
            return None
        return cached

    async def _run_store(self, operation: str, func: Callable[..., T], *args: Any) -> T:
        """동기 저장소 호출을 스레드에서 실행하고 타임아웃 적용"""
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(func, *args),
                timeout=self.fetch_timeout_s,
            )
        except asyncio.TimeoutError:
            logger.error(f"Store call timed out: operation={operation}, timeout={self.fetch_timeout_s}s")
            raise CatalogTimeoutException(self.fetch_timeout_s, {"operation": operation, "retryable": True})
        except SQLAlchemyError as e:
            logger.error(f"Store call failed: operation={operation}, error={type(e).__name__}")
            raise DatabaseQueryException(operation, type(e).__name__)
