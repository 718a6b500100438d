"""Cache Adapter - 캐시 실패를 miss로 변환하는 어댑터"""

from typing import Any, Optional

from tradelink.core.logging import logger


class CacheAdapter:
    """Cache 서비스 어댑터

    캐시는 읽기 최적화일 뿐이므로, 여기서 발생한 모든 예외는 로깅 후 삼킵니다.
    호출 측은 항상 miss(None)를 받고 실제 계산으로 넘어갑니다.
    cache_service가 None이면 (Redis 미연결) 모든 호출이 no-op 입니다.
    """

    def __init__(self, cache_service=None):
        """
        Args:
            cache_service: get_json/set_json/delete 를 구현한 캐시 서비스 (없으면 비활성)
        """
        self.cache_service = cache_service

    @property
    def enabled(self) -> bool:
        return self.cache_service is not None

    async def get(self, key: str) -> Optional[Any]:
        """캐시 조회

        Returns:
            캐시된 값 또는 None (miss/오류)
        """
        if not self.enabled or not key:
            return None
        try:
            return self.cache_service.get_json(key)
        except Exception as e:
            logger.warning(f"Cache get failed: {type(e).__name__}: {e}")
            return None

    async def set(self, key: str, value: Any, ttl: int) -> None:
        """캐시 저장 (실패 시 로깅만)"""
        if not self.enabled or not key:
            return
        try:
            self.cache_service.set_json(key, value, ttl)
        except Exception as e:
            logger.warning(f"Cache set failed: {type(e).__name__}: {e}")

    async def invalidate(self, *keys: str) -> None:
        """캐시 무효화 (실패 시 로깅만)"""
        if not self.enabled or not keys:
            return
        try:
            self.cache_service.delete(*keys)
        except Exception as e:
            logger.warning(f"Cache invalidation failed: {type(e).__name__}: {e}")
