"""Redis 캐시 서비스 - 캐싱 로직만 담당"""
import json
from typing import Any, Optional
from redis import Redis

from tradelink.core.config import settings
from tradelink.core.logging import logger
from tradelink.core.exceptions import (
    CacheConnectionException,
    CacheSerializationException,
)


class CacheService:
    """Redis 캐시 관리 서비스 (JSON key-value)"""

    def __init__(self):
        """Redis 클라이언트 초기화"""
        try:
            self.redis_client = Redis.from_url(
                settings.redis_url,
                decode_responses=True,
                socket_connect_timeout=settings.redis_socket_timeout,
                socket_timeout=settings.redis_socket_timeout,
            )
            # 연결 테스트
            self.redis_client.ping()
            logger.info("Redis connection established")
        except Exception as e:
            logger.error(f"Failed to connect to Redis: {e}")
            raise CacheConnectionException(
                message="Redis connection failed",
                error_code="CACHE_CONN_FAILED",
                details={"reason": str(e)}
            )

    def get_json(self, key: str) -> Optional[Any]:
        """
        캐시 조회

        Args:
            key: 캐시 키

        Returns:
            역직렬화된 값 또는 None
        """
        try:
            cached_data = self.redis_client.get(key)
        except Exception as e:
            logger.error(f"Cache read error: {e}")
            raise CacheConnectionException(
                message="Cache read failed",
                error_code="CACHE_READ_FAILED",
                details={"key": key, "error": str(e)}
            )

        if cached_data is None:
            logger.info(f"Cache miss for key: {key}")
            return None

        logger.info(f"Cache hit for key: {key}")
        try:
            return json.loads(cached_data)
        except (json.JSONDecodeError, ValueError) as e:
            logger.error(f"Failed to deserialize cache: {e}")
            raise CacheSerializationException("deserialize", str(e), {"key": key})

    def set_json(self, key: str, value: Any, ttl: int) -> bool:
        """
        캐시 저장

        Args:
            key: 캐시 키
            value: JSON 직렬화 가능한 값
            ttl: 만료 시간 (초)

        Returns:
            성공 여부
        """
        try:
            payload = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize cache data: {e}")
            raise CacheSerializationException("serialize", str(e), {"key": key})

        try:
            self.redis_client.setex(key, ttl, payload)
        except Exception as e:
            logger.error(f"Cache write error: {e}")
            raise CacheConnectionException(
                message="Failed to write cache",
                error_code="CACHE_WRITE_FAILED",
                details={"key": key, "error": str(e)}
            )

        logger.info(f"Cache set for key: {key}, TTL: {ttl}s")
        return True

    def delete(self, *keys: str) -> int:
        """
        캐시 삭제

        Returns:
            삭제된 키 개수
        """
        if not keys:
            return 0
        try:
            result = self.redis_client.delete(*keys)
            logger.info(f"Cache deleted for keys: {', '.join(keys)}")
            return int(result)
        except Exception as e:
            logger.error(f"Cache delete error: {e}")
            raise CacheConnectionException(
                message="Failed to delete cache",
                error_code="CACHE_DELETE_FAILED",
                details={"keys": list(keys), "error": str(e)}
            )

    def health_check(self) -> bool:
        """Redis 연결 상태 확인"""
        try:
            self.redis_client.ping()
            return True
        except Exception:
            return False
