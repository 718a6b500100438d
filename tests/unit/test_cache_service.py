"""캐시 서비스 유닛 테스트 (Mock 사용)"""
import pytest
from unittest.mock import MagicMock, patch

from tradelink.api.routes import matchmaking_routes
from tradelink.services import CacheService
from tradelink.core.exceptions import (
    CacheConnectionException,
    CacheException,
    CacheSerializationException,
)


def _service(mock_redis) -> tuple[CacheService, MagicMock]:
    mock_client = MagicMock()
    mock_client.ping.return_value = True
    mock_redis.from_url.return_value = mock_client
    return CacheService(), mock_client


class TestCacheService:
    """캐시 서비스 테스트"""

    @patch('tradelink.services.impl.cache_service.Redis')
    def test_init_success(self, mock_redis):
        """Redis 연결 성공"""
        mock_redis.from_url.return_value.ping.return_value = True

        service = CacheService()
        assert service.redis_client is not None
        mock_redis.from_url.return_value.ping.assert_called_once()

    @patch('tradelink.services.impl.cache_service.Redis')
    def test_init_failure(self, mock_redis):
        """Redis 연결 실패"""
        mock_redis.from_url.return_value.ping.side_effect = Exception("Connection failed")

        with pytest.raises(CacheException) as exc_info:
            CacheService()
        assert exc_info.value.error_code == "CACHE_CONN_FAILED"

    @patch('tradelink.services.impl.cache_service.Redis')
    def test_get_json_hit(self, mock_redis):
        """캐시 히트"""
        service, client = _service(mock_redis)
        client.get.return_value = '{"matches": [{"seller_id": "s1", "score": 2}]}'

        result = service.get_json("matchmaking_b1")

        assert result == {"matches": [{"seller_id": "s1", "score": 2}]}
        client.get.assert_called_once_with("matchmaking_b1")

    @patch('tradelink.services.impl.cache_service.Redis')
    def test_get_json_miss(self, mock_redis):
        """캐시 미스"""
        service, client = _service(mock_redis)
        client.get.return_value = None

        assert service.get_json("buyer_profile_b1") is None

    @patch('tradelink.services.impl.cache_service.Redis')
    def test_get_json_corrupted(self, mock_redis):
        """JSON이 아닌 값"""
        service, client = _service(mock_redis)
        client.get.return_value = "not-json{"

        with pytest.raises(CacheSerializationException):
            service.get_json("buyer_profile_b1")

    @patch('tradelink.services.impl.cache_service.Redis')
    def test_get_json_read_error(self, mock_redis):
        service, client = _service(mock_redis)
        client.get.side_effect = Exception("timeout")

        with pytest.raises(CacheConnectionException) as exc_info:
            service.get_json("buyer_profile_b1")
        assert exc_info.value.error_code == "CACHE_READ_FAILED"

    @patch('tradelink.services.impl.cache_service.Redis')
    def test_set_json_uses_ttl(self, mock_redis):
        """캐시 저장 (setex)"""
        service, client = _service(mock_redis)

        assert service.set_json("buyer_profile_b1", {"productInterests": ["tea"]}, ttl=3600) is True

        key, ttl, payload = client.setex.call_args[0]
        assert key == "buyer_profile_b1"
        assert ttl == 3600
        assert '"productInterests"' in payload

    @patch('tradelink.services.impl.cache_service.Redis')
    def test_set_json_unserializable(self, mock_redis):
        service, client = _service(mock_redis)

        with pytest.raises(CacheSerializationException):
            service.set_json("k_1", {"bad": object()}, ttl=10)
        client.setex.assert_not_called()

    @patch('tradelink.services.impl.cache_service.Redis')
    def test_delete(self, mock_redis):
        service, client = _service(mock_redis)
        client.delete.return_value = 2

        assert service.delete("buyer_profile_b1", "matchmaking_b1") == 2
        client.delete.assert_called_once_with("buyer_profile_b1", "matchmaking_b1")

    @patch('tradelink.services.impl.cache_service.Redis')
    def test_delete_no_keys(self, mock_redis):
        service, client = _service(mock_redis)

        assert service.delete() == 0
        client.delete.assert_not_called()

    @patch('tradelink.services.impl.cache_service.Redis')
    def test_health_check(self, mock_redis):
        """헬스 체크"""
        service, client = _service(mock_redis)
        assert service.health_check() is True

        client.ping.side_effect = Exception("down")
        assert service.health_check() is False


class TestGetCacheService:
    """라우터용 CacheService 싱글톤 (연결 실패 시 재시도 간격 유지)"""

    @pytest.fixture(autouse=True)
    def _reset_singleton(self, monkeypatch):
        monkeypatch.setattr(matchmaking_routes, "_cache_service", None)
        monkeypatch.setattr(matchmaking_routes, "_cache_retry_at", 0.0)

    @patch('tradelink.api.routes.matchmaking_routes.CacheService')
    def test_failure_not_retried_within_interval(self, mock_service):
        mock_service.side_effect = CacheConnectionException("down", "CACHE_CONN_FAILED")

        assert matchmaking_routes.get_cache_service() is None
        assert matchmaking_routes.get_cache_service() is None
        assert mock_service.call_count == 1

    @patch('tradelink.api.routes.matchmaking_routes.CacheService')
    def test_retries_after_interval(self, mock_service, monkeypatch):
        mock_service.side_effect = [CacheConnectionException("down", "CACHE_CONN_FAILED"), MagicMock()]

        assert matchmaking_routes.get_cache_service() is None
        monkeypatch.setattr(matchmaking_routes, "_cache_retry_at", 0.0)

        assert matchmaking_routes.get_cache_service() is not None
        assert mock_service.call_count == 2

    @patch('tradelink.api.routes.matchmaking_routes.CacheService')
    def test_connected_service_reused(self, mock_service):
        first = matchmaking_routes.get_cache_service()

        assert matchmaking_routes.get_cache_service() is first
        mock_service.assert_called_once()
