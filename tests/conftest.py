"""전역 테스트 설정

역할:
- 테스트 환경 구성 (in-memory SQLite, 테스트 JWT 비밀키)
- 공통 Fake 캐시 주입
- DB 세션 / API 클라이언트 픽스처

설정 객체는 import 시점에 생성되므로 환경 변수는 tradelink import 전에 지정합니다.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import pytest

os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["REDIS_URL"] = "redis://localhost:6379/15"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"

# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fastapi.testclient import TestClient  # noqa: E402

from tradelink.app import app  # noqa: E402
from tradelink.api.routes.matchmaking_routes import get_cache_service  # noqa: E402
from tradelink.core.database import Base, SessionLocal, engine  # noqa: E402
from tradelink.core.exceptions import CacheConnectionException  # noqa: E402
from tradelink.repositories import models  # noqa: E402,F401


@dataclass
class FakeCacheService:
    """CacheService 대체 (메모리 dict)

    - get_json/set_json/delete/health_check 지원
    - fail=True 이면 모든 호출이 CacheConnectionException
    """

    store: dict[str, Any] = field(default_factory=dict)
    fail: bool = False
    set_calls: int = 0

    def _check(self) -> None:
        if self.fail:
            raise CacheConnectionException("cache down", "CACHE_READ_FAILED")

    def get_json(self, key: str) -> Optional[Any]:
        self._check()
        return self.store.get(key)

    def set_json(self, key: str, value: Any, ttl: int) -> bool:
        _ = ttl
        self._check()
        self.set_calls += 1
        self.store[key] = value
        return True

    def delete(self, *keys: str) -> int:
        self._check()
        return sum(1 for key in keys if self.store.pop(key, None) is not None)

    def health_check(self) -> bool:
        return not self.fail


@pytest.fixture
def fake_cache() -> FakeCacheService:
    return FakeCacheService()


@pytest.fixture
def db_session():
    """테이블 생성 → 세션 제공 → 정리"""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session, fake_cache):
    """FastAPI TestClient (Redis 대신 FakeCacheService 주입)"""
    app.dependency_overrides[get_cache_service] = lambda: fake_cache
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

