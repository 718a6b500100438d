"""헬스 체크 엔드포인트"""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from tradelink import __version__
from tradelink.api.routes.matchmaking_routes import get_cache_service
from tradelink.core.database import engine
from tradelink.core.logging import logger
from tradelink.schemas.common_schema import HealthResponse
from tradelink.services.impl.cache_service import CacheService

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(cache_service: Optional[CacheService] = Depends(get_cache_service)):
    """
    헬스 체크 엔드포인트

    - Redis 연결 상태 (연결 불가 시 캐시 없이 동작 중)
    - DB 연결 상태
    """
    redis_ok = cache_service.health_check() if cache_service is not None else False

    db_ok = False
    try:
        with engine.connect() as connection:
            connection.exec_driver_sql("SELECT 1")
            db_ok = True
    except SQLAlchemyError as e:
        logger.error(f"Database connection error: {type(e).__name__}")

    status = "ok" if redis_ok and db_ok else ("degraded" if redis_ok or db_ok else "error")

    return HealthResponse(
        status=status,
        timestamp=datetime.now(),
        version=__version__,
        cache=redis_ok,
        database=db_ok,
    )


@router.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "service": "TradeLink 바이어-셀러 매칭 서비스",
        "version": __version__,
        "docs": "/docs",
    }
