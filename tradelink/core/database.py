"""데이터베이스 연결 및 세션 관리"""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool
from typing import Any, Generator

from tradelink.core.config import settings
from tradelink.core.logging import logger

# SQLAlchemy Base
Base = declarative_base()


def _engine_options(database_url: str) -> dict[str, Any]:
    """URL 종류별 엔진 옵션

    SQLite(로컬/테스트)는 커넥션 풀 옵션을 지원하지 않으므로
    단일 커넥션을 스레드 간 공유합니다.
    """
    if database_url.startswith("sqlite"):
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    return {
        "pool_pre_ping": True,
        "pool_recycle": 300,
        "pool_size": 5,
        "max_overflow": 10,
    }


engine = create_engine(settings.database_url, **_engine_options(settings.database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    """데이터베이스 테이블 초기화"""
    # 모델 등록 (metadata에 테이블 반영)
    from tradelink.repositories import models  # noqa: F401

    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise


def get_db() -> Generator[Session, None, None]:
    """FastAPI Dependency: DB 세션 제공"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

