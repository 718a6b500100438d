"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings
from pydantic import field_validator


SCORE_POLICIES = ("overlap_count", "weighted_composite")


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 데이터베이스
    database_url: str = "sqlite:///./tradelink.db"

    # Redis
    redis_url: str = "redis://localhost:6379/0"
    redis_socket_timeout: float = 2.0
    cache_retry_interval_s: float = 30.0  # 연결 실패 후 재시도 간격
    profile_cache_ttl: int = 3600  # 1시간
    matchmaking_cache_ttl: int = 600  # 10분

    # 인증 (JWT)
    jwt_secret: str = "change-me"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60
    bcrypt_rounds: int = 12

    # 매칭 엔진
    # - overlap_count: 공통 관심 품목 수
    # - weighted_composite: 품목 0.5 + 경력 0.25 + 실적 0.25
    matchmaking_score_policy: str = "weighted_composite"
    matchmaking_fetch_timeout_s: float = 5.0

    # 채팅
    chat_history_limit: int = 50

    # API
    api_title: str = "TradeLink API"
    api_version: str = "1.0.0"
    api_description: str = "바이어-셀러 매칭 및 거래 지원 백엔드"

    # 로깅
    log_level: str = "INFO"

    @field_validator("profile_cache_ttl", "matchmaking_cache_ttl")
    @classmethod
    def validate_cache_ttl(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("cache ttl must be positive")
        return v

    @field_validator("matchmaking_fetch_timeout_s", "redis_socket_timeout", "cache_retry_interval_s")
    @classmethod
    def validate_timeouts(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeouts must be positive")
        return v

    @field_validator("jwt_expire_minutes", "chat_history_limit")
    @classmethod
    def validate_positive_int(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("value must be positive")
        return v

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        if not 4 <= v <= 31:
            raise ValueError("bcrypt_rounds must be between 4 and 31")
        return v

    @field_validator("matchmaking_score_policy")
    @classmethod
    def validate_score_policy(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in SCORE_POLICIES:
            raise ValueError(f"matchmaking_score_policy must be one of {SCORE_POLICIES}")
        return v

    @field_validator("database_url", "redis_url", "jwt_secret")
    @classmethod
    def validate_required(cls, v: str) -> str:
        if not v:
            raise ValueError("database_url, redis_url and jwt_secret must not be empty")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
