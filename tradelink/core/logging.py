"""로깅 설정

- tradelink 로거 하나를 stdout으로 출력
- production: 간결한 포맷, DEBUG 금지
- 그 외: 모듈/라인 포함 상세 포맷
"""
import logging
import os
import re
import sys

from tradelink.core.config import settings

IS_PRODUCTION = os.getenv("ENVIRONMENT", "development") == "production"

PRODUCTION_FORMAT = "%(asctime)s %(levelname)s %(message)s"
DEVELOPMENT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s %(module)s:%(lineno)d %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# 요청 로그가 과도한 외부 라이브러리
NOISY_LOGGERS = ("sqlalchemy.engine", "urllib3", "httpx")

SECRET_PATTERN = re.compile(r"(password|passwd|token|bearer|secret|authorization)", re.IGNORECASE)


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        level = logging.INFO
    if IS_PRODUCTION and level < logging.INFO:
        level = logging.INFO
    return level


def setup_logging() -> logging.Logger:
    """tradelink 로거 구성 (여러 번 호출해도 핸들러는 하나)"""
    level = _resolve_level(settings.log_level)

    app_logger = logging.getLogger("tradelink")
    app_logger.setLevel(level)
    app_logger.propagate = False

    if not app_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(
            fmt=PRODUCTION_FORMAT if IS_PRODUCTION else DEVELOPMENT_FORMAT,
            datefmt=DATE_FORMAT,
        ))
        app_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return app_logger


logger = setup_logging()


def sanitize_for_log(value: str, max_length: int = 100) -> str:
    """로그에 남길 사용자 입력 정리

    비밀 값처럼 보이면 통째로 가리고, 길면 자릅니다.
    """
    if not value:
        return "[empty]"

    if SECRET_PATTERN.search(value):
        return "***"

    value = value.replace("\n", " ").replace("\r", " ")
    if len(value) > max_length:
        return value[:max_length] + "..."
    return value
