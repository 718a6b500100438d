"""FastAPI 앱 팩토리"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tradelink.core.config import settings
from tradelink.core.database import init_db
from tradelink.core.exceptions import TradeLinkException
from tradelink.core.logging import logger
from tradelink.api import (
    health_router,
    matchmaking_router,
    buyer_router,
    seller_router,
    product_router,
    order_router,
    message_router,
    chat_router,
    auth_router,
    catalog_router,
    quote_router,
)
from tradelink.schemas.common_schema import ErrorResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기"""
    logger.info("Starting application...")
    init_db()
    logger.info(f"Application started (score policy: {settings.matchmaking_score_policy})")
    yield
    logger.info("Shutting down application...")


async def tradelink_exception_handler(request: Request, exc: TradeLinkException) -> JSONResponse:
    """도메인 예외 → {message, error_code, details} 응답"""
    if exc.http_status >= 500:
        logger.error(f"[API] {request.method} {request.url.path} failed: {exc}")
    else:
        logger.info(f"[API] {request.method} {request.url.path} rejected: {exc.error_code}")
    return JSONResponse(
        status_code=exc.http_status,
        content=ErrorResponse(**exc.to_dict()).model_dump(),
    )


def create_app() -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    Returns:
        FastAPI 앱 인스턴스
    """
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TradeLinkException, tradelink_exception_handler)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(matchmaking_router)
    app.include_router(buyer_router)
    app.include_router(seller_router)
    app.include_router(product_router)
    app.include_router(catalog_router)
    app.include_router(quote_router)
    app.include_router(order_router)
    app.include_router(message_router)
    app.include_router(chat_router)

    return app

# 앱 인스턴스 생성 (uvicorn이 로드할 수 있도록)
app = create_app()
