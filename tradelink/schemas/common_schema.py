"""공통 응답 스키마"""
from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """오류 응답 (app.py 예외 핸들러)"""
    message: str
    error_code: str
    details: Optional[dict[str, Any]] = Field(default_factory=dict)


class MessageResponse(BaseModel):
    """단순 처리 결과 응답"""
    message: str


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    timestamp: datetime
    version: str
    cache: bool
    database: bool
