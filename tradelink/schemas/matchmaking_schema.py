"""매칭 API 스키마"""
from typing import List, Optional, Union
from pydantic import BaseModel, Field


class MatchDetailsOut(BaseModel):
    """가중 합산 정책 항목별 점수"""
    product_match_score: float = Field(..., ge=0)
    experience_score: float = Field(..., ge=0)
    performance_score: float = Field(..., ge=0)
    total_score: float = Field(..., ge=0)


class PerformanceMetricsOut(BaseModel):
    """셀러 실적 요약"""
    success_rate: float = Field(..., ge=0, description="완료 주문 비율 (%)")
    avg_response_time: float = Field(..., ge=0, description="평균 응답 시간 (시간)")
    total_orders: int = Field(..., ge=0)


class MatchResultOut(BaseModel):
    """바이어-셀러 매칭 결과"""
    seller_id: str
    seller_company: str
    score: Union[int, float] = Field(..., ge=0, description="overlap_count: 정수, weighted_composite: 0~1")
    shared_products: List[str] = Field(default_factory=list)
    seller_rating: float = Field(0.0, ge=0, description="셀러 평균 평점")
    match_details: Optional[MatchDetailsOut] = None
    performance_metrics: Optional[PerformanceMetricsOut] = None


class MatchmakingResponse(BaseModel):
    """매칭 응답"""
    matches: List[MatchResultOut] = Field(default_factory=list)
