"""Match Result - 표준 매칭 결과 포맷

요청마다 계산되어 응답 후 폐기됩니다 (저장하지 않음).
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class MatchDetails:
    """가중 합산 정책의 항목별 점수"""
    product_match_score: float
    experience_score: float
    performance_score: float
    total_score: float


@dataclass
class PerformanceSummary:
    """응답용 셀러 실적 요약"""
    success_rate: float  # %
    avg_response_time: float  # hour
    total_orders: int


@dataclass
class MatchResult:
    """바이어-셀러 매칭 결과

    Attributes:
        seller_id: 셀러 ID
        seller_company: 셀러 회사명
        seller_rating: 셀러 평균 평점 (없으면 0)
        score: 정책별 점수 (overlap_count: 정수, weighted_composite: 0~1)
        shared_products: 공통 품목 (바이어 관심 순서)
        match_details: 가중 합산 정책일 때만 채워짐
        performance_metrics: 셀러 실적 요약
    """

    seller_id: str
    seller_company: str
    score: float
    shared_products: list[str] = field(default_factory=list)
    seller_rating: float = 0.0
    match_details: Optional[MatchDetails] = None
    performance_metrics: Optional[PerformanceSummary] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "seller_id": self.seller_id,
            "seller_company": self.seller_company,
            "score": self.score,
            "shared_products": list(self.shared_products),
            "seller_rating": self.seller_rating,
            "match_details": self.match_details.__dict__.copy() if self.match_details else None,
            "performance_metrics": (
                self.performance_metrics.__dict__.copy() if self.performance_metrics else None
            ),
        }
