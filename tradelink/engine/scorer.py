"""Match Scorer - 바이어 관심사와 셀러 카탈로그의 유사도 계산

두 가지 정책을 지원하며, 설정(matchmaking_score_policy)으로 하나를 골라 모든 셀러에 동일하게 적용합니다.

- overlap_count: 공통 품목 수
- weighted_composite: 0.5 × 품목 커버리지 + 0.25 × 경력 + 0.25 × 실적

두 정책 모두 공통 품목이 없는 셀러는 결과를 만들지 않습니다 (None).
"""

from enum import Enum
from typing import Optional, Sequence

from tradelink.engine.catalog import PerformanceMetrics, SellerRecord
from tradelink.engine.result import MatchDetails, MatchResult, PerformanceSummary


class ScoringPolicy(str, Enum):
    """매칭 점수 정책"""

    OVERLAP_COUNT = "overlap_count"
    WEIGHTED_COMPOSITE = "weighted_composite"


# 가중치 합 = 1
PRODUCT_WEIGHT = 0.5
EXPERIENCE_WEIGHT = 0.25
PERFORMANCE_WEIGHT = 0.25

EXPERIENCE_CAP_YEARS = 10
SUCCESS_RATE_WEIGHT = 0.6
RESPONSE_WEIGHT = 0.4
RESPONSE_BASELINE_HOURS = 48


def shared_terms(interests: Sequence[str], offerings: Sequence[str]) -> list[str]:
    """공통 품목 (바이어 관심 순서 유지, 중복 제거)"""
    offered = set(offerings)
    shared: list[str] = []
    for term in interests:
        if term in offered and term not in shared:
            shared.append(term)
    return shared


def summarize_performance(metrics: PerformanceMetrics) -> PerformanceSummary:
    success_rate = metrics.successful_orders / max(metrics.total_orders, 1) * 100
    return PerformanceSummary(
        success_rate=round(success_rate, 1),
        avg_response_time=round(metrics.avg_response_time, 1),
        total_orders=metrics.total_orders,
    )


def performance_score(metrics: PerformanceMetrics) -> float:
    """실적 점수 (0~1)

    주문 이력이 없으면 0.
    """
    if metrics.total_orders <= 0:
        return 0.0

    success_rate = min(metrics.successful_orders / max(metrics.total_orders, 1), 1.0)
    response_score = max(0.0, 1 - metrics.avg_response_time / RESPONSE_BASELINE_HOURS)
    response_score = min(response_score, 1.0)
    return success_rate * SUCCESS_RATE_WEIGHT + response_score * RESPONSE_WEIGHT


def experience_score(years: float) -> float:
    """경력 점수 (0~1, 10년 이상이면 만점)"""
    return min(max(years, 0) / EXPERIENCE_CAP_YEARS, 1.0)


class OverlapCountScorer:
    """공통 품목 수 정책"""

    policy = ScoringPolicy.OVERLAP_COUNT

    def score(self, interests: Sequence[str], seller: SellerRecord) -> Optional[MatchResult]:
        shared = shared_terms(interests, seller.products_offered)
        if not shared:
            return None

        return MatchResult(
            seller_id=seller.seller_id,
            seller_company=seller.company_name,
            score=len(shared),
            shared_products=shared,
            seller_rating=seller.average_rating,
            performance_metrics=summarize_performance(seller.performance),
        )


class WeightedCompositeScorer:
    """품목/경력/실적 가중 합산 정책 (0~1)"""

    policy = ScoringPolicy.WEIGHTED_COMPOSITE

    def score(self, interests: Sequence[str], seller: SellerRecord) -> Optional[MatchResult]:
        shared = shared_terms(interests, seller.products_offered)
        if not shared:
            return None

        interest_count = len(set(interests))
        product_part = len(shared) / max(interest_count, 1) * PRODUCT_WEIGHT
        experience_part = experience_score(seller.years_experience) * EXPERIENCE_WEIGHT
        performance_part = performance_score(seller.performance) * PERFORMANCE_WEIGHT
        total = product_part + experience_part + performance_part

        return MatchResult(
            seller_id=seller.seller_id,
            seller_company=seller.company_name,
            score=total,
            shared_products=shared,
            seller_rating=seller.average_rating,
            match_details=MatchDetails(
                product_match_score=product_part,
                experience_score=experience_part,
                performance_score=performance_part,
                total_score=total,
            ),
            performance_metrics=summarize_performance(seller.performance),
        )


def build_scorer(policy: str | ScoringPolicy):
    """정책 이름으로 스코어러 생성

    Raises:
        ValueError: 알 수 없는 정책
    """
    policy = ScoringPolicy(policy)
    if policy is ScoringPolicy.OVERLAP_COUNT:
        return OverlapCountScorer()
    return WeightedCompositeScorer()
