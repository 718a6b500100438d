"""Engine Layer - 바이어-셀러 매칭 엔진

This module provides the matchmaking core:
- normalize_interests: 관심 품목 정규화
- SellerCatalogFetcher / fold_seller_rows: 셀러 카탈로그 조회 및 Fold
- OverlapCountScorer / WeightedCompositeScorer: 매칭 점수 계산
- rank_matches / build_response: 정렬 및 응답 래핑
- MatchmakingOrchestrator: 캐시 + 저장소 + 스코어러 조합
"""

from .cache_adapter import CacheAdapter
from .catalog import PerformanceMetrics, SellerCatalogFetcher, SellerRecord, fold_seller_rows
from .normalizer import normalize_interests, normalize_term, normalize_terms
from .orchestrator import MatchmakingOrchestrator
from .ranker import build_response, rank_matches
from .result import MatchDetails, MatchResult, PerformanceSummary
from .scorer import OverlapCountScorer, ScoringPolicy, WeightedCompositeScorer, build_scorer

__all__ = [
    "CacheAdapter",
    "MatchmakingOrchestrator",
    "SellerCatalogFetcher",
    "SellerRecord",
    "PerformanceMetrics",
    "fold_seller_rows",
    "normalize_interests",
    "normalize_term",
    "normalize_terms",
    "OverlapCountScorer",
    "WeightedCompositeScorer",
    "ScoringPolicy",
    "build_scorer",
    "rank_matches",
    "build_response",
    "MatchResult",
    "MatchDetails",
    "PerformanceSummary",
]
