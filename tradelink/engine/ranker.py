"""Ranker - 매칭 결과 정렬"""

from typing import Iterable, Optional

from tradelink.engine.result import MatchResult


def rank_matches(results: Iterable[Optional[MatchResult]]) -> list[MatchResult]:
    """None/0점 결과를 버리고 점수 내림차순 정렬

    동점이면 seller_id 오름차순 (결정적 순서).
    """
    kept = [r for r in results if r is not None and r.score > 0]
    return sorted(kept, key=lambda r: (-r.score, r.seller_id))


def build_response(results: Iterable[Optional[MatchResult]]) -> dict:
    """API 응답 형태로 래핑: {"matches": [...]}"""
    return {"matches": [match.to_dict() for match in rank_matches(results)]}
