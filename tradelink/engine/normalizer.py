"""Interest Normalizer - 관심 품목 정규화

바이어의 관심 품목은 JSON 텍스트('["Coffee", "Tea"]') 또는 리스트로 저장되어 있습니다.
어떤 형태든 소문자/trim 된 용어 목록으로 변환하며, 파싱 실패 시 예외 대신 빈 목록을 반환합니다.
"""

import json
from typing import Any, Iterable

from tradelink.core.logging import logger


def normalize_term(term: Any) -> str:
    """단일 용어 정규화 (문자열이 아니면 빈 문자열)"""
    if not isinstance(term, str):
        return ""
    return term.strip().lower()


def normalize_terms(terms: Iterable[Any]) -> list[str]:
    """용어 목록 정규화

    빈 용어와 문자열이 아닌 항목은 건너뛰고, 중복은 처음 나온 순서를 유지한 채 제거합니다.
    """
    seen: set[str] = set()
    normalized: list[str] = []
    for term in terms:
        value = normalize_term(term)
        if not value or value in seen:
            continue
        seen.add(value)
        normalized.append(value)
    return normalized


def normalize_interests(raw: Any) -> list[str]:
    """바이어 관심 품목 정규화

    Args:
        raw: JSON 텍스트, 리스트 또는 None

    Returns:
        정규화된 용어 목록 (입력이 없거나 잘못되었으면 빈 목록)
    """
    if raw is None:
        return []

    parsed = raw
    if isinstance(raw, (str, bytes)):
        try:
            parsed = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError, ValueError) as e:
            logger.warning(f"Failed to decode buyer interests: {type(e).__name__}: {e}")
            return []

    if not isinstance(parsed, (list, tuple)):
        logger.warning(f"Buyer interests are not list-shaped: {type(parsed).__name__}")
        return []

    return normalize_terms(parsed)
