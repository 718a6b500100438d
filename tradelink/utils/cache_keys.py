"""캐시 키 유틸리티

키 형식: <엔티티 타입>_<식별자> (예: buyer_profile_42)
"""


def build_cache_key(entity_type: str, identifier: str) -> str:
    """
    엔티티 타입과 식별자로 캐시 키 생성

    Args:
        entity_type: 엔티티 타입 (예: "buyer_profile")
        identifier: 식별자 (예: 사용자 ID)

    Returns:
        Redis 캐시 키
    """
    if not entity_type or not identifier:
        raise ValueError("entity_type and identifier must not be empty")
    return f"{entity_type}_{identifier}"


def buyer_profile_key(buyer_id: str) -> str:
    return build_cache_key("buyer_profile", buyer_id)


def seller_profile_key(seller_id: str) -> str:
    return build_cache_key("seller_profile", seller_id)


def matchmaking_key(buyer_id: str) -> str:
    return build_cache_key("matchmaking", buyer_id)
