"""Seller Catalog Fetcher - 셀러 카탈로그 조회 및 Fold

조회 쿼리는 (셀러, 상품) 조합마다 한 행을 반환합니다.
fold_seller_rows()가 이를 셀러 단위 레코드로 다시 묶습니다.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping

from sqlalchemy import case, func, select
from sqlalchemy.orm import Session

from tradelink.core.logging import logger
from tradelink.engine.normalizer import normalize_term
from tradelink.repositories.models import Order, Product, User

COMPLETED_STATUS = "Completed"
UNKNOWN_COMPANY = "Unknown Company"


@dataclass
class PerformanceMetrics:
    """주문 이력에서 계산된 셀러 실적"""
    total_orders: int = 0
    successful_orders: int = 0
    avg_response_time: float = 0.0  # 시간(hour) 단위


@dataclass
class SellerRecord:
    """Fold 된 셀러 레코드 (스코어러 입력)"""
    seller_id: str
    company_name: str
    years_experience: float = 0
    average_rating: float = 0.0
    products_offered: list[str] = field(default_factory=list)
    performance: PerformanceMetrics = field(default_factory=PerformanceMetrics)


def _as_int(value: Any) -> int:
    if value is None:
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _as_float(value: Any) -> float:
    if value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def fold_seller_rows(rows: Iterable[Mapping[str, Any]]) -> list[SellerRecord]:
    """셀러-상품 행을 셀러 단위로 묶기

    - 셀러 ID로 그룹화, 처음 본 이름/경력/실적 값 유지
    - 모든 상품명을 정규화하여 products_offered에 수집
    - null 실적 값은 0으로 처리
    - 유효한 상품명이 하나도 없는 셀러는 제외
    """
    sellers: dict[str, SellerRecord] = {}

    for row in rows:
        seller_id = row.get("seller_id")
        if seller_id is None:
            continue
        seller_id = str(seller_id)

        record = sellers.get(seller_id)
        if record is None:
            record = SellerRecord(
                seller_id=seller_id,
                company_name=row.get("company_name") or UNKNOWN_COMPANY,
                years_experience=_as_float(row.get("years_of_experience")),
                average_rating=_as_float(row.get("average_rating")),
                performance=PerformanceMetrics(
                    total_orders=_as_int(row.get("total_orders")),
                    successful_orders=_as_int(row.get("successful_orders")),
                    avg_response_time=_as_float(row.get("avg_response_time")),
                ),
            )
            sellers[seller_id] = record

        term = normalize_term(row.get("product_name"))
        if term and term not in record.products_offered:
            record.products_offered.append(term)

    return [record for record in sellers.values() if record.products_offered]


class SellerCatalogFetcher:
    """활성 셀러 카탈로그 조회 (읽기 전용, 파라미터 바인딩 쿼리)

    작업 스레드에서 실행되므로 요청 세션을 받지 않고,
    fetch() 호출마다 session_factory로 세션을 열고 닫습니다.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def build_query(self):
        """셀러 × 상품 행 + 주문 실적 집계 쿼리"""
        order_stats = (
            select(
                Order.seller_id.label("seller_id"),
                func.count(Order.id).label("total_orders"),
                func.sum(case((Order.status == COMPLETED_STATUS, 1), else_=0)).label("successful_orders"),
                func.avg(Order.response_time_hours).label("avg_response_time"),
            )
            .group_by(Order.seller_id)
            .subquery()
        )

        return (
            select(
                User.id.label("seller_id"),
                User.company_name.label("company_name"),
                User.years_of_experience.label("years_of_experience"),
                User.average_rating.label("average_rating"),
                Product.name.label("product_name"),
                order_stats.c.total_orders,
                order_stats.c.successful_orders,
                order_stats.c.avg_response_time,
            )
            .join(Product, Product.seller_id == User.id)
            .outerjoin(order_stats, order_stats.c.seller_id == User.id)
            .where(User.role == "seller", User.is_active.is_(True))
            .order_by(User.id, Product.created_at)
        )

    def fetch(self) -> list[SellerRecord]:
        """셀러 카탈로그 조회

        Returns:
            상품을 하나 이상 가진 셀러 레코드 목록
        """
        with self.session_factory() as db:
            rows = db.execute(self.build_query()).mappings().all()
        sellers = fold_seller_rows(rows)
        logger.info(f"Catalog fetched: rows={len(rows)}, sellers={len(sellers)}")
        return sellers
