"""셀러 상품 리포지토리 - DB 접근 로직"""
from typing import Any, List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from tradelink.core.logging import logger
from tradelink.core.exceptions import (
    ConflictException,
    DatabaseQueryException,
    ProductNotFoundException,
)
from tradelink.repositories.models import Product, User


class ProductRepository:
    """셀러 상품 데이터 액세스 레이어"""

    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        seller_id: str,
        name: str,
        price: float,
        stock: int,
        category: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Product:
        """상품 등록 (같은 셀러의 동일 상품명은 거절)"""
        try:
            duplicate = self.db.execute(
                select(Product.id).where(
                    Product.seller_id == seller_id,
                    func.lower(Product.name) == name.lower(),
                )
            ).first()
            if duplicate is not None:
                raise ConflictException(
                    "You have already offered this product",
                    {"name": name},
                )

            product = Product(
                seller_id=seller_id,
                name=name,
                category=category,
                description=description,
                price=price,
                stock=stock,
            )
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
            logger.info(f"Seller {seller_id} added product {product.id}")
            return product
        except IntegrityError:
            # 사전 검사 이후 동시 등록된 경우 (uq_products_seller_name)
            self.db.rollback()
            logger.info(f"Duplicate product rejected by constraint: seller={seller_id}")
            raise ConflictException("You have already offered this product", {"name": name})
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create product: {e}")
            raise DatabaseQueryException("create_product", type(e).__name__)

    def get_by_id(self, product_id: str) -> Optional[Product]:
        """ID로 상품 조회"""
        try:
            return self.db.get(Product, product_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch product: {e}")
            raise DatabaseQueryException("get_product", type(e).__name__)

    def list_by_seller(self, seller_id: str) -> List[Product]:
        """셀러의 상품 목록"""
        try:
            return list(
                self.db.execute(
                    select(Product)
                    .where(Product.seller_id == seller_id)
                    .order_by(Product.created_at)
                ).scalars()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to list products: {e}")
            raise DatabaseQueryException("list_products", type(e).__name__)

    def _catalog_query(self):
        """활성 셀러 상품 + 셀러 정보"""
        return (
            select(
                Product.id,
                Product.seller_id,
                User.full_name.label("seller_name"),
                User.company_name,
                Product.name,
                Product.category,
                Product.description,
                Product.price,
                Product.stock,
            )
            .join(User, User.id == Product.seller_id)
            .where(User.role == "seller", User.is_active.is_(True))
        )

    def list_catalog(self, category: Optional[str] = None) -> List[dict[str, Any]]:
        """공개 상품 목록 (카테고리 필터 선택)"""
        query = self._catalog_query()
        if category:
            query = query.where(func.lower(Product.category) == category.strip().lower())
        try:
            rows = self.db.execute(query.order_by(Product.name, Product.price)).all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to list catalog: {e}")
            raise DatabaseQueryException("list_catalog", type(e).__name__)
        return [dict(row._mapping) for row in rows]

    def get_catalog_entry(self, product_id: str) -> dict[str, Any]:
        """공개 상품 상세

        Raises:
            ProductNotFoundException: 없거나 활성 셀러의 상품이 아님
        """
        try:
            row = self.db.execute(self._catalog_query().where(Product.id == product_id)).first()
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch catalog entry: {e}")
            raise DatabaseQueryException("get_catalog_entry", type(e).__name__)
        if row is None:
            raise ProductNotFoundException(product_id)
        return dict(row._mapping)

    def list_sellers_for(self, product_id: str) -> List[dict[str, Any]]:
        """같은 상품명(대소문자 무시)을 공급하는 셀러 목록, 단가 오름차순

        Raises:
            ProductNotFoundException: 기준 상품 없음
        """
        product = self.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundException(product_id)

        try:
            rows = self.db.execute(
                select(
                    User.id.label("seller_id"),
                    User.full_name.label("seller_name"),
                    User.company_name,
                    User.phone_number,
                    User.address,
                    Product.id.label("product_id"),
                    Product.price,
                    Product.stock,
                )
                .join(User, User.id == Product.seller_id)
                .where(
                    func.lower(Product.name) == product.name.lower(),
                    User.role == "seller",
                    User.is_active.is_(True),
                )
                .order_by(Product.price, User.id)
            ).all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to list product sellers: {e}")
            raise DatabaseQueryException("list_product_sellers", type(e).__name__)
        return [dict(row._mapping) for row in rows]

    def delete(self, seller_id: str, product_id: str) -> None:
        """소유한 상품 삭제

        Raises:
            ProductNotFoundException: 없거나 다른 셀러의 상품
        """
        product = self.get_by_id(product_id)
        if product is None or product.seller_id != seller_id:
            raise ProductNotFoundException(product_id)

        try:
            self.db.delete(product)
            self.db.commit()
            logger.info(f"Seller {seller_id} removed product {product_id}")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to delete product: {e}")
            raise DatabaseQueryException("delete_product", type(e).__name__)
