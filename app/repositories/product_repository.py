"""상품 저장소 (Persistence Gateway)."""

from typing import Optional

from sqlalchemy.orm import Session

from app.models import Product, ProductCategory

# 추천 상품 최대 개수
FEATURED_LIMIT = 6


class ProductRepository:
    """
    Product 테이블 조회/저장 쿼리를 담당합니다.

    입력 검증이나 예외 해석은 하지 않으며, DB 오류는 그대로 전파됩니다.
    목록 조회는 결과가 없으면 빈 리스트를 반환합니다.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_available(self) -> list[Product]:
        """주문 가능한 모든 상품을 조회합니다."""
        return (
            self.db.query(Product)
            .filter(Product.is_available.is_(True))
            .order_by(Product.id)
            .all()
        )

    def find_by_category(self, category: ProductCategory) -> list[Product]:
        """카테고리가 일치하는 모든 상품을 조회합니다 (주문 가능 여부 무관)."""
        return (
            self.db.query(Product)
            .filter(Product.category == category)
            .order_by(Product.id)
            .all()
        )

    def find_available_by_category(self, category: ProductCategory) -> list[Product]:
        """카테고리가 일치하고 주문 가능한 상품을 조회합니다."""
        return (
            self.db.query(Product)
            .filter(Product.category == category, Product.is_available.is_(True))
            .order_by(Product.id)
            .all()
        )

    def find_featured(self) -> list[Product]:
        """
        추천 상품을 조회합니다.

        주문 가능한 상품 중 최근 생성 순으로 최대 FEATURED_LIMIT개를 반환합니다.
        created_at이 같은 경우의 순서는 DB에 따릅니다.
        """
        return (
            self.db.query(Product)
            .filter(Product.is_available.is_(True))
            .order_by(Product.created_at.desc())
            .limit(FEATURED_LIMIT)
            .all()
        )

    def find_by_name_containing(self, name: str) -> list[Product]:
        """상품명에 주어진 문자열이 포함된 상품을 대소문자 구분 없이 조회합니다."""
        return (
            self.db.query(Product)
            .filter(Product.name.icontains(name, autoescape=True))
            .order_by(Product.id)
            .all()
        )

    def find_by_id(self, product_id: int) -> Optional[Product]:
        """
        상품 ID로 상품을 조회합니다.

        Returns:
            Product 객체 또는 None
        """
        return self.db.query(Product).filter(Product.id == product_id).first()

    def save(self, product: Product) -> Product:
        """
        상품을 저장하고 DB에서 할당된 ID를 반영하여 반환합니다.
        """
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product
