"""
Product 모델
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, Numeric, String, Text

from app.db.database import Base
from app.models.category import ProductCategory


def utcnow() -> datetime:
    """현재 UTC 시각"""
    return datetime.now(timezone.utc)


class Product(Base):
    """
    메뉴 상품 모델

    Attributes:
        id: 상품 고유 ID (Primary Key, DB에서 자동 할당)
        name: 상품명 (Not Null)
        description: 상품 설명 (Nullable)
        price: 가격 (Not Null, 소수점 2자리)
        category: 메뉴 카테고리 (Not Null, ProductCategory)
        image_url: 이미지 URL (Nullable)
        is_available: 주문 가능 여부 (Not Null, 기본값 True)
        created_at: 생성 일시
        updated_at: 수정 일시 (생성 시에만 설정되며 자동 갱신되지 않음)
    """

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(Enum(ProductCategory), nullable=False, index=True)
    image_url = Column(String(500), nullable=True)
    is_available = Column(Boolean, default=True, nullable=False)
    created_at = Column(
        DateTime(timezone=True), default=utcnow, nullable=False, index=True
    )
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self) -> str:
        """Product 객체의 문자열 표현"""
        return (
            f"<Product(id={self.id}, name='{self.name}', "
            f"category={self.category}, price={self.price})>"
        )

    def __str__(self) -> str:
        return f"Product: {self.name}"
