"""
상품 관련 Pydantic 스키마

API 요청/응답에 사용하는 전송 객체(ProductDto)와 엔티티 변환 함수를 정의합니다.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.models import Product, ProductCategory


class ProductDto(BaseModel):
    """
    상품 전송 객체 (요청/응답 공용)

    JSON 키는 camelCase를 사용하며, snake_case 필드명도 입력으로 허용합니다.
    id, createdAt, updatedAt은 서버에서 할당하므로 생성 요청 시 무시됩니다.

    Example:
        {
            "id": 1,
            "name": "Bruschetta",
            "description": "Toasted bread topped with tomatoes, garlic, and fresh basil",
            "price": "8.99",
            "category": "APPETIZER",
            "imageUrl": "https://images.example.com/bruschetta.jpg",
            "isAvailable": true,
            "createdAt": "2025-01-22T10:30:00Z",
            "updatedAt": "2025-01-22T10:30:00Z"
        }
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Optional[int] = Field(None, description="상품 ID")
    name: str = Field(..., description="상품명", examples=["Bruschetta"])
    description: Optional[str] = Field(None, description="상품 설명")
    price: Decimal = Field(..., description="가격", examples=["8.99"])
    category: ProductCategory = Field(..., description="메뉴 카테고리")
    image_url: Optional[str] = Field(None, description="이미지 URL")
    is_available: Optional[bool] = Field(
        None, description="주문 가능 여부 (생성 시 생략하면 true)"
    )
    created_at: Optional[datetime] = Field(None, description="생성 일시")
    updated_at: Optional[datetime] = Field(None, description="수정 일시")

    @field_validator("category", mode="before")
    @classmethod
    def _parse_category(cls, value: Any) -> Any:
        # 대소문자 구분 없이 입력 허용, 일치하지 않으면 기본 enum 검증에 맡김
        if isinstance(value, str):
            return ProductCategory.parse(value) or value
        return value


def to_dto(product: Product) -> ProductDto:
    """
    Product 엔티티를 ProductDto로 변환합니다 (필드 1:1 복사).

    Args:
        product: 변환할 Product 엔티티

    Returns:
        ProductDto
    """
    return ProductDto(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        category=product.category,
        image_url=product.image_url,
        is_available=product.is_available,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )
