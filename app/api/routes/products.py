"""
상품 카탈로그 API 엔드포인트

추천 상품, 전체 상품, 단건, 카테고리별 조회 및 상품 생성 기능을 제공합니다.
오류 응답(400/404/500)은 본문 없이 상태 코드만 반환합니다.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.deps import get_product_service
from app.core.exceptions import InvalidCategoryException, ProductNotFoundException
from app.schemas.product import ProductDto
from app.services.product_service import ProductService

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(status_code: int) -> Response:
    return Response(status_code=status_code)


@router.get("/products/featured", response_model=List[ProductDto])
def get_featured_products(service: ProductService = Depends(get_product_service)):
    """
    추천 상품 목록을 조회합니다.

    주문 가능한 상품 중 최근 생성된 순으로 최대 6개를 반환합니다.

    Example:
        Response (200):
        ```json
        [
            {
                "id": 6,
                "name": "Truffle Fries",
                "description": "Crispy fries tossed with truffle oil and parmesan cheese",
                "price": "8.99",
                "category": "SIDE_DISH",
                "imageUrl": "https://images.example.com/truffle-fries.jpg",
                "isAvailable": true,
                "createdAt": "2025-01-22T10:30:00Z",
                "updatedAt": "2025-01-22T10:30:00Z"
            }
        ]
        ```
    """
    try:
        products = service.get_featured_products()
        logger.info("Successfully retrieved %d featured products", len(products))
        return products

    except Exception:
        logger.exception("Error fetching featured products")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("/products/search", response_model=List[ProductDto])
def search_products(
    name: str = Query(..., description="상품명 검색어 (부분 일치, 대소문자 무시)"),
    service: ProductService = Depends(get_product_service),
):
    """상품명으로 상품을 검색합니다."""
    try:
        return service.search_products(name)

    except Exception:
        logger.exception("Error searching products by name %r", name)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("/products", response_model=List[ProductDto])
def get_all_products(service: ProductService = Depends(get_product_service)):
    """
    주문 가능한 모든 상품 목록을 조회합니다.

    Returns:
        List[ProductDto]: 상품 목록
    """
    try:
        products = service.get_all_products()
        logger.info("Successfully retrieved %d products", len(products))
        return products

    except Exception:
        logger.exception("Error fetching all products")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("/products/category/{category}", response_model=List[ProductDto])
def get_products_by_category(
    category: str,
    service: ProductService = Depends(get_product_service),
):
    """
    카테고리별 주문 가능한 상품을 조회합니다.

    Args:
        category: 카테고리명 (대소문자 무시, 예: "dessert", "MAIN_COURSE")

    Raises:
        400: 존재하지 않는 카테고리명
    """
    try:
        products = service.get_products_by_category(category)
        logger.info(
            "Successfully retrieved %d products for category: %s",
            len(products),
            category,
        )
        return products

    except InvalidCategoryException:
        logger.warning("Invalid category: %s", category)
        return _error(status.HTTP_400_BAD_REQUEST)

    except Exception:
        logger.exception("Error fetching products for category %s", category)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("/products/{product_id}", response_model=ProductDto)
def get_product_by_id(
    product_id: int,
    service: ProductService = Depends(get_product_service),
):
    """
    특정 상품의 상세 정보를 조회합니다.

    Args:
        product_id: 조회할 상품 ID

    Raises:
        404: 상품을 찾을 수 없는 경우
    """
    try:
        product = service.get_product_by_id(product_id)
        logger.info("Successfully retrieved product: %s", product.name)
        return product

    except ProductNotFoundException:
        logger.warning("Product not found with id: %s", product_id)
        return _error(status.HTTP_404_NOT_FOUND)

    except Exception:
        logger.exception("Error fetching product with id %s", product_id)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.post("/products", response_model=ProductDto)
def create_product(
    product_dto: ProductDto,
    service: ProductService = Depends(get_product_service),
):
    """
    새 상품을 생성합니다.

    Example:
        Request:
        ```json
        {
            "name": "Soup",
            "description": "Hot soup",
            "price": 5.50,
            "category": "APPETIZER",
            "imageUrl": "http://x/y",
            "isAvailable": null
        }
        ```

        Response (200):
        ```json
        {
            "id": 1,
            "name": "Soup",
            "description": "Hot soup",
            "price": "5.50",
            "category": "APPETIZER",
            "imageUrl": "http://x/y",
            "isAvailable": true,
            "createdAt": "2025-01-22T10:30:00Z",
            "updatedAt": "2025-01-22T10:30:00Z"
        }
        ```
    """
    try:
        created = service.create_product(product_dto)
        logger.info("Successfully created product with id: %s", created.id)
        return created

    except Exception:
        logger.exception("Error creating product %r", product_dto.name)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR)
