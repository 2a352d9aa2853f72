"""상품 카탈로그 서비스."""

import logging

from app.core.exceptions import InvalidCategoryException, ProductNotFoundException
from app.models import Product, ProductCategory
from app.models.product import utcnow
from app.repositories.product_repository import ProductRepository
from app.schemas.product import ProductDto, to_dto

logger = logging.getLogger(__name__)


class ProductService:
    """상품 조회, 카테고리 필터링 및 생성 서비스."""

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    def get_featured_products(self) -> list[ProductDto]:
        """
        추천 상품 목록을 조회합니다.

        주문 가능한 상품 중 최근 생성된 순으로 최대 6개를 반환합니다.
        """
        logger.info("Fetching featured products")
        return [to_dto(product) for product in self.repository.find_featured()]

    def get_all_products(self) -> list[ProductDto]:
        """주문 가능한 모든 상품을 조회합니다."""
        logger.info("Fetching all available products")
        return [to_dto(product) for product in self.repository.find_available()]

    def get_product_by_id(self, product_id: int) -> ProductDto:
        """
        상품 ID로 상품을 조회합니다.

        Args:
            product_id: 상품 ID

        Returns:
            ProductDto

        Raises:
            ProductNotFoundException: 상품이 존재하지 않는 경우
        """
        logger.info("Fetching product with id: %s", product_id)
        product = self.repository.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundException(product_id)
        return to_dto(product)

    def get_products_by_category(self, category: str) -> list[ProductDto]:
        """
        카테고리별 주문 가능한 상품을 조회합니다.

        카테고리명은 대소문자를 구분하지 않습니다 ("dessert" == "DESSERT").

        Args:
            category: 카테고리명

        Returns:
            ProductDto 리스트

        Raises:
            InvalidCategoryException: 존재하지 않는 카테고리명인 경우
        """
        logger.info("Fetching products by category: %s", category)
        product_category = ProductCategory.parse(category)
        if product_category is None:
            raise InvalidCategoryException(category)

        products = self.repository.find_available_by_category(product_category)
        return [to_dto(product) for product in products]

    def search_products(self, name: str) -> list[ProductDto]:
        """상품명에 검색어가 포함된 상품을 조회합니다 (대소문자 무시)."""
        logger.info("Searching products by name: %s", name)
        products = self.repository.find_by_name_containing(name)
        return [to_dto(product) for product in products]

    def create_product(self, product_dto: ProductDto) -> ProductDto:
        """
        새 상품을 생성합니다.

        - is_available이 지정되지 않으면 True로 저장
        - created_at, updated_at은 현재 시각으로 동일하게 설정
        - id, created_at, updated_at 입력값은 무시
        - 중복 체크나 입력 검증은 수행하지 않음

        Args:
            product_dto: 생성할 상품 정보

        Returns:
            DB에서 할당된 ID가 포함된 ProductDto
        """
        logger.info("Creating new product: %s", product_dto.name)

        now = utcnow()
        product = Product(
            name=product_dto.name,
            description=product_dto.description,
            price=product_dto.price,
            category=product_dto.category,
            image_url=product_dto.image_url,
            is_available=(
                product_dto.is_available
                if product_dto.is_available is not None
                else True
            ),
            created_at=now,
            updated_at=now,
        )
        saved = self.repository.save(product)

        logger.info("Successfully created product with id: %s", saved.id)
        return to_dto(saved)
