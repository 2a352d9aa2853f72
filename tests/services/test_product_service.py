"""Tests for ProductService."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from app.core.exceptions import InvalidCategoryException, ProductNotFoundException
from app.models import ProductCategory
from app.repositories.product_repository import ProductRepository
from app.schemas.product import ProductDto
from app.services.product_service import ProductService


def _soup(**overrides) -> ProductDto:
    data = {
        "name": "Soup",
        "description": "Hot soup",
        "price": Decimal("5.50"),
        "category": ProductCategory.APPETIZER,
        "image_url": "http://x/y",
        "is_available": None,
    }
    data.update(overrides)
    return ProductDto(**data)


class TestCreateProduct:
    """Test: 상품 생성 테스트"""

    def test_create_product_success(self, product_service: ProductService):
        """Test: 상품 생성 성공 (ID와 타임스탬프 할당)"""
        created = product_service.create_product(_soup())

        assert created.id is not None
        assert created.name == "Soup"
        assert created.description == "Hot soup"
        assert created.price == Decimal("5.50")
        assert created.category is ProductCategory.APPETIZER
        assert created.image_url == "http://x/y"
        assert created.created_at is not None
        assert created.updated_at is not None
        assert created.created_at == created.updated_at

    def test_create_product_availability_defaults_to_true(
        self, product_service: ProductService, product_repository: ProductRepository
    ):
        """Test: is_available 미지정 시 True로 저장"""
        created = product_service.create_product(_soup(is_available=None))

        assert created.is_available is True
        assert product_repository.find_by_id(created.id).is_available is True

    def test_create_product_unavailable(
        self, product_service: ProductService, product_repository: ProductRepository
    ):
        """Test: is_available=False는 그대로 저장"""
        created = product_service.create_product(_soup(is_available=False))

        assert created.is_available is False
        assert product_repository.find_by_id(created.id).is_available is False

    def test_create_product_ignores_client_id_and_timestamps(
        self, product_service: ProductService
    ):
        """Test: 입력의 id, created_at, updated_at은 무시"""
        created = product_service.create_product(
            _soup(id=424242, created_at="2000-01-01T00:00:00")
        )

        assert created.id != 424242
        assert created.created_at.year != 2000

    def test_create_product_no_duplicate_check(self, product_service: ProductService):
        """Test: 같은 이름으로 여러 번 생성 가능 (중복 체크 없음)"""
        first = product_service.create_product(_soup())
        second = product_service.create_product(_soup())

        assert first.id != second.id


class TestGetProductById:
    """Test: 단건 조회 테스트"""

    def test_get_product_exists(self, product_service: ProductService, make_product):
        """Test: 존재하는 상품 조회"""
        product = make_product("Beef Tenderloin")

        dto = product_service.get_product_by_id(product.id)

        assert dto.id == product.id
        assert dto.name == "Beef Tenderloin"

    def test_get_product_not_exists(self, product_service: ProductService):
        """Test: 존재하지 않는 상품 조회 시 ProductNotFoundException"""
        with pytest.raises(ProductNotFoundException) as exc_info:
            product_service.get_product_by_id(999999)

        assert exc_info.value.product_id == 999999
        assert "999999" in str(exc_info.value)

    def test_every_listed_product_is_retrievable(
        self, product_service: ProductService, make_product
    ):
        """Test: 전체 목록의 모든 ID는 단건 조회 가능"""
        make_product("Bruschetta", ProductCategory.APPETIZER)
        make_product("Tiramisu", ProductCategory.DESSERT)
        make_product("Espresso", ProductCategory.BEVERAGE)

        for listed in product_service.get_all_products():
            assert product_service.get_product_by_id(listed.id).id == listed.id


class TestListProducts:
    """Test: 목록 조회 테스트"""

    def test_get_all_products_only_available(
        self, product_service: ProductService, make_product
    ):
        """Test: 전체 조회는 주문 가능 상품만"""
        make_product("Bruschetta", ProductCategory.APPETIZER)
        make_product("Sold Out", ProductCategory.APPETIZER, is_available=False)

        products = product_service.get_all_products()

        assert [p.name for p in products] == ["Bruschetta"]
        assert all(isinstance(p, ProductDto) for p in products)

    def test_get_featured_products(self, product_service: ProductService, make_product):
        """Test: 추천 상품은 최대 6개, 모두 주문 가능"""
        for i in range(1, 8):
            make_product(f"Dish {i}")
        make_product("Hidden", is_available=False)

        products = product_service.get_featured_products()

        assert len(products) == 6
        assert all(p.is_available for p in products)
        assert products[0].name == "Dish 7"

    def test_get_featured_products_empty(self, product_service: ProductService):
        """Test: 상품이 없으면 빈 리스트"""
        assert product_service.get_featured_products() == []


class TestGetProductsByCategory:
    """Test: 카테고리별 조회 테스트"""

    def test_category_is_case_insensitive(
        self, product_service: ProductService, make_product
    ):
        """Test: "dessert"와 "DESSERT"는 같은 결과"""
        make_product("Tiramisu", ProductCategory.DESSERT)
        make_product("Cheesecake", ProductCategory.DESSERT)
        make_product("Espresso", ProductCategory.BEVERAGE)

        lower = product_service.get_products_by_category("dessert")
        upper = product_service.get_products_by_category("DESSERT")

        assert lower == upper
        assert [p.name for p in lower] == ["Tiramisu", "Cheesecake"]

    def test_category_excludes_unavailable(
        self, product_service: ProductService, make_product
    ):
        """Test: 주문 불가 상품 제외"""
        make_product("Lemonade", ProductCategory.BEVERAGE)
        make_product("Seasonal Cider", ProductCategory.BEVERAGE, is_available=False)

        products = product_service.get_products_by_category("beverage")

        assert [p.name for p in products] == ["Lemonade"]
        assert all(p.category is ProductCategory.BEVERAGE for p in products)

    def test_invalid_category(self, product_service: ProductService):
        """Test: 알 수 없는 카테고리는 InvalidCategoryException"""
        with pytest.raises(InvalidCategoryException) as exc_info:
            product_service.get_products_by_category("not_a_real_category")

        assert exc_info.value.category == "not_a_real_category"
        assert not isinstance(exc_info.value, ProductNotFoundException)


class TestSearchProducts:
    """Test: 상품명 검색 테스트"""

    def test_search_products(self, product_service: ProductService, make_product):
        """Test: 부분 일치 검색"""
        make_product("Truffle Fries", ProductCategory.SIDE_DISH)
        make_product("Sweet Potato Fries", ProductCategory.SIDE_DISH)
        make_product("Garden Salad", ProductCategory.SIDE_DISH)

        products = product_service.search_products("FRIES")

        assert [p.name for p in products] == ["Truffle Fries", "Sweet Potato Fries"]


class TestStoreFailurePropagation:
    """Test: 저장소 오류는 가공 없이 전파"""

    def test_store_error_propagates(self):
        """Test: DB 오류는 도메인 예외로 변환되지 않음"""
        repository = MagicMock(spec=ProductRepository)
        repository.find_available.side_effect = OperationalError(
            "SELECT", {}, Exception("database is locked")
        )
        service = ProductService(repository)

        with pytest.raises(OperationalError):
            service.get_all_products()
