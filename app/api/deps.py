"""
FastAPI 의존성 주입 함수들

데이터베이스 세션 → 저장소 → 서비스 순으로 의존성을 조립합니다.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.database import get_db
from app.repositories.product_repository import ProductRepository
from app.services.product_service import ProductService


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    """요청 단위 DB 세션에 바인딩된 ProductRepository를 반환합니다."""
    return ProductRepository(db)


def get_product_service(
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductService:
    """
    ProductService 의존성 함수

    Example:
        @router.get("/products")
        def list_products(service: ProductService = Depends(get_product_service)):
            return service.get_all_products()
    """
    return ProductService(repository)
