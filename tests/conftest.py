"""
pytest 픽스처 정의
"""

import os

# 앱 import 전에 설정: lifespan의 테이블 생성이 로컬 파일 DB를 만들지 않도록 함
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.db.database import Base, get_db
from app.main import app
from app.models import Product, ProductCategory
from app.repositories.product_repository import ProductRepository
from app.services.product_service import ProductService


@pytest.fixture(scope="session")
def settings():
    """테스트용 설정 객체 픽스처"""
    return Settings(
        database_url="sqlite:///:memory:",
        app_env="test",
        log_level="DEBUG",
        cors_origins="*",
    )


@pytest.fixture(scope="function")
def test_db() -> Session:
    """
    테스트용 in-memory SQLite 데이터베이스 세션 픽스처

    각 테스트 함수마다 새로운 데이터베이스를 생성합니다.
    StaticPool로 단일 connection을 공유하여 TestClient의 요청 스레드에서도
    같은 데이터베이스를 보도록 합니다.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # 모든 테이블 생성
    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()

    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def product_repository(test_db: Session) -> ProductRepository:
    """테스트 DB에 바인딩된 저장소"""
    return ProductRepository(test_db)


@pytest.fixture(scope="function")
def product_service(product_repository: ProductRepository) -> ProductService:
    """테스트 저장소를 사용하는 서비스"""
    return ProductService(product_repository)


@pytest.fixture(scope="function")
def make_product(test_db: Session):
    """
    상품을 DB에 직접 추가하는 팩토리 픽스처

    created_at을 명시적으로 지정해 정렬 순서를 결정적으로 만들 수 있습니다.
    """
    base_time = datetime(2025, 1, 1, tzinfo=timezone.utc)
    counter = {"n": 0}

    def _make(
        name: str,
        category: ProductCategory = ProductCategory.MAIN_COURSE,
        price: str = "10.00",
        is_available: bool = True,
        created_at: datetime | None = None,
        description: str | None = None,
    ) -> Product:
        counter["n"] += 1
        stamp = created_at or base_time + timedelta(minutes=counter["n"])
        product = Product(
            name=name,
            description=description,
            price=Decimal(price),
            category=category,
            image_url=f"https://images.example.com/{counter['n']}.jpg",
            is_available=is_available,
            created_at=stamp,
            updated_at=stamp,
        )
        test_db.add(product)
        test_db.commit()
        test_db.refresh(product)
        return product

    return _make


@pytest.fixture(scope="function")
def test_client(test_db):
    """각 테스트마다 테스트 데이터베이스를 제공하는 TestClient 픽스처"""

    # 데이터베이스 의존성 오버라이드
    def override_get_db():
        try:
            yield test_db
        except Exception:
            test_db.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as client:
        yield client

    # 정리
    app.dependency_overrides.clear()
