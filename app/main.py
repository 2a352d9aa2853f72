from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import products
from app.core.config import get_settings
from app.core.logging import configure_logging
from app.db.database import init_db

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 시작 시 로깅 설정 및 테이블 생성"""
    configure_logging(settings)
    init_db()
    yield


app = FastAPI(
    title="OrderMe Product API",
    description="레스토랑 주문 앱의 메뉴(상품) 카탈로그 API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
app.include_router(products.router, prefix="/api", tags=["products"])


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "message": "OrderMe Product API",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """헬스체크 엔드포인트 (Docker 헬스체크용)"""
    return {"status": "healthy"}
