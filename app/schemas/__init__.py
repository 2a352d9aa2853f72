"""
Pydantic 스키마 모듈
"""

from app.schemas.product import ProductDto, to_dto

__all__ = ["ProductDto", "to_dto"]
