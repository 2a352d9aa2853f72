"""
ProductCategory 열거형
"""

import enum
from typing import Optional


class ProductCategory(str, enum.Enum):
    """
    메뉴 카테고리 (닫힌 집합)

    새 카테고리는 멤버를 추가하는 방식으로만 확장합니다.
    """

    APPETIZER = "APPETIZER"
    MAIN_COURSE = "MAIN_COURSE"
    DESSERT = "DESSERT"
    BEVERAGE = "BEVERAGE"
    SIDE_DISH = "SIDE_DISH"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ProductCategory"]:
        """
        대소문자를 구분하지 않고 문자열을 카테고리로 변환합니다.

        예외를 던지지 않으며, 일치하는 멤버가 없으면 None을 반환합니다.

        Args:
            value: 카테고리명 (예: "dessert", "Main_Course")

        Returns:
            일치하는 ProductCategory 또는 None
        """
        if value is None:
            return None
        return cls.__members__.get(value.upper())
