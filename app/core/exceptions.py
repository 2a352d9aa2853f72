"""
커스텀 예외 정의

애플리케이션 전역에서 사용되는 커스텀 예외 클래스들입니다.
"""


class ProductNotFoundException(Exception):
    """
    상품을 찾을 수 없을 때 발생하는 예외

    HTTP Status Code: 404 Not Found
    """

    def __init__(self, product_id: int):
        self.product_id = product_id
        self.message = f"Product with id {product_id} not found"
        super().__init__(self.message)


class InvalidCategoryException(Exception):
    """
    존재하지 않는 카테고리명으로 조회할 때 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self, category: str):
        self.category = category
        self.message = f"Invalid category: {category}"
        super().__init__(self.message)
