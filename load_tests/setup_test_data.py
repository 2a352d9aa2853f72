#!/usr/bin/env python3
"""
테스트 데이터 초기화 스크립트

부하 테스트 실행 전 샘플 메뉴(카테고리별 상품)를 생성합니다.
"""

import argparse
import sys

import requests


SAMPLE_MENU = [
    {
        "name": "Bruschetta",
        "description": "Toasted bread topped with tomatoes, garlic, and fresh basil",
        "price": "8.99",
        "category": "APPETIZER",
        "imageUrl": "https://images.unsplash.com/photo-1572445271230-a78b5944a659?w=400",
    },
    {
        "name": "Grilled Salmon",
        "description": "Fresh Atlantic salmon grilled to perfection with herbs",
        "price": "24.99",
        "category": "MAIN_COURSE",
        "imageUrl": "https://images.unsplash.com/photo-1519708227418-c8fd9a32b7a2?w=400",
    },
    {
        "name": "Beef Tenderloin",
        "description": "Premium cut beef tenderloin with red wine reduction sauce",
        "price": "32.99",
        "category": "MAIN_COURSE",
        "imageUrl": "https://images.unsplash.com/photo-1546833999-b9f581a1996d?w=400",
    },
    {
        "name": "Tiramisu",
        "description": "Classic Italian dessert with coffee-flavored mascarpone cream",
        "price": "9.99",
        "category": "DESSERT",
        "imageUrl": "https://images.unsplash.com/photo-1571877227200-a98ea607e9?w=400",
    },
    {
        "name": "Fresh Fruit Smoothie",
        "description": "Blend of seasonal fruits with yogurt and honey",
        "price": "6.99",
        "category": "BEVERAGE",
        "imageUrl": "https://images.unsplash.com/photo-1505252585461-04db1eb84625?w=400",
    },
    {
        "name": "Truffle Fries",
        "description": "Crispy fries tossed with truffle oil and parmesan cheese",
        "price": "8.99",
        "category": "SIDE_DISH",
        "imageUrl": "https://images.unsplash.com/photo-1573080496219-bb080dd4f877?w=400",
    },
]


def create_product(base_url: str, product: dict) -> dict:
    """상품 생성"""
    response = requests.post(f"{base_url}/api/products", json=product)

    if response.status_code == 200:
        created = response.json()
        print(
            f"✅ Product created: {created['name']} "
            f"(ID: {created['id']}, Category: {created['category']})"
        )
        return created
    else:
        print(f"❌ Product creation failed: {response.status_code}")
        print(response.text)
        sys.exit(1)


def check_health(base_url: str) -> bool:
    """서버 헬스체크"""
    try:
        response = requests.get(f"{base_url}/health", timeout=5)
        return response.status_code == 200
    except requests.exceptions.RequestException:
        return False


def main():
    parser = argparse.ArgumentParser(description="Seed a sample menu for load testing")
    parser.add_argument(
        "--host",
        default="http://localhost:8080",
        help="API server host (default: http://localhost:8080)",
    )
    parser.add_argument(
        "--copies",
        type=int,
        default=1,
        help="How many times to create the sample menu (default: 1)",
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("Sample Menu Setup")
    print("=" * 60)
    print(f"Target: {args.host}")
    print(f"Copies: {args.copies}")
    print("=" * 60 + "\n")

    # 헬스체크
    print("Checking server health...")
    if not check_health(args.host):
        print(f"Server is not reachable at {args.host}")
        sys.exit(1)
    print("Server is healthy\n")

    print("Creating sample products...")
    for _ in range(args.copies):
        for product in SAMPLE_MENU:
            create_product(args.host, product)

    print("\n" + "=" * 60)
    print("✅ Sample Menu Setup Complete!")
    print("=" * 60)
    print("\nYou can now run Locust tests:")
    print(f"  locust -f load_tests/locustfile.py --host={args.host}")
    print("\nOr headless mode:")
    print(
        f"  locust -f load_tests/locustfile.py --headless --users 100 --spawn-rate 10 -t 60s --host={args.host}"
    )
    print("=" * 60 + "\n")


if __name__ == "__main__":
    main()
