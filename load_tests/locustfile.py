"""
Locust 부하 테스트 시나리오 (메뉴 조회)

테스트 시나리오:
1. 홈 화면: 추천 상품 조회
2. 메뉴 화면: 전체 상품 및 카테고리별 조회
3. 상세 화면: 상품 단건 조회

사전 준비:
    python load_tests/setup_test_data.py --host=http://localhost:8080
"""

import random
from typing import List

from locust import HttpUser, TaskSet, task, between, events


CATEGORIES = ["appetizer", "main_course", "dessert", "beverage", "side_dish"]

# 전역 메트릭 수집
featured_overflow_count = 0
unavailable_leak_count = 0


class MenuBrowsingTaskSet(TaskSet):
    """메뉴를 둘러보는 사용자 행동 모델"""

    def on_start(self):
        """각 사용자가 시작할 때 실행: 상품 ID 목록 확보"""
        self.product_ids: List[int] = []
        self.list_products()

    @task(5)
    def featured_products(self):
        """추천 상품 조회 (홈 화면, 가장 빈번한 작업)"""
        global featured_overflow_count, unavailable_leak_count

        with self.client.get(
            "/api/products/featured",
            name="[Product] Featured",
            catch_response=True,
        ) as response:
            if response.status_code != 200:
                response.failure(f"Featured failed: {response.status_code}")
                return

            products = response.json()
            if len(products) > 6:
                featured_overflow_count += 1
                response.failure("More than 6 featured products returned!")
            elif not all(p["isAvailable"] for p in products):
                unavailable_leak_count += 1
                response.failure("Unavailable product in featured list!")
            else:
                response.success()

    @task(3)
    def list_products(self):
        """전체 상품 목록 조회"""
        with self.client.get(
            "/api/products",
            name="[Product] List Products",
            catch_response=True,
        ) as response:
            if response.status_code == 200:
                self.product_ids = [p["id"] for p in response.json()]
                response.success()
            else:
                response.failure(f"List products failed: {response.status_code}")

    @task(3)
    def products_by_category(self):
        """카테고리별 상품 조회"""
        category = random.choice(CATEGORIES)

        with self.client.get(
            f"/api/products/category/{category}",
            name="[Product] By Category",
            catch_response=True,
        ) as response:
            if response.status_code == 200:
                response.success()
            else:
                response.failure(f"Category lookup failed: {response.status_code}")

    @task(2)
    def product_detail(self):
        """상품 상세 조회"""
        if not self.product_ids:
            return

        product_id = random.choice(self.product_ids)

        with self.client.get(
            f"/api/products/{product_id}",
            name="[Product] Detail",
            catch_response=True,
        ) as response:
            if response.status_code == 200:
                response.success()
            else:
                response.failure(f"Product detail failed: {response.status_code}")


class MenuBrowser(HttpUser):
    """일반 사용자 (메뉴 탐색)"""

    tasks = [MenuBrowsingTaskSet]
    wait_time = between(1, 3)  # 1-3초 대기
    host = "http://localhost:8080"


# Locust 이벤트 핸들러
@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    """테스트 시작 시 초기화"""
    global featured_overflow_count, unavailable_leak_count
    featured_overflow_count = 0
    unavailable_leak_count = 0

    print("\n" + "=" * 60)
    print("🚀 Locust Load Test Started")
    print("=" * 60)
    print(f"Target: {environment.host}")
    print("=" * 60 + "\n")


@events.test_stop.add_listener
def on_test_stop(environment, **kwargs):
    """테스트 종료 시 결과 출력"""
    print("\n" + "=" * 60)
    print("📊 Test Results Summary")
    print("=" * 60)
    print(f"🚨 Featured list over limit: {featured_overflow_count}")
    print(f"⚠️  Unavailable product leaked: {unavailable_leak_count}")
    print("=" * 60)

    if featured_overflow_count or unavailable_leak_count:
        print("❌ FAIL: Featured selection contract violated.")
    else:
        print("✅ PASS: Featured selection contract held.")

    print("=" * 60 + "\n")


# CLI 실행 예시 주석
"""
기본 실행 (웹 UI):
    locust -f load_tests/locustfile.py --host=http://localhost:8080

헤드리스 실행:
    locust -f load_tests/locustfile.py --headless --users 100 --spawn-rate 10 -t 60s --host=http://localhost:8080
"""
