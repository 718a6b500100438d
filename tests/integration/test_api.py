"""API 통합 테스트 (TestClient + in-memory SQLite + FakeCacheService)"""
import pytest

from tradelink.core.config import settings
from tradelink.repositories.models import Order

from tests.fixtures.factories import auth_headers, make_product, make_user


@pytest.fixture
def marketplace(db_session):
    """Coffee/Tea 바이어 + 셀러 3명 (S2: tea+coffee, S1: coffee+spices, S3: flowers)"""
    buyer = make_user(db_session, "buyer", full_name="Bea Buyer")
    s1 = make_user(db_session, "seller", company_name="Bean Traders", years_of_experience=1)
    s2 = make_user(db_session, "seller", company_name="Leaf & Bean", years_of_experience=1)
    s3 = make_user(db_session, "seller", company_name="Bloom", years_of_experience=9)
    make_product(db_session, s1, "Coffee")
    make_product(db_session, s1, "Spices")
    make_product(db_session, s2, "Tea")
    make_product(db_session, s2, "coffee ")
    make_product(db_session, s3, "Flowers")
    return {"buyer": buyer, "s1": s1, "s2": s2, "s3": s3}


def _save_interests(client, buyer, interests):
    response = client.put(
        "/api/buyers/profile",
        json={"productInterests": interests, "location": "Seoul"},
        headers=auth_headers(buyer),
    )
    assert response.status_code == 200
    return response


class TestHealth:
    def test_health_ok(self, client):
        response = client.get("/health")
        data = response.json()

        assert response.status_code == 200
        assert data["status"] == "ok"
        assert data["cache"] is True
        assert data["database"] is True

    def test_health_degraded_without_cache(self, client, fake_cache):
        fake_cache.fail = True
        assert client.get("/health").json()["status"] == "degraded"

    def test_root(self, client):
        assert client.get("/").json()["docs"] == "/docs"


class TestAuth:
    def test_missing_token(self, client):
        response = client.get("/api/matchmaking")

        assert response.status_code == 401
        assert response.json()["error_code"] == "AUTHENTICATION_ERROR"

    def test_invalid_token(self, client):
        response = client.get("/api/matchmaking", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401

    def test_wrong_role(self, client, marketplace):
        response = client.get("/api/matchmaking", headers=auth_headers(marketplace["s1"]))
        assert response.status_code == 403


class TestMatchmaking:
    def test_weighted_composite_ranking(self, client, marketplace):
        _save_interests(client, marketplace["buyer"], ["Coffee", "Tea"])

        response = client.get("/api/matchmaking", headers=auth_headers(marketplace["buyer"]))
        matches = response.json()["matches"]

        assert response.status_code == 200
        assert [m["seller_id"] for m in matches] == [marketplace["s2"].id, marketplace["s1"].id]
        assert matches[0]["shared_products"] == ["coffee", "tea"]
        assert matches[0]["performance_metrics"]["total_orders"] == 0
        assert matches[0]["seller_rating"] == 0.0
        assert all(0 <= m["score"] <= 1 for m in matches)

    def test_overlap_count_policy(self, client, marketplace, monkeypatch):
        monkeypatch.setattr(settings, "matchmaking_score_policy", "overlap_count")
        _save_interests(client, marketplace["buyer"], ["Coffee", "Tea"])

        matches = client.get("/api/matchmaking", headers=auth_headers(marketplace["buyer"])).json()["matches"]

        assert [(m["seller_id"], m["score"]) for m in matches] == [
            (marketplace["s2"].id, 2),
            (marketplace["s1"].id, 1),
        ]

    def test_result_cached_and_invalidated(self, client, marketplace, fake_cache):
        buyer = marketplace["buyer"]
        _save_interests(client, buyer, ["Coffee"])
        client.get("/api/matchmaking", headers=auth_headers(buyer))
        assert f"matchmaking_{buyer.id}" in fake_cache.store

        _save_interests(client, buyer, ["Flowers"])
        assert f"matchmaking_{buyer.id}" not in fake_cache.store

        matches = client.get("/api/matchmaking", headers=auth_headers(buyer)).json()["matches"]
        assert [m["seller_id"] for m in matches] == [marketplace["s3"].id]

    def test_missing_profile(self, client, marketplace):
        response = client.get("/api/matchmaking", headers=auth_headers(marketplace["buyer"]))

        assert response.status_code == 404
        assert response.json()["error_code"] == "BUYER_PROFILE_NOT_FOUND"

    def test_empty_interests(self, client, marketplace):
        _save_interests(client, marketplace["buyer"], [])

        response = client.get("/api/matchmaking", headers=auth_headers(marketplace["buyer"]))

        assert response.status_code == 200
        assert response.json() == {"matches": []}

    def test_works_when_cache_down(self, client, marketplace, fake_cache):
        fake_cache.fail = True
        _save_interests(client, marketplace["buyer"], ["Tea"])

        response = client.get("/api/matchmaking", headers=auth_headers(marketplace["buyer"]))

        assert response.status_code == 200
        assert [m["seller_id"] for m in response.json()["matches"]] == [marketplace["s2"].id]

    def test_completed_orders_raise_performance(self, client, db_session, marketplace):
        buyer, s1 = marketplace["buyer"], marketplace["s1"]
        s1_product = make_product(db_session, s1, "Tea")
        db_session.add(Order(
            buyer_id=buyer.id, seller_id=s1.id, product_id=s1_product.id, quantity=1,
            total_amount=10, status="Completed", response_time_hours=1.0,
        ))
        db_session.commit()
        _save_interests(client, buyer, ["Tea"])

        matches = client.get("/api/matchmaking", headers=auth_headers(buyer)).json()["matches"]

        assert matches[0]["seller_id"] == s1.id
        assert matches[0]["performance_metrics"] == {
            "success_rate": 100.0, "avg_response_time": 1.0, "total_orders": 1,
        }


class TestBuyerProfile:
    def test_get_after_put(self, client, marketplace, fake_cache):
        buyer = marketplace["buyer"]
        _save_interests(client, buyer, ["Coffee", "Tea"])

        response = client.get("/api/buyers/profile", headers=auth_headers(buyer))
        data = response.json()

        assert response.status_code == 200
        assert data["productInterests"] == ["Coffee", "Tea"]
        assert data["location"] == "Seoul"
        assert f"buyer_profile_{buyer.id}" in fake_cache.store

    def test_not_found(self, client, marketplace):
        response = client.get("/api/buyers/profile", headers=auth_headers(marketplace["buyer"]))
        assert response.status_code == 404

    def test_rejects_dangerous_terms(self, client, marketplace):
        response = client.put(
            "/api/buyers/profile",
            json={"productInterests": ["<script>"]},
            headers=auth_headers(marketplace["buyer"]),
        )
        assert response.status_code == 422


class TestSellerProfile:
    def test_partial_update(self, client, marketplace):
        seller = marketplace["s1"]

        response = client.put(
            "/api/sellers/profile",
            json={"location": "Incheon", "phone_number": "+821012345678"},
            headers=auth_headers(seller),
        )
        data = response.json()

        assert response.status_code == 200
        assert data["location"] == "Incheon"
        assert data["company_name"] == "Bean Traders"

    def test_empty_update(self, client, marketplace):
        response = client.put("/api/sellers/profile", json={}, headers=auth_headers(marketplace["s1"]))

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_invalid_phone(self, client, marketplace):
        response = client.put(
            "/api/sellers/profile", json={"phone_number": "call me"}, headers=auth_headers(marketplace["s1"])
        )
        assert response.status_code == 422

    def test_update_invalidates_cache(self, client, marketplace, fake_cache):
        seller = marketplace["s1"]
        client.get("/api/sellers/profile", headers=auth_headers(seller))
        assert f"seller_profile_{seller.id}" in fake_cache.store

        client.put("/api/sellers/profile", json={"years_of_experience": 12}, headers=auth_headers(seller))

        assert f"seller_profile_{seller.id}" not in fake_cache.store
        profile = client.get("/api/sellers/profile", headers=auth_headers(seller)).json()
        assert profile["years_of_experience"] == 12


class TestProductsAndOrders:
    def test_product_lifecycle(self, client, marketplace):
        headers = auth_headers(marketplace["s3"])

        created = client.post(
            "/api/seller-products", json={"name": "Tulips", "price": 3.5, "stock": 20}, headers=headers
        )
        assert created.status_code == 201

        duplicate = client.post(
            "/api/seller-products", json={"name": "tulips", "price": 1, "stock": 1}, headers=headers
        )
        assert duplicate.status_code == 409

        names = [p["name"] for p in client.get("/api/seller-products", headers=headers).json()]
        assert names == ["Flowers", "Tulips"]

        deleted = client.delete(f"/api/seller-products/{created.json()['id']}", headers=headers)
        assert deleted.status_code == 200

    def test_invalid_product(self, client, marketplace):
        response = client.post(
            "/api/seller-products",
            json={"name": "Tea", "price": 0, "stock": -1},
            headers=auth_headers(marketplace["s1"]),
        )
        assert response.status_code == 422

    def test_order_flow(self, client, db_session, marketplace):
        buyer, seller = marketplace["buyer"], marketplace["s2"]
        product = make_product(db_session, seller, "Matcha", price=12.0)

        placed = client.post(
            "/api/orders", json={"product_id": product.id, "quantity": 3}, headers=auth_headers(buyer)
        )
        assert placed.status_code == 201
        order = placed.json()
        assert order["total_amount"] == 36.0
        assert order["status"] == "Pending"

        seller_orders = client.get("/api/orders", headers=auth_headers(seller)).json()
        assert [o["id"] for o in seller_orders] == [order["id"]]

        updated = client.patch(
            f"/api/orders/{order['id']}/status", json={"status": "Accepted"}, headers=auth_headers(seller)
        )
        assert updated.status_code == 200
        assert updated.json()["response_time_hours"] is not None

    def test_other_seller_cannot_update(self, client, db_session, marketplace):
        product = make_product(db_session, marketplace["s2"], "Matcha")
        order = client.post(
            "/api/orders", json={"product_id": product.id, "quantity": 1}, headers=auth_headers(marketplace["buyer"])
        ).json()

        response = client.patch(
            f"/api/orders/{order['id']}/status", json={"status": "Shipped"}, headers=auth_headers(marketplace["s1"])
        )
        assert response.status_code == 403

    def test_unknown_status(self, client, marketplace):
        response = client.patch(
            "/api/orders/abc/status", json={"status": "Lost"}, headers=auth_headers(marketplace["s1"])
        )
        assert response.status_code == 422

    def test_unknown_product(self, client, marketplace):
        response = client.post(
            "/api/orders", json={"product_id": "missing", "quantity": 1}, headers=auth_headers(marketplace["buyer"])
        )
        assert response.status_code == 404
