"""
API tests for checkout, order history and status updates.
"""

import pytest

from storefront.api.schemas import MAX_DB_INT
from storefront.services.token_service import TokenService

pytestmark = pytest.mark.api


def checkout(client, items, headers=None, user_id=None):
    payload = {"items": [{"productId": p, "quantity": q} for p, q in items]}
    if user_id is not None:
        payload["userId"] = user_id
    return client.post("/api/orders", json=payload, headers=headers or {})


class TestCheckout:
    def test_authenticated_checkout(self, api_client, register_user, create_product):
        # Arrange
        user_id, headers = register_user()
        product = create_product(price="10.00", stock=5)

        # Act
        response = checkout(api_client, [(product["id"], 2)], headers=headers)

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Order created successfully"
        order = body["order"]
        assert order["userId"] == user_id
        assert order["total"] == "20.00"
        assert order["status"] == "pending"
        assert order["items"][0]["unitPrice"] == "10.00"
        assert order["items"][0]["subtotal"] == "20.00"
        assert api_client.get(f"/api/products/{product['id']}").json()["stock"] == 3

    def test_duplicate_lines(self, api_client, create_product):
        product = create_product(price="10.00", stock=5)

        response = checkout(api_client, [(product["id"], 2), (product["id"], 3)])

        assert response.status_code == 201
        assert len(response.json()["order"]["items"]) == 2
        assert api_client.get(f"/api/products/{product['id']}").json()["stock"] == 0

    def test_client_prices_ignored(self, api_client, create_product):
        product = create_product(price="10.00", stock=5)

        response = api_client.post(
            "/api/orders", json={"items": [{"productId": product["id"], "quantity": 1, "price": "0.01"}]}
        )

        assert response.status_code == 201
        assert response.json()["order"]["total"] == "10.00"

    def test_guest_checkout(self, api_client, create_product):
        product = create_product()

        response = checkout(api_client, [(product["id"], 1)])

        assert response.status_code == 201
        assert response.json()["order"]["userId"] is None

    def test_userid_without_token_must_exist(self, api_client, create_product):
        product = create_product()

        response = checkout(api_client, [(product["id"], 1)], user_id=4242)

        assert response.status_code == 400
        assert response.json()["error"] == "NOT_FOUND"

    def test_userid_of_someone_else_is_forbidden(self, api_client, register_user, create_product):
        _, headers = register_user()
        other_id, _ = register_user(name="John Buyer", email="john@shop.io")
        product = create_product()

        response = checkout(api_client, [(product["id"], 1)], headers=headers, user_id=other_id)

        assert response.status_code == 403

    def test_insufficient_stock(self, api_client, create_product):
        product = create_product(stock=1)

        response = checkout(api_client, [(product["id"], 2)])

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "INSUFFICIENT_STOCK"
        assert body["details"] == {"product_id": product["id"], "requested": 2, "available": 1}
        assert api_client.get(f"/api/products/{product['id']}").json()["stock"] == 1

    def test_unknown_product_is_bad_request(self, api_client):
        response = checkout(api_client, [(9999, 1)])

        assert response.status_code == 400
        assert response.json()["error"] == "NOT_FOUND"

    def test_deleted_product_is_bad_request(self, api_client, admin_headers, create_product):
        product = create_product()
        api_client.delete(f"/api/products/{product['id']}", headers=admin_headers)

        assert checkout(api_client, [(product["id"], 1)]).status_code == 400

    @pytest.mark.parametrize(
        "payload",
        [
            {"items": []},
            {},
            {"items": [{"productId": 1, "quantity": 0}]},
            {"items": [{"productId": 1}]},
            {"items": [{"productId": "one", "quantity": 1}]},
        ],
    )
    def test_malformed_cart(self, api_client, payload):
        response = api_client.post("/api/orders", json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"


class TestOrderHistory:
    def test_own_orders_newest_first(self, api_client, register_user, create_product):
        user_id, headers = register_user()
        product = create_product(stock=10)
        first = checkout(api_client, [(product["id"], 1)], headers=headers).json()["order"]
        second = checkout(api_client, [(product["id"], 2)], headers=headers).json()["order"]

        response = api_client.get(f"/api/orders/user/{user_id}", headers=headers)

        assert response.status_code == 200
        orders = response.json()["orders"]
        assert [o["id"] for o in orders] == [second["id"], first["id"]]
        assert orders[0]["items"][0]["productName"] == "Desk Lamp"
        assert "userEmail" not in orders[0] or orders[0]["userEmail"] is None

    def test_other_users_orders_forbidden(self, api_client, register_user):
        user_id, _ = register_user()
        _, other_headers = register_user(name="John Buyer", email="john@shop.io")

        assert api_client.get(f"/api/orders/user/{user_id}").status_code == 401
        assert api_client.get(f"/api/orders/user/{user_id}", headers=other_headers).status_code == 403

    def test_admin_listing(self, api_client, admin_headers, register_user, create_product):
        _, headers = register_user()
        product = create_product()
        checkout(api_client, [(product["id"], 1)], headers=headers)

        response = api_client.get("/api/orders/admin/all", headers=admin_headers)

        assert response.status_code == 200
        order = response.json()["orders"][0]
        assert order["userName"] == "Jane Buyer"
        assert order["userEmail"] == "jane@shop.io"

    def test_admin_listing_requires_admin(self, api_client, register_user):
        _, headers = register_user()

        assert api_client.get("/api/orders/admin/all", headers=headers).status_code == 403


class TestOrderStatus:
    def test_update_status(self, api_client, admin_headers, create_product):
        product = create_product()
        order = checkout(api_client, [(product["id"], 1)]).json()["order"]

        response = api_client.put(
            f"/api/orders/{order['id']}/status", json={"status": "completed"}, headers=admin_headers
        )

        assert response.status_code == 200
        updated = response.json()["order"]
        assert updated["status"] == "completed"
        assert updated["total"] == order["total"]
        assert updated["items"] == order["items"]

    @pytest.mark.parametrize("status", ["shipped", "Completed", ""])
    def test_invalid_status(self, api_client, admin_headers, create_product, status):
        product = create_product()
        order = checkout(api_client, [(product["id"], 1)]).json()["order"]

        response = api_client.put(f"/api/orders/{order['id']}/status", json={"status": status}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_STATUS"

    def test_unknown_order(self, api_client, admin_headers):
        response = api_client.put("/api/orders/9999/status", json={"status": "completed"}, headers=admin_headers)

        assert response.status_code == 400

    def test_status_requires_admin(self, api_client, register_user, create_product):
        _, headers = register_user()
        product = create_product()
        order = checkout(api_client, [(product["id"], 1)]).json()["order"]

        response = api_client.put(f"/api/orders/{order['id']}/status", json={"status": "completed"}, headers=headers)

        assert response.status_code == 403


class TestTokenIdentity:
    def test_token_for_missing_user_is_unauthorized(self, api_client, settings, admin_headers, create_product):
        product = create_product(stock=5)
        token = TokenService(settings).create_user_token(999, False)

        response = checkout(api_client, [(product["id"], 1)], headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["error"] == "UNAUTHORIZED"
        assert api_client.get("/api/orders/admin/all", headers=admin_headers).json()["orders"] == []
        assert api_client.get(f"/api/products/{product['id']}").json()["stock"] == 5

    def test_admin_claim_checked_against_stored_user(self, api_client, settings, register_user):
        user_id, _ = register_user()
        token = TokenService(settings).create_user_token(user_id, True)
        headers = {"Authorization": f"Bearer {token}"}

        assert api_client.get("/api/orders/admin/all", headers=headers).status_code == 403
        assert api_client.put("/api/orders/1/status", json={"status": "completed"}, headers=headers).status_code == 403


class TestIdBounds:
    @pytest.mark.parametrize(
        "item",
        [
            {"productId": 10**20, "quantity": 1},
            {"productId": MAX_DB_INT + 1, "quantity": 1},
            {"productId": 1, "quantity": 10**20},
        ],
    )
    def test_oversized_cart_values(self, api_client, create_product, item):
        create_product()

        response = api_client.post("/api/orders", json={"items": [item]})

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_oversized_user_id(self, api_client, create_product):
        product = create_product()

        response = checkout(api_client, [(product["id"], 1)], user_id=10**20)

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_oversized_path_ids(self, api_client, admin_headers, register_user):
        _, headers = register_user()
        huge = 10**20

        assert api_client.get(f"/api/orders/user/{huge}", headers=headers).status_code == 400
        assert (
            api_client.put(f"/api/orders/{huge}/status", json={"status": "completed"}, headers=admin_headers).status_code
            == 400
        )
