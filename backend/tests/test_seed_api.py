"""Tests for the customer, plan, coupon and token routes used to seed the mock."""


class TestRoot:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json() == {"app": "stripe-mock", "version": "0.1.0", "status": "running"}


class TestCustomersApi:
    def test_create_and_get(self, client):
        response = client.post(
            "/v1/customers", json={"id": "cus_api", "email": "a@example.com", "currency": "USD"}
        )

        assert response.status_code == 200
        assert response.json()["currency"] == "usd"
        fetched = client.get("/v1/customers/cus_api").json()
        assert fetched["email"] == "a@example.com"
        assert fetched["subscriptions"] == {
            "object": "list",
            "data": [],
            "has_more": False,
            "url": None,
            "total_count": 0,
        }

    def test_create_with_source(self, client):
        token = client.post("/v1/tokens", json={}).json()

        customer = client.post("/v1/customers", json={"source": token["id"]}).json()

        assert customer["default_source"] == token["card"]["id"]
        assert client.get(f"/v1/tokens/{token['id']}").status_code == 404

    def test_create_with_unknown_source(self, client, store):
        response = client.post("/v1/customers", json={"id": "cus_x", "source": "tok_nope"})

        assert response.status_code == 404
        assert response.json()["error"]["param"] == "source"
        assert "cus_x" not in store.customers

    def test_duplicate_id(self, client):
        client.post("/v1/customers", json={"id": "cus_dup"})

        response = client.post("/v1/customers", json={"id": "cus_dup"})

        assert response.status_code == 400
        assert response.json()["error"]["param"] == "id"

    def test_invalid_email(self, client):
        response = client.post("/v1/customers", json={"email": "not-an-email"})
        assert response.status_code == 422

    def test_list(self, client):
        for i in range(3):
            client.post("/v1/customers", json={"id": f"cus_{i}"})

        response = client.get("/v1/customers?limit=2")

        assert response.status_code == 200
        assert len(response.json()) == 2
        assert response.headers["X-Total-Count"] == "3"

    def test_not_found(self, client):
        response = client.get("/v1/customers/cus_missing")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "No such customer: 'cus_missing'"


class TestPlansApi:
    def test_create_and_get(self, client):
        response = client.post(
            "/v1/plans",
            json={"id": "plan_api", "amount": 999, "interval": "year", "trial_period_days": 14},
        )

        assert response.status_code == 200
        plan = client.get("/v1/plans/plan_api").json()
        assert plan["amount"] == 999
        assert plan["interval"] == "year"
        assert plan["trial_period_days"] == 14

    def test_negative_amount(self, client):
        response = client.post("/v1/plans", json={"amount": -1})
        assert response.status_code == 422

    def test_list(self, client):
        client.post("/v1/plans", json={"amount": 0})

        response = client.get("/v1/plans")

        assert response.headers["X-Total-Count"] == "1"

    def test_duplicate_id(self, client):
        client.post("/v1/plans", json={"id": "plan_dup", "amount": 0})
        response = client.post("/v1/plans", json={"id": "plan_dup", "amount": 0})
        assert response.status_code == 400


class TestCouponsApi:
    def test_create_percent_off(self, client):
        response = client.post("/v1/coupons", json={"id": "TENOFF", "percent_off": 10})

        assert response.status_code == 200
        assert client.get("/v1/coupons/TENOFF").json()["percent_off"] == 10

    def test_amount_off_requires_currency(self, client):
        response = client.post("/v1/coupons", json={"amount_off": 500})
        assert response.status_code == 422

    def test_percent_and_amount_exclusive(self, client):
        response = client.post(
            "/v1/coupons", json={"percent_off": 5, "amount_off": 500, "currency": "usd"}
        )
        assert response.status_code == 422

    def test_repeating_requires_months(self, client):
        response = client.post("/v1/coupons", json={"percent_off": 5, "duration": "repeating"})
        assert response.status_code == 422

    def test_list(self, client):
        client.post("/v1/coupons", json={"percent_off": 5})
        assert client.get("/v1/coupons").headers["X-Total-Count"] == "1"

    def test_not_found(self, client):
        response = client.get("/v1/coupons/NOPE")
        assert response.status_code == 404
        assert response.json()["error"]["param"] == "coupon"


class TestTokensApi:
    def test_default_card(self, client):
        response = client.post("/v1/tokens")

        assert response.status_code == 200
        token = response.json()
        assert token["id"].startswith("tok_")
        assert token["card"]["brand"] == "Visa"
        assert token["card"]["last4"] == "4242"
        assert token["used"] is False

    def test_custom_card(self, client):
        response = client.post(
            "/v1/tokens", json={"card": {"number": "5555555555554444", "exp_month": 12}}
        )

        card = response.json()["card"]
        assert card["brand"] == "MasterCard"
        assert card["exp_month"] == 12

    def test_invalid_number(self, client):
        response = client.post("/v1/tokens", json={"card": {"number": "4242-abc"}})
        assert response.status_code == 422

    def test_get(self, client):
        token = client.post("/v1/tokens").json()
        assert client.get(f"/v1/tokens/{token['id']}").json() == token
