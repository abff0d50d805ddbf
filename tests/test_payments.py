"""
Tests for payment method configuration.
"""

import pytest

from feirinha.payments.models import PaymentMethod


class TestCreatePaymentMethod:
    """POST /payments"""

    def test_create(self, client):
        response = client.post("/payments", json={"name": "Cartão de crédito", "taxRate": 4.79})

        assert response.status_code == 201
        data = response.json()
        assert data["id"] is not None
        assert data["name"] == "Cartão de crédito"
        assert data["taxRate"] == pytest.approx(4.79)

    def test_zero_tax_rate_is_allowed(self, client):
        response = client.post("/payments", json={"name": "Pix", "taxRate": 0})

        assert response.status_code == 201
        assert response.json()["taxRate"] == 0

    @pytest.mark.parametrize("body", [
        {"name": "Pix"},
        {"taxRate": 1.5},
        {"name": "", "taxRate": 1.5},
    ])
    def test_name_and_tax_rate_are_required(self, client, body):
        response = client.post("/payments", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "Name and tax rate are required"}

    @pytest.mark.parametrize("rate", [-0.5, 120])
    def test_tax_rate_range(self, client, rate):
        response = client.post("/payments", json={"name": "Boleto", "taxRate": rate})

        assert response.status_code == 400
        assert response.json() == {"error": "Tax rate must be between 0 and 100"}

    def test_names_are_not_unique(self, client):
        assert client.post("/payments", json={"name": "Pix", "taxRate": 0}).status_code == 201
        assert client.post("/payments", json={"name": "Pix", "taxRate": 0.5}).status_code == 201


class TestListPaymentMethods:
    """GET /payments"""

    def test_sorted_by_name(self, client, db):
        db.add_all([
            PaymentMethod(name="Pix", tax_rate=0),
            PaymentMethod(name="Cartão", tax_rate=4.79),
            PaymentMethod(name="Dinheiro", tax_rate=0),
        ])
        db.commit()

        response = client.get("/payments")

        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["Cartão", "Dinheiro", "Pix"]


class TestUpdatePaymentMethod:
    """PUT /payments/{id}"""

    def test_update_tax_rate(self, client, card):
        response = client.put(f"/payments/{card.id}", json={"taxRate": 3.5})

        assert response.status_code == 200
        assert response.json()["taxRate"] == pytest.approx(3.5)
        assert response.json()["name"] == "Cartão"

    def test_update_name(self, client, card):
        response = client.put(f"/payments/{card.id}", json={"name": " Crédito "})

        assert response.status_code == 200
        assert response.json()["name"] == "Crédito"
        assert response.json()["taxRate"] == pytest.approx(4.79)

    def test_update_missing(self, client):
        response = client.put("/payments/404", json={"taxRate": 1})

        assert response.status_code == 404
        assert response.json() == {"error": "Payment method not found"}

    def test_update_rejects_invalid_rate(self, client, card):
        response = client.put(f"/payments/{card.id}", json={"taxRate": 101})

        assert response.status_code == 400

    def test_existing_sales_keep_their_totals(self, client, card, tomato):
        sale = client.post(
            "/sales",
            json={"items": [{"productId": tomato.id, "quantity": 2, "price": 10}], "paymentMethodId": card.id},
        ).json()

        client.put(f"/payments/{card.id}", json={"taxRate": 10})

        sales = client.get("/sales").json()
        assert sales[0]["id"] == sale["id"]
        assert sales[0]["totalTax"] == pytest.approx(0.958)
