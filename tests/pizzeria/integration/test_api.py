"""Integration tests for the HTTP endpoints via TestClient."""

from datetime import timedelta

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pizzeria.api import register_error_handlers, routers
from pizzeria.api.auth import create_access_token, decode_access_token
from pizzeria.catalogue.pizza import Pizza
from pizzeria.catalogue.seed import seed_catalogue
from pizzeria.customer.customer import Customer
from pizzeria.ordering.order import Order
from protean import current_domain


@pytest.fixture()
def client():
    app = FastAPI()
    for router in routers:
        app.include_router(router)
    register_error_handlers(app)
    return TestClient(app)


@pytest.fixture()
def menu():
    seed_catalogue()
    return {p.name: str(p.id) for p in current_domain.repository_for(Pizza).catalogue()}


def _sign_up(client, email="jane@example.com", password="secret123"):
    response = client.post("/accounts", json={"email": email, "password": password})
    assert response.status_code == 201
    return response.json()["user_id"]


def _login(client, email="jane@example.com", password="secret123"):
    response = client.post("/accounts/login", json={"email": email, "password": password})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


class TestAccountEndpoints:
    def test_sign_up(self, client):
        user_id = _sign_up(client)
        assert current_domain.repository_for(Customer).find_by_user(user_id) is not None

    def test_short_password(self, client):
        response = client.post("/accounts", json={"email": "jane@example.com", "password": "abc"})
        assert response.status_code == 400
        assert response.json()["errors"] == {"password": ["Please use at least six characters."]}

    def test_duplicate_email(self, client):
        _sign_up(client)
        response = client.post("/accounts", json={"email": "jane@example.com", "password": "secret123"})
        assert response.status_code == 409

    def test_login(self, client):
        user_id = _sign_up(client)
        response = client.post("/accounts/login", json={"email": "jane@example.com", "password": "secret123"})

        assert response.status_code == 200
        data = response.json()
        assert data["user_id"] == user_id
        assert data["token_type"] == "bearer"
        assert decode_access_token(data["access_token"]) == user_id

    def test_login_with_wrong_password(self, client):
        _sign_up(client)
        response = client.post("/accounts/login", json={"email": "jane@example.com", "password": "nope-nope"})
        assert response.status_code == 401


class TestOrderEndpoint:
    def test_signed_in_catalogue_order(self, client, menu):
        user_id = _sign_up(client)
        response = client.post(
            "/orders",
            json={"pizza": {"kind": "catalogue", "pizza_id": menu["Chicago"]}},
            headers=_login(client),
        )

        assert response.status_code == 201
        order = current_domain.repository_for(Order).get(response.json()["order_id"])
        assert str(order.user_id) == user_id

    def test_signed_in_custom_order(self, client):
        _sign_up(client)
        response = client.post(
            "/orders",
            json={
                "pizza": {
                    "kind": "custom",
                    "name": "Friday Special",
                    "crust": "Thin",
                    "sauce": "Tomato",
                    "size": 12,
                    "meats": ["Pepperoni"],
                    "non_meats": ["Mushrooms"],
                }
            },
            headers=_login(client),
        )
        assert response.status_code == 201

    def test_guest_sign_up_while_ordering(self, client, menu, contact):
        response = client.post(
            "/orders",
            json={
                "pizza": {"kind": "catalogue", "pizza_id": menu["Classic Supreme"]},
                "customer": contact,
                "credentials": {"email": "guest@example.com", "password": "secret123"},
            },
        )

        assert response.status_code == 201
        assert _login(client, "guest@example.com")

    def test_no_pizza_selected(self, client):
        _sign_up(client)
        response = client.post("/orders", json={"pizza": {"kind": "none"}}, headers=_login(client))

        assert response.status_code == 400
        assert response.json()["errors"] == {"pizza": ["Make sure to pick a pizza!"]}

    def test_missing_pizza(self, client):
        _sign_up(client)
        response = client.post(
            "/orders",
            json={"pizza": {"kind": "catalogue", "pizza_id": "no-such-pizza"}},
            headers=_login(client),
        )

        assert response.status_code == 404
        assert response.json()["step"] == "pizza"

    def test_guest_with_taken_email(self, client, menu, contact):
        _sign_up(client)
        response = client.post(
            "/orders",
            json={
                "pizza": {"kind": "catalogue", "pizza_id": menu["Chicago"]},
                "customer": contact,
                "credentials": {"email": "jane@example.com", "password": "secret123"},
            },
        )

        assert response.status_code == 409
        assert response.json()["step"] == "account"

    def test_anonymous_without_credentials(self, client, menu):
        response = client.post("/orders", json={"pizza": {"kind": "catalogue", "pizza_id": menu["Chicago"]}})
        assert response.status_code == 400

    def test_invalid_token(self, client, menu):
        response = client.post(
            "/orders",
            json={"pizza": {"kind": "catalogue", "pizza_id": menu["Chicago"]}},
            headers={"Authorization": "Bearer not-a-token"},
        )
        assert response.status_code == 401

    def test_expired_token(self, client, menu):
        user_id = _sign_up(client)
        token = create_access_token(user_id, expires_delta=timedelta(minutes=-1))
        response = client.post(
            "/orders",
            json={"pizza": {"kind": "catalogue", "pizza_id": menu["Chicago"]}},
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 401


class TestCustomerEndpoint:
    def test_update_contact_information(self, client, contact):
        user_id = _sign_up(client)
        response = client.put("/customers/me", json=contact, headers=_login(client))

        assert response.status_code == 200
        customer = current_domain.repository_for(Customer).get(response.json()["customer_id"])
        assert str(customer.user_id) == user_id
        assert customer.name == "Jane Doe"

    def test_missing_fields(self, client):
        _sign_up(client)
        response = client.put("/customers/me", json={"name": "Jane"}, headers=_login(client))

        assert response.status_code == 400
        assert "city" in response.json()["errors"]

    def test_requires_sign_in(self, client, contact):
        response = client.put("/customers/me", json=contact)
        assert response.status_code == 401


class TestChannelEndpoints:
    def test_anonymous_order_channel(self, client, menu):
        response = client.get("/channels/order")

        assert response.status_code == 200
        data = response.json()
        assert {p["name"] for p in data["pizzas"]} == set(menu)
        assert data["customer"] is None

    def test_profile_channel(self, client, menu):
        _sign_up(client)
        headers = _login(client)
        client.post("/orders", json={"pizza": {"kind": "catalogue", "pizza_id": menu["Chicago"]}}, headers=headers)

        response = client.get("/channels/profile", headers=headers)

        assert response.status_code == 200
        data = response.json()
        assert data["pizzas"] == []
        assert data["orders"][0]["pizza_name"] == "Chicago"
        assert data["orders"][0]["price_display"] == "$150.00"

    def test_profile_channel_requires_sign_in(self, client):
        assert client.get("/channels/profile").status_code == 401
