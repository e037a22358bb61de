"""Smoke tests for the assembled application in src/app.py."""

import pytest
import structlog
from fastapi.testclient import TestClient
from pizzeria.api.auth import DEV_SECRET_KEY, signing_key
from pizzeria.catalogue.pizza import Pizza
from pizzeria.utils.logging import add_context, clear_context
from protean import current_domain


@pytest.fixture()
def client():
    from app import app

    with TestClient(app) as client:
        yield client


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "domain": "pizzeria"}


def test_startup_seeds_catalogue(client):
    names = {p.name for p in current_domain.repository_for(Pizza).catalogue()}
    assert names == {"Classic Supreme", "Chicago", "Classic Pepperoni"}


def test_requests_run_in_domain_context(client):
    response = client.get("/channels/order")

    assert response.status_code == 200
    assert len(response.json()["pizzas"]) == 3


def test_sign_up_and_order_through_app(client):
    client.post("/accounts", json={"email": "jane@example.com", "password": "secret123"})
    token = client.post("/accounts/login", json={"email": "jane@example.com", "password": "secret123"}).json()
    headers = {"Authorization": f"Bearer {token['access_token']}"}
    chicago = next(p for p in client.get("/channels/order").json()["pizzas"] if p["name"] == "Chicago")

    response = client.post("/orders", json={"pizza": {"kind": "catalogue", "pizza_id": chicago["id"]}}, headers=headers)

    assert response.status_code == 201
    profile = client.get("/channels/profile", headers=headers).json()
    assert [o["id"] for o in profile["orders"]] == [response.json()["order_id"]]


class TestSigningKey:
    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("PIZZERIA_SECRET_KEY", "s3cret")
        assert signing_key() == "s3cret"

    def test_development_fallback(self, monkeypatch):
        monkeypatch.delenv("PIZZERIA_SECRET_KEY", raising=False)
        monkeypatch.setenv("PROTEAN_ENV", "test")
        assert signing_key() == DEV_SECRET_KEY

    def test_required_in_production(self, monkeypatch):
        monkeypatch.delenv("PIZZERIA_SECRET_KEY", raising=False)
        monkeypatch.setenv("PROTEAN_ENV", "production")
        with pytest.raises(RuntimeError, match="PIZZERIA_SECRET_KEY"):
            signing_key()


def test_request_log_context():
    clear_context()
    add_context(method="GET", path="/health")
    assert structlog.contextvars.get_contextvars() == {"method": "GET", "path": "/health"}

    clear_context()
    assert structlog.contextvars.get_contextvars() == {}
