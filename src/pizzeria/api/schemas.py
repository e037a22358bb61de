"""Pydantic request/response schemas for the pizzeria API."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field

# --- Request Schemas ---


class RegisterAccountRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"email": "jane@example.com", "password": "secret123"}]}}

    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)


class LoginRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"email": "jane@example.com", "password": "secret123"}]}}

    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)


class ContactRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Jane Doe",
                    "telephone": "(555) 123-4567",
                    "street_address": "123 Elm Street",
                    "secondary_address": "Apt 4",
                    "city": "Springfield",
                    "state": "IL",
                    "zip_code": "62701",
                }
            ]
        }
    }

    name: str | None = Field(None, max_length=100)
    telephone: str | None = Field(None, max_length=20)
    street_address: str | None = Field(None, max_length=255)
    secondary_address: str | None = Field(None, max_length=255)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=100)
    zip_code: str | None = Field(None, max_length=20)


class CataloguePizzaSelection(BaseModel):
    kind: Literal["catalogue"]
    pizza_id: str


class CustomPizzaSelection(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "kind": "custom",
                    "name": "Friday Special",
                    "crust": "Thin",
                    "sauce": "Tomato",
                    "size": 12,
                    "meats": ["Pepperoni"],
                    "non_meats": ["Mushrooms", "Onions"],
                }
            ]
        }
    }

    kind: Literal["custom"]
    name: str | None = Field(None, max_length=100)
    crust: str | None = Field(None, max_length=50)
    sauce: str | None = Field(None, max_length=50)
    size: int | None = None
    meats: list[str] = Field(default_factory=list)
    non_meats: list[str] = Field(default_factory=list)


class NoPizzaSelection(BaseModel):
    kind: Literal["none"]


PizzaSelection = Annotated[
    CataloguePizzaSelection | CustomPizzaSelection | NoPizzaSelection,
    Field(discriminator="kind"),
]


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "pizza": {"kind": "catalogue", "pizza_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890"},
                    "customer": None,
                    "credentials": None,
                }
            ]
        }
    }

    pizza: PizzaSelection | None = None
    customer: ContactRequest | None = None
    credentials: RegisterAccountRequest | None = None


# --- Response Schemas ---


class UserIdResponse(BaseModel):
    user_id: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: str


class OrderIdResponse(BaseModel):
    order_id: str


class CustomerIdResponse(BaseModel):
    customer_id: str


class ToppingsView(BaseModel):
    meats: list[str]
    non_meats: list[str]


class PizzaView(BaseModel):
    id: str
    name: str
    crust: str
    sauce: str
    size: int
    toppings: ToppingsView
    price: int
    price_display: str
    custom: bool
    owner_id: str | None = None


class CustomerView(BaseModel):
    id: str
    user_id: str
    name: str
    telephone: str
    street_address: str
    secondary_address: str
    city: str
    state: str
    zip_code: str


class OrderView(BaseModel):
    id: str
    user_id: str
    pizza_id: str
    pizza_name: str | None = None
    price: int | None = None
    price_display: str | None = None
    placed_at: str | None = None


class ChannelResponse(BaseModel):
    pizzas: list[PizzaView]
    customer: CustomerView | None = None
    orders: list[OrderView]
