"""Order draft: the order form's state, handed to ``place_order`` by value.

A draft answers three questions, each with an explicit variant:

* which pizza: ``PizzaByReference`` to a catalogue entry, an inline
  ``CustomPizza``, or ``None`` when nothing has been picked yet;
* who it is for: ``CustomerByReference`` to the signed-in user, or inline
  ``ContactDetails`` from a guest;
* optional ``Credentials`` when a guest signs up while ordering.

Building any of the value objects validates it, so a malformed draft fails
before the workflow writes anything.
"""

import json

from protean import invariant
from protean.fields import Identifier, Integer, String, Text

from pizzeria.accounts.credentials import Credentials
from pizzeria.catalogue.pizza import Toppings
from pizzeria.customer.contact import ContactDetails
from pizzeria.domain import pizzeria

__all__ = [
    "ContactDetails",
    "Credentials",
    "CustomerByReference",
    "CustomPizza",
    "OrderDraft",
    "PizzaByReference",
]


@pizzeria.value_object
class PizzaByReference:
    """A pizza already in the catalogue (or one of the caller's own)."""

    pizza_id: Identifier(required=True)


@pizzeria.value_object
class CustomPizza:
    """A pizza the customer builds on the order form."""

    name: String(required=True, max_length=100)
    crust: String(required=True, max_length=50)
    sauce: String(required=True, max_length=50)
    size: Integer(required=True, min_value=1)
    meats: Text()  # JSON: list of topping names
    non_meats: Text()  # JSON: list of topping names

    @invariant.post
    def toppings_must_be_lists_of_names(self):
        Toppings(meats=self.meats, non_meats=self.non_meats)

    @classmethod
    def build(cls, name, crust, sauce, size, meats=None, non_meats=None):
        return cls(
            name=name,
            crust=crust,
            sauce=sauce,
            size=size,
            meats=json.dumps(list(meats or [])),
            non_meats=json.dumps(list(non_meats or [])),
        )


@pizzeria.value_object
class CustomerByReference:
    """The signed-in user, whose saved contact information is used."""

    user_id: Identifier(required=True)


class OrderDraft:
    """Everything the order form collected for one submission."""

    def __init__(self, pizza=None, customer=None, credentials=None):
        self.pizza = pizza
        self.customer = customer
        self.credentials = credentials

    def __repr__(self):
        return (
            f"OrderDraft(pizza={type(self.pizza).__name__}, "
            f"customer={type(self.customer).__name__}, "
            f"signing_up={self.credentials is not None})"
        )
