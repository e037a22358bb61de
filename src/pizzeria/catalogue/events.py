"""Domain events for the Pizza aggregate."""

from protean.fields import Boolean, DateTime, Identifier, Integer, String

from pizzeria.domain import pizzeria


@pizzeria.event(part_of="Pizza")
class PizzaCreated:
    """A pizza was added to the catalogue, either by the shop or a customer."""

    __version__ = "v1"

    pizza_id: Identifier(required=True)
    name: String(required=True)
    price: Integer(required=True)
    custom: Boolean(required=True)
    owner_id: Identifier()
    created_at: DateTime(required=True)
