"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier

from pizzeria.domain import pizzeria


@pizzeria.event(part_of="Order")
class OrderPlaced:
    """A customer ordered a pizza."""

    __version__ = "v1"

    order_id: Identifier(required=True)
    user_id: Identifier(required=True)
    pizza_id: Identifier(required=True)
    placed_at: DateTime(required=True)
