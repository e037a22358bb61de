"""Order aggregate: one pizza ordered by one user."""

from datetime import datetime

from protean.fields import DateTime, Identifier

from pizzeria.domain import pizzeria


@pizzeria.aggregate
class Order:
    """A placed order. Written once by the order workflow, never changed."""

    user_id: Identifier(required=True)
    pizza_id: Identifier(required=True)
    placed_at: DateTime(default=datetime.now)

    @classmethod
    def place(cls, user_id, pizza_id):
        from pizzeria.ordering.events import OrderPlaced

        now = datetime.now()
        order = cls(user_id=user_id, pizza_id=pizza_id, placed_at=now)
        order.raise_(
            OrderPlaced(
                order_id=order.id,
                user_id=user_id,
                pizza_id=pizza_id,
                placed_at=now,
            )
        )
        return order


@pizzeria.repository(part_of=Order)
class OrderRepository:
    def placed_by(self, user_id: str) -> list[Order]:
        """Orders of one user, newest first."""
        orders = self._dao.query.filter(user_id=str(user_id)).all().items
        return sorted(orders, key=lambda o: o.placed_at, reverse=True)
