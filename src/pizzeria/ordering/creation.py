"""Order creation: command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from pizzeria.catalogue.pizza import Pizza
from pizzeria.domain import pizzeria
from pizzeria.ordering.order import Order
from pizzeria.shared.errors import NotFoundError


@pizzeria.command(part_of="Order")
class CreateOrder:
    user_id: Identifier(required=True)
    pizza_id: Identifier(required=True)


@pizzeria.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        try:
            current_domain.repository_for(Pizza).get(command.pizza_id)
        except ObjectNotFoundError:
            raise NotFoundError({"pizza": [f"Pizza {command.pizza_id} does not exist"]}) from None

        order = Order.place(user_id=command.user_id, pizza_id=command.pizza_id)
        current_domain.repository_for(Order).add(order)
        return str(order.id)
