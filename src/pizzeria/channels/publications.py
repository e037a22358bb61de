"""Read channels: what each caller is allowed to see of the stores.

Anonymous callers see only catalogue pizzas. A signed-in caller also sees
their own custom pizzas, their Customer record and their Orders, and never
another user's documents.
"""

from protean.utils.globals import current_domain

from pizzeria.catalogue.pizza import Pizza
from pizzeria.channels.views import customer_view, order_view, pizza_view
from pizzeria.customer.customer import Customer
from pizzeria.ordering.order import Order


def _orders_with_pizzas(user_id, pizzas_by_id):
    orders = current_domain.repository_for(Order).placed_by(user_id)
    return [order_view(order, pizzas_by_id.get(str(order.pizza_id))) for order in orders]


def _sorted(pizzas):
    return sorted(pizzas, key=lambda p: (p.custom, p.name))


def order_channel(user_id=None):
    """Data for the order screen: catalogue plus the caller's own documents."""
    pizza_repo = current_domain.repository_for(Pizza)
    pizzas = list(pizza_repo.catalogue())

    if user_id is None:
        return {"pizzas": [pizza_view(p) for p in _sorted(pizzas)], "customer": None, "orders": []}

    pizzas.extend(pizza_repo.owned_by(user_id))
    pizzas_by_id = {str(p.id): p for p in pizzas}

    return {
        "pizzas": [pizza_view(p) for p in _sorted(pizzas)],
        "customer": customer_view(current_domain.repository_for(Customer).find_by_user(user_id)),
        "orders": _orders_with_pizzas(user_id, pizzas_by_id),
    }


def profile_channel(user_id):
    """Data for the profile screen: only documents the caller owns.

    Orders for catalogue pizzas still show the pizza's name and price.
    """
    pizza_repo = current_domain.repository_for(Pizza)
    owned = sorted(pizza_repo.owned_by(user_id), key=lambda p: p.name)
    pizzas_by_id = {str(p.id): p for p in pizza_repo.catalogue()}
    pizzas_by_id.update({str(p.id): p for p in owned})

    return {
        "pizzas": [pizza_view(p) for p in owned],
        "customer": customer_view(current_domain.repository_for(Customer).find_by_user(user_id)),
        "orders": _orders_with_pizzas(user_id, pizzas_by_id),
    }
