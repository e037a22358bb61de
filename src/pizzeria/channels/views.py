"""Plain-dict views of stored documents, as the read channels publish them."""


def to_usd(cents):
    """Format a price in cents as dollars, e.g. 1000 -> "$10.00"."""
    return f"${cents / 100:.2f}"


def pizza_view(pizza):
    toppings = pizza.toppings.as_dict() if pizza.toppings else {"meats": [], "non_meats": []}
    return {
        "id": str(pizza.id),
        "name": pizza.name,
        "crust": pizza.crust,
        "sauce": pizza.sauce,
        "size": pizza.size,
        "toppings": toppings,
        "price": pizza.price,
        "price_display": to_usd(pizza.price),
        "custom": bool(pizza.custom),
        "owner_id": str(pizza.owner_id) if pizza.owner_id else None,
    }


def customer_view(customer):
    if customer is None:
        return None
    return {"id": str(customer.id), "user_id": str(customer.user_id), **customer.contact()}


def order_view(order, pizza=None):
    return {
        "id": str(order.id),
        "user_id": str(order.user_id),
        "pizza_id": str(order.pizza_id),
        "pizza_name": pizza.name if pizza else None,
        "price": pizza.price if pizza else None,
        "price_display": to_usd(pizza.price) if pizza else None,
        "placed_at": order.placed_at.isoformat() if order.placed_at else None,
    }
