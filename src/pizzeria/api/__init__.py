"""Pizzeria API package."""

from pizzeria.api.errors import register_error_handlers
from pizzeria.api.routes import account_router, channel_router, customer_router, order_router

routers = [account_router, order_router, customer_router, channel_router]

__all__ = [
    "account_router",
    "channel_router",
    "customer_router",
    "order_router",
    "register_error_handlers",
    "routers",
]
