"""Domain events for the Account aggregate."""

from protean.fields import DateTime, Identifier, String

from pizzeria.domain import pizzeria


@pizzeria.event(part_of="Account")
class AccountCreated:
    """Login credentials were issued for a new user."""

    __version__ = "v1"

    user_id: Identifier(required=True)
    email: String(required=True)
    created_at: DateTime(required=True)
