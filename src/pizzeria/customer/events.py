"""Domain events for the Customer aggregate."""

from protean.fields import Identifier, String

from pizzeria.domain import pizzeria


@pizzeria.event(part_of="Customer")
class CustomerRegistered:
    """A customer profile was attached to a user account."""

    __version__ = "v1"

    customer_id: Identifier(required=True)
    user_id: Identifier(required=True)
    name: String()


@pizzeria.event(part_of="Customer")
class ContactInformationUpdated:
    """A customer's contact details were overwritten."""

    __version__ = "v1"

    customer_id: Identifier(required=True)
    user_id: Identifier(required=True)
    name: String()
    telephone: String()
    street_address: String()
    secondary_address: String()
    city: String()
    state: String()
    zip_code: String()
