"""Contact information updates: command, handler and the update workflow."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from pizzeria.customer.customer import _UNSET, Customer
from pizzeria.domain import pizzeria
from pizzeria.shared.errors import NotFoundError
from pizzeria.shared.validation import CONTACT_FIELDS, validate_contact

logger = structlog.get_logger(__name__)


@pizzeria.command(part_of="Customer")
class UpdateContactInformation:
    """Overwrite the listed contact fields; omitted fields stay as they are."""

    user_id: Identifier(required=True)
    name: String(max_length=100)
    telephone: String(max_length=20)
    street_address: String(max_length=255)
    secondary_address: String(max_length=255)
    city: String(max_length=100)
    state: String(max_length=100)
    zip_code: String(max_length=20)


@pizzeria.command_handler(part_of=Customer)
class ManageContactInformationHandler:
    @handle(UpdateContactInformation)
    def update_contact_information(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.find_by_user(command.user_id)
        if customer is None:
            raise NotFoundError({"customer": [f"No customer profile for user {command.user_id}"]})

        changes = {}
        for field in CONTACT_FIELDS:
            value = getattr(command, field)
            changes[field] = value if value is not None else _UNSET

        customer.update_contact(**changes)
        repo.add(customer)
        return str(customer.id)


def update_customer(user_id, **contact):
    """Validate a contact payload and apply it to the user's Customer record.

    Returns the Customer id. Raises ``SchemaValidationError`` for a bad
    payload and ``NotFoundError`` when the user has no Customer record.
    """
    cleaned = validate_contact(contact)

    customer_id = current_domain.process(
        UpdateContactInformation(user_id=user_id, **cleaned),
        asynchronous=False,
    )
    logger.info("Contact information updated", user_id=str(user_id), customer_id=customer_id)
    return customer_id
