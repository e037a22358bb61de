"""Customer registration: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from pizzeria.customer.customer import Customer
from pizzeria.domain import pizzeria


@pizzeria.command(part_of="Customer")
class RegisterCustomer:
    """Attach a customer profile to a user; contact fields may be blank."""

    user_id: Identifier(required=True)
    name: String(max_length=100)
    telephone: String(max_length=20)
    street_address: String(max_length=255)
    secondary_address: String(max_length=255)
    city: String(max_length=100)
    state: String(max_length=100)
    zip_code: String(max_length=20)


@pizzeria.command_handler(part_of=Customer)
class RegisterCustomerHandler:
    @handle(RegisterCustomer)
    def register_customer(self, command):
        repo = current_domain.repository_for(Customer)

        if repo.find_by_user(command.user_id) is not None:
            raise ValidationError({"user_id": ["A customer profile already exists for this user"]})

        customer = Customer.register(
            user_id=command.user_id,
            name=command.name,
            telephone=command.telephone,
            street_address=command.street_address,
            secondary_address=command.secondary_address,
            city=command.city,
            state=command.state,
            zip_code=command.zip_code,
        )
        repo.add(customer)
        return str(customer.id)
