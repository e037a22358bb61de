"""Customer aggregate: one contact and address record per user account."""

from protean.fields import Identifier, String

from pizzeria.domain import pizzeria
from pizzeria.shared.validation import CONTACT_FIELDS

# Sentinel for distinguishing "not provided" from a value in partial updates
_UNSET = object()


@pizzeria.aggregate
class Customer:
    """Contact information for the user identified by ``user_id``.

    Registration creates the record with empty fields; the order form or the
    profile screen fills it in later. There is at most one Customer per user.
    """

    user_id: Identifier(required=True, unique=True)
    name: String(max_length=100, default="")
    telephone: String(max_length=20, default="")
    street_address: String(max_length=255, default="")
    secondary_address: String(max_length=255, default="")
    city: String(max_length=100, default="")
    state: String(max_length=100, default="")
    zip_code: String(max_length=20, default="")

    @classmethod
    def register(cls, user_id, **contact):
        from pizzeria.customer.events import CustomerRegistered

        customer = cls(user_id=user_id, **{k: v for k, v in contact.items() if v is not None})
        customer.raise_(
            CustomerRegistered(
                customer_id=customer.id,
                user_id=user_id,
                name=customer.name,
            )
        )
        return customer

    def update_contact(
        self,
        name=_UNSET,
        telephone=_UNSET,
        street_address=_UNSET,
        secondary_address=_UNSET,
        city=_UNSET,
        state=_UNSET,
        zip_code=_UNSET,
    ):
        from pizzeria.customer.events import ContactInformationUpdated

        changes = {
            "name": name,
            "telephone": telephone,
            "street_address": street_address,
            "secondary_address": secondary_address,
            "city": city,
            "state": state,
            "zip_code": zip_code,
        }
        for field, value in changes.items():
            if value is not _UNSET:
                setattr(self, field, value)

        self.raise_(
            ContactInformationUpdated(
                customer_id=self.id,
                user_id=self.user_id,
                **self.contact(),
            )
        )

    def contact(self):
        return {field: getattr(self, field) or "" for field in CONTACT_FIELDS}


@pizzeria.repository(part_of=Customer)
class CustomerRepository:
    def find_by_user(self, user_id: str) -> Customer | None:
        results = self._dao.query.filter(user_id=str(user_id)).all().items
        return results[0] if results else None
