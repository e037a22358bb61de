"""ContactDetails value object: a delivery contact typed into the order form."""

from protean import invariant
from protean.fields import String

from pizzeria.domain import pizzeria
from pizzeria.shared.validation import check_phone


@pizzeria.value_object
class ContactDetails:
    """Name, phone and address of the person the pizza goes to.

    Everything but the secondary address line is required.
    """

    name: String(required=True, max_length=100)
    telephone: String(required=True, max_length=20)
    street_address: String(required=True, max_length=255)
    secondary_address: String(max_length=255)
    city: String(required=True, max_length=100)
    state: String(required=True, max_length=100)
    zip_code: String(required=True, max_length=20)

    @invariant.post
    def telephone_must_look_like_a_phone_number(self):
        if self.telephone:
            check_phone("telephone", self.telephone)

    def as_dict(self):
        return {
            "name": self.name,
            "telephone": self.telephone,
            "street_address": self.street_address,
            "secondary_address": self.secondary_address or "",
            "city": self.city,
            "state": self.state,
            "zip_code": self.zip_code,
        }
