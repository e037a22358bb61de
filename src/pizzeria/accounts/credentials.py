"""Credentials value object: what a guest types to become a member."""

from protean import invariant
from protean.fields import String

from pizzeria.domain import pizzeria
from pizzeria.shared.validation import check_email, check_password


@pizzeria.value_object
class Credentials:
    """Email and password for a new account.

    The email must be well formed and the password at least six characters.
    Constructing the value runs both checks, so bad credentials are rejected
    before anything is written.
    """

    email: String(required=True, max_length=254)
    password: String(required=True, max_length=128)

    @invariant.post
    def email_must_be_well_formed(self):
        check_email("email", self.email)

    @invariant.post
    def password_must_be_long_enough(self):
        check_password("password", self.password)
