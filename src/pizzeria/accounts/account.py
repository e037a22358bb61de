"""Account aggregate: the login identity behind every customer and order."""

from datetime import datetime

from protean.fields import DateTime, String

from pizzeria.domain import pizzeria


@pizzeria.aggregate
class Account:
    """Credentials for one user. The account id is the ``user_id`` that
    Customer, custom Pizza and Order documents refer to.

    Only the bcrypt hash of the password is stored.
    """

    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=128)
    created_at: DateTime(default=datetime.now)

    @classmethod
    def open(cls, email, password_hash):
        from pizzeria.accounts.events import AccountCreated

        now = datetime.now()
        account = cls(email=email, password_hash=password_hash, created_at=now)
        account.raise_(
            AccountCreated(
                user_id=account.id,
                email=email,
                created_at=now,
            )
        )
        return account


@pizzeria.repository(part_of=Account)
class AccountRepository:
    def find_by_email(self, email: str) -> Account | None:
        results = self._dao.query.filter(email=email).all().items
        return results[0] if results else None
