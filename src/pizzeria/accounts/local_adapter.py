"""Local account service: accounts kept in the domain's own store."""

import os

import bcrypt
import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from pizzeria.accounts.account import Account
from pizzeria.accounts.port import AccountServicePort
from pizzeria.shared.errors import AccountCreationError

logger = structlog.get_logger(__name__)


def _normalize(email):
    return email.strip().lower()


class LocalAccountService(AccountServicePort):
    """Stores ``Account`` aggregates and hashes passwords with bcrypt."""

    def __init__(self, rounds: int | None = None):
        self.rounds = rounds or int(os.environ.get("ACCOUNT_BCRYPT_ROUNDS", "12"))

    def create_account(self, email: str, password: str) -> str:
        email = _normalize(email)
        repo = current_domain.repository_for(Account)

        if repo.find_by_email(email) is not None:
            logger.info("Account creation refused", reason="duplicate_email")
            raise AccountCreationError({"email": ["Email already exists."]})

        password_hash = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=self.rounds)).decode("utf-8")
        account = Account.open(email=email, password_hash=password_hash)
        repo.add(account)

        logger.info("Account created", user_id=str(account.id))
        return str(account.id)

    def authenticate(self, email: str, password: str) -> str | None:
        account = current_domain.repository_for(Account).find_by_email(_normalize(email))
        if account is None:
            return None

        if not bcrypt.checkpw(password.encode("utf-8"), account.password_hash.encode("utf-8")):
            return None

        return str(account.id)

    def account_exists(self, user_id: str) -> bool:
        try:
            current_domain.repository_for(Account).get(user_id)
        except ObjectNotFoundError:
            return False
        return True
