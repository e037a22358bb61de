"""Account service port: the interface the workflows program against.

Account storage and authentication belong to the account service, not to
the pizzeria stores. Adapters are swapped via ``ACCOUNT_SERVICE_ADAPTER``.
"""

from abc import ABC, abstractmethod


class AccountServicePort(ABC):
    """Abstract interface for account service adapters."""

    @abstractmethod
    def create_account(self, email: str, password: str) -> str:
        """Create login credentials and return the new user id.

        Raises:
            AccountCreationError: the email is taken or the service refused.
        """
        ...

    @abstractmethod
    def authenticate(self, email: str, password: str) -> str | None:
        """Return the user id when the credentials match, else None."""
        ...

    @abstractmethod
    def account_exists(self, user_id: str) -> bool:
        ...
