"""Account registration: new login credentials plus an empty customer profile."""

import structlog
from protean.utils.globals import current_domain

from pizzeria.accounts import get_account_service
from pizzeria.accounts.credentials import Credentials
from pizzeria.customer.registration import RegisterCustomer

logger = structlog.get_logger(__name__)


def register_account(email, password):
    """Sign a new user up and return their user id.

    Credentials are validated before the account service is called, so a
    short password or malformed email never reaches a store. The Customer
    placeholder is created empty and filled in from the profile screen.
    """
    credentials = Credentials(email=email, password=password)

    user_id = get_account_service().create_account(credentials.email, credentials.password)
    current_domain.process(RegisterCustomer(user_id=user_id), asynchronous=False)

    logger.info("Account registered", user_id=user_id)
    return user_id
