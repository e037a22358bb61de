"""Error kinds raised by the pizzeria workflows.

Validation failures extend Protean's ``ValidationError`` and lookups extend
``ObjectNotFoundError``, so framework-level handlers still recognise them.
Workflows tag errors with the ``step`` that failed.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError


class SchemaValidationError(ValidationError):
    """A request payload is missing required fields or has the wrong shape."""

    step = None


class NoPizzaSelectedError(ValidationError):
    """An order was submitted without a pizza chosen."""

    step = None

    def __init__(self):
        super().__init__({"pizza": ["Make sure to pick a pizza!"]})


class AccountCreationError(ValidationError):
    """The account service refused to create an account."""

    step = None


class NotFoundError(ObjectNotFoundError):
    """A referenced Customer, Pizza or account does not exist."""

    step = None


class StoreWriteError(Exception):
    """A store write failed for a reason other than validation."""

    def __init__(self, step, reason):
        self.step = step
        self.reason = reason
        super().__init__(f"Could not complete the {step} step: {reason}")
