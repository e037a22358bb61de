"""Account service adapter selection."""

import os

_account_service = None


def get_account_service():
    """Return the configured account service adapter (singleton).

    Uses the local adapter by default; override with the
    ACCOUNT_SERVICE_ADAPTER environment variable.
    """
    global _account_service
    if _account_service is None:
        adapter = os.environ.get("ACCOUNT_SERVICE_ADAPTER", "local")
        if adapter == "local":
            from pizzeria.accounts.local_adapter import LocalAccountService

            _account_service = LocalAccountService()
        else:
            raise ValueError(f"Unknown account service adapter: {adapter}")
    return _account_service


def reset_account_service():
    """Drop the cached adapter so the next call re-reads the environment."""
    global _account_service
    _account_service = None
