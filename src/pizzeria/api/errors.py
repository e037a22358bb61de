"""Translate workflow errors into HTTP responses."""

from collections.abc import Mapping

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ValidationError
from protean.integrations.fastapi import register_exception_handlers

from pizzeria.shared.errors import (
    AccountCreationError,
    NoPizzaSelectedError,
    NotFoundError,
    SchemaValidationError,
    StoreWriteError,
)


def _messages(exc):
    messages = getattr(exc, "messages", None)
    if isinstance(messages, Mapping):
        return {key: list(value) if isinstance(value, list | tuple) else value for key, value in messages.items()}
    return {"error": [str(messages if messages is not None else exc)]}


def _responder(status_code):
    async def handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=status_code,
            content={"errors": _messages(exc), "step": getattr(exc, "step", None)},
        )

    return handler


async def _store_write_failed(request: Request, exc: StoreWriteError) -> JSONResponse:
    return JSONResponse(
        status_code=503,
        content={"errors": {"store": [exc.reason]}, "step": exc.step},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Map Protean and pizzeria errors to status codes.

    The most specific handler wins, so the pizzeria subclasses override the
    generic Protean mappings.
    """
    register_exception_handlers(app)

    app.add_exception_handler(ValidationError, _responder(400))
    app.add_exception_handler(SchemaValidationError, _responder(400))
    app.add_exception_handler(NoPizzaSelectedError, _responder(400))
    app.add_exception_handler(AccountCreationError, _responder(409))
    app.add_exception_handler(NotFoundError, _responder(404))
    app.add_exception_handler(StoreWriteError, _store_write_failed)
