"""Pizza Planet FastAPI application.

Web server that runs every workflow synchronously per HTTP request. Each
request is wrapped in the pizzeria domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pizzeria.domain import logger, pizzeria
from pizzeria.utils.logging import add_context, clear_context

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from domain.toml:
#   - "test"       → in-memory stores, debug off
#   - "production" → PostgreSQL at DATABASE_URL
pizzeria.init()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Check the signing key and seed the catalogue pizzas once at startup."""
    from pizzeria.api.auth import signing_key
    from pizzeria.catalogue.seed import seed_catalogue

    signing_key()

    with pizzeria.domain_context():
        inserted = seed_catalogue()
    logger.info("Catalogue ready", seeded=len(inserted))
    yield


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Pizza Planet API",
    description="Order pizzas, design custom ones and manage your profile",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the pizzeria domain context for each request."""
    clear_context()
    add_context(method=request.method, path=request.url.path)
    with pizzeria.domain_context():
        response = await call_next(request)
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from pizzeria.api import register_error_handlers, routers  # noqa: E402

for router in routers:
    app.include_router(router)

register_error_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": pizzeria.name})
