# productstore/api/__init__.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.concurrency import run_in_threadpool

from productstore.api.errors import register_error_handlers
from productstore.api.middleware import register_middleware
from productstore.api.routers import health, products
from productstore.data.database import Database
from productstore.services.auth import CredentialVerifier, StaticApiKeyVerifier


@asynccontextmanager
async def lifespan(app: FastAPI):
    database: Database = app.state.database
    #ping with retries blocks, keep it off the event loop
    await run_in_threadpool(database.connect)
    try:
        yield
    finally:
        database.close()


def create_app(
    database: Database | None = None,
    verifier: CredentialVerifier | None = None,
) -> FastAPI:
    app = FastAPI(
        title="Product Service",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.database = database or Database()
    app.state.verifier = verifier or StaticApiKeyVerifier()

    register_middleware(app)
    register_error_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)

    return app
