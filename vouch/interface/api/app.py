"""FastAPI application for the Vouch API.

Logfire is configured by ``scripts/start_app.py`` before this module is
imported; instrumentation here only attaches to it.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vouch.config import Settings
from vouch.interface.api.routes import (
    health,
    invitations,
    notifications,
    questions,
    realtime,
    verifications,
)
from vouch.interface.error import register_exception_handlers
from vouch.util.di.container import create_container, setup_di
from vouch.util.observability import instrument_fastapi, instrument_httpx

# Local frontends allowed alongside the configured one
DEV_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Disposes the database engine and the reputation HTTP client
    await app.state.dishka_container.close()


def create_app() -> FastAPI:
    """Build the app with production dependencies.

    Tests call ``setup_di`` again with a mocked container.
    """
    settings = Settings()
    instrument_httpx()

    app_instance = FastAPI(
        title="Vouch API",
        description="Invitations, peer verification and notifications for professional profiles",
        version="0.1.0",
        lifespan=lifespan,
    )
    instrument_fastapi(app_instance)

    # The auth cookie is sent cross-origin, so credentials must be allowed
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url, *DEV_ORIGINS],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    setup_di(app_instance, create_container())
    register_exception_handlers(app_instance)

    for module in (health, invitations, verifications, questions, notifications, realtime):
        app_instance.include_router(module.router)

    return app_instance


app = create_app()
