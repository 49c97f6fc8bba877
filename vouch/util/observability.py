"""Logfire setup.

Call ``configure_logfire`` once at process start, before the app module is
imported. Everything else logs straight through ``logfire``:

    logfire.info("Invitation sent", invitation_id=str(invitation.id))

    with logfire.span("verification_workflow.send_invites", domain=domain.value):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from vouch.config import ObservabilitySettings, Settings


def _should_send(observability: ObservabilitySettings) -> bool:
    # An explicit flag wins; otherwise a token opts in
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the API process.

    Without OBSERVABILITY__SEND_TO_LOGFIRE or OBSERVABILITY__LOGFIRE_TOKEN
    output stays on the console.
    """
    observability = settings.observability
    send_to_logfire = _should_send(observability)

    logfire.configure(
        service_name="vouch-backend",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace HTTP requests and the notification websocket."""

    def request_attributes(request, attributes):
        # WebSocket connections have no method
        extra = {"path": request.url.path}
        method = getattr(request, "method", None)
        if method:
            extra["method"] = method
        if request.client:
            extra["client_host"] = request.client.host
        return {**attributes, **extra}

    logfire.instrument_fastapi(
        app,
        capture_headers=True,
        request_attributes_mapper=request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace outgoing mail and reputation calls."""
    logfire.instrument_httpx()
