#!/usr/bin/env python3
"""Start the Vouch API with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from vouch.config import Settings
from vouch.util.observability import configure_logfire


def main() -> int:
    """Start the API server; startup failures are reported to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting Vouch API",
            environment=settings.environment,
            port=settings.port,
            git_sha=settings.git_sha,
        )

        # The app module configures nothing itself; Logfire is already set up here
        uvicorn.run(
            "vouch.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            # WebSocket rooms live in process memory
            workers=1,
        )

        return 0

    except Exception as e:
        logfire.error(
            "API startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
