"""Log-and-continue helper for side effects that must not fail a request."""

import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire


@asynccontextmanager
async def log_and_continue(operation: str, **attributes) -> AsyncIterator[None]:
    """Run a block whose failure is logged and then swallowed.

    Used around notification pushes, mails, reputation triggers and
    reconciliation steps. The enclosing business operation has already
    committed by the time these run.

    Args:
        operation: Name of the side effect, recorded on the log event
        **attributes: Extra structured attributes for the log event

    Usage:
        async with log_and_continue("reputation.update", user_id=str(user_id)):
            await reputation_client.update_reputation_score(user_id)
    """
    try:
        yield
    except Exception as e:
        logfire.error(
            "Best-effort operation failed",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
            **attributes,
        )
