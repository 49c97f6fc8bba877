#!/usr/bin/env python3
"""Apply Alembic migrations for the invitation engine tables."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from vouch.config import Settings
from vouch.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the database to ``revision`` and report failures to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
            logfire.info("Database migrations applied", revision=revision)
            return 0
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the container rather than start on a broken schema
            raise


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
