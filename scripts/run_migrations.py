#!/usr/bin/env python3
"""Apply pending database migrations, reporting failures to Logfire."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from commenttree.config import Settings
from commenttree.util.logging import setup_logging
from commenttree.util.observability import configure_logfire


def main() -> int:
    """Upgrade the schema to the latest revision."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    try:
        with logfire.span("run_migrations"):
            command.upgrade(Config("alembic.ini"), "head")
        logfire.info("Database migrations completed")
        return 0
    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail the deploy rather than serve against a broken schema
        raise


if __name__ == "__main__":
    sys.exit(main())
