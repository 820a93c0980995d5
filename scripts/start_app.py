#!/usr/bin/env python3
"""Start the API server, reporting startup errors to Logfire."""

import sys

import logfire
import uvicorn

from commenttree.config import Settings
from commenttree.util.logging import setup_logging
from commenttree.util.observability import configure_logfire


def main() -> int:
    """Run uvicorn until it exits."""
    settings = Settings()

    # Before the app module is imported, so instrumentation has a target
    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting API server", host=settings.host, port=settings.port)
        uvicorn.run(
            "commenttree.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
