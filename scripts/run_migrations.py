#!/usr/bin/env python3
"""Upgrade the accounts schema.

Usage:
    python scripts/run_migrations.py [revision]

The revision defaults to ``head``.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from gate.config import Settings
from gate.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade to the requested revision, reporting failures to Logfire."""
    settings = Settings()
    revision = argv[0] if argv else "head"

    configure_logfire(settings)

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Migration to {revision} failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than serve a stale schema
            raise

    logfire.info("Schema at {revision}", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
