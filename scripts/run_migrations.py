#!/usr/bin/env python3
"""Apply the pod's database schema, reporting failures to Logfire.

Usage: run_migrations.py [REVISION]   (defaults to head)
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from pod.config import Settings
from pod.util.logging import setup_logging
from pod.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    revision = argv[1] if len(argv) > 1 else "head"
    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Never leave a pod running against a half-migrated schema
            raise

    logfire.info("Database schema is at revision", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
