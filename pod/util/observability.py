"""Observability configuration using Logfire.

Domain services open a span per operation and emit structured events:

    with logfire.span("identity_resolver.resolve", account_identifier=...):
        logfire.info("Remote identity cached", identity_id=...)

This module configures the exporter and instruments the libraries whose
calls we want traced without touching their call sites.
"""

import logfire
from sqlalchemy.ext.asyncio import AsyncEngine

from pod.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Cloud sending is controlled by OBSERVABILITY__SEND_TO_LOGFIRE and, when
    that is unset, by the presence of OBSERVABILITY__LOGFIRE_TOKEN.

    Args:
        settings: Application settings
    """
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    else:
        send_to_logfire = bool(settings.observability.logfire_token)

    config_kwargs = {
        "service_name": "pod-people",
        "service_version": "1.0.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        pod_host=settings.pod.host,
        send_to_logfire=send_to_logfire,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every SQL statement issued by the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,
    )
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Trace outbound requests to remote pods."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
