"""Logging configuration for pod people."""

import logging
import sys

from pod.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging.

    Adapters log protocol-level detail through stdlib loggers; domain events
    go through logfire.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    # Remote pods are chatty at DEBUG
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.getLogger("pod").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: environment={settings.environment}, "
        f"level={logging.getLevelName(level)}"
    )
