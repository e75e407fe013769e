"""Logging infrastructure.

Basic usage:
    import logging

    from object_gateway.infra.logging import setup_logging

    setup_logging()
    logger = logging.getLogger(__name__)
    logger.info("Object deleted", extra={"key": "a.txt"})
"""

from object_gateway.infra.logging.config import (
    build_logging_config,
    configure_logging,
    setup_logging,
)
from object_gateway.infra.logging.formatters import JSONFormatter

__all__ = [
    "JSONFormatter",
    "build_logging_config",
    "configure_logging",
    "setup_logging",
]
