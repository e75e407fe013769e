"""Logging configuration setup.

Configures the standard library logging tree with dictConfig:
- A single console handler on the root logger (child loggers propagate)
- JSONL format for machine parsing, or a plain text format for local runs
- Uvicorn loggers re-routed through the root handlers
"""

from __future__ import annotations

import logging
import logging.config
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from object_gateway.core.settings.logs import LoggingSettings

logger = logging.getLogger(__name__)
_LOGGING_INITIALIZED = False

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(
    log_settings: LoggingSettings | None = None,
    *,
    force: bool = False,
    **configure_kwargs: Any,
) -> None:
    """Ensure logging is configured once across entrypoints.

    Args:
        log_settings: Optional logging settings instance. If omitted, settings
            are loaded via get_logging_settings().
        force: Reconfigure logging even if it was already initialized.
        **configure_kwargs: Explicit overrides for configure_logging().
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED and not force:
        return

    if log_settings is None:
        from object_gateway.core.settings import get_logging_settings

        log_settings = get_logging_settings()

    log_config = {**log_settings.to_logging_kwargs(), **configure_kwargs}
    configure_logging(**log_config)
    _LOGGING_INITIALIZED = True


def configure_logging(
    log_level: str = "INFO",
    json_logs: bool = True,
    service_name: str = "object-gateway",
    include_uvicorn: bool = True,
    capture_warnings: bool = True,
) -> None:
    """Configure logging with dictConfig.

    Args:
        log_level: Root logger level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_logs: Enable JSONL (JSON Lines) structured logging.
        service_name: Static ``service`` field added to every JSON record.
        include_uvicorn: Drop uvicorn's own handlers so its records reach root.
        capture_warnings: Forward Python warnings to logging system.

    Example:
        from object_gateway.core.settings import get_logging_settings

        configure_logging(**get_logging_settings().to_logging_kwargs())
    """
    if capture_warnings:
        logging.captureWarnings(True)

    logging.config.dictConfig(
        build_logging_config(
            log_level=log_level,
            json_logs=json_logs,
            service_name=service_name,
            include_uvicorn=include_uvicorn,
        )
    )
    logger.debug(
        "Logging configured",
        extra={"log_level": log_level, "json_logs": json_logs},
    )


def build_logging_config(
    log_level: str,
    json_logs: bool,
    service_name: str,
    include_uvicorn: bool,
) -> dict[str, Any]:
    """Build the dictConfig mapping.

    Returns:
        A ``logging.config.dictConfig`` compatible dict.
    """
    if json_logs:
        formatter: dict[str, Any] = {
            "()": "object_gateway.infra.logging.formatters.JSONFormatter",
            "static": {"service": service_name},
        }
    else:
        formatter = {"format": TEXT_FORMAT}

    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": formatter},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "root": {
            "level": log_level.upper(),
            "handlers": ["console"],
        },
    }

    if include_uvicorn:
        config["loggers"] = {
            name: {"handlers": [], "propagate": True} for name in UVICORN_LOGGERS
        }

    return config
