"""Structlog configuration for the storefront client, with a stdlib bridge.

Modules log through ``structlog.get_logger()`` at import time; the lazy proxy
picks up this configuration on first use. httpx and httpcore log every request
line at INFO, so they are held at WARNING unless LOG_LEVEL asks for DEBUG.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from storefront_client.infrastructure.configuration import StorefrontSettings
from storefront_client.infrastructure.observability.logging.storefront_processor import (
    StorefrontSchemaProcessor,
)

_NOISY_LOGGERS = ("httpx", "httpcore")
_JSON_ENVIRONMENTS = frozenset({"qa", "staging", "prod", "production"})

_configured_for: tuple[str, ...] | None = None


def configure_logging(settings: StorefrontSettings) -> None:
    """Configure structlog and the root logger from ``settings``.

    Repeated calls with the same observability settings are no-ops, so every
    session built in one process can call this.
    """
    global _configured_for  # noqa: PLW0603
    fingerprint = (settings.log_level, settings.log_format, settings.service_name, settings.app_env)
    if _configured_for == fingerprint:
        return
    _configured_for = fingerprint

    renderer = select_renderer(settings.log_format, settings.app_env)
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        StorefrontSchemaProcessor(settings.service_name, settings.app_env),
    ]

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.log_level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(settings.log_level.upper())

    quiet = settings.log_level.upper() != "DEBUG"
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING if quiet else logging.DEBUG)


def select_renderer(log_format: str, app_env: str) -> Any:
    """JSON for deployed environments or LOG_FORMAT=json, console otherwise."""
    log_format = log_format.lower()
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=True)
    if app_env.lower() in _JSON_ENVIRONMENTS:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)
