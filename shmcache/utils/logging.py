"""Structured logging setup using structlog.

The same shared processor chain (context vars, log level, timestamps, stack
info) feeds either a coloured ConsoleRenderer for local development or a
JSONRenderer for production.  The renderer is chosen from the ``APP_ENV``
environment variable (default ``"development"``), or forced via the
``json_output`` flag.

shmcache is embedded in host applications, so the standard-library side is
limited to the ``shmcache`` logger: one handler owned by this module renders
its records through the same processors.  Handlers and levels the host has
set on any other logger, the root logger included, are left alone.
"""

import logging
import os
import sys

import structlog

LOGGER_NAMESPACE = "shmcache"


class ShmCacheHandler(logging.StreamHandler):
    """Stream handler installed by :func:`configure_logging`.

    The dedicated class marks which handler on the ``shmcache`` logger this
    module may replace.
    """


def configure_logging(log_level: str = "INFO", json_output: bool = False) -> structlog.BoundLogger:
    """Configure structlog with environment-appropriate rendering.

    Calling it again replaces the previous configuration and the previously
    installed :class:`ShmCacheHandler`, never a handler someone else added.

    Args:
        log_level: Logging level string (DEBUG, INFO, WARNING, ERROR, FATAL).
        json_output: Force JSON output. When False, uses console rendering in
                     development and JSON in production (detected via APP_ENV).

    Returns:
        A configured structlog BoundLogger.
    """
    app_env = os.environ.get("APP_ENV", "development")
    use_json = json_output or app_env == "production"
    level = logging.getLevelName(log_level.upper())

    # Order matters: contextvars first, then level/timestamps.
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if use_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            *shared_processors,
            renderer,
        ],
        # Drops messages below log_level before any processor runs.
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        # A later call must reach loggers already bound at module level.
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )

    handler = ShmCacheHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.setLevel(level)

    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    for existing in list(package_logger.handlers):
        if isinstance(existing, ShmCacheHandler):
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)

    return structlog.get_logger()


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a named structlog logger, configuring defaults on first use.

    Args:
        name: Logger name, typically the module name.
    """
    if not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(logger_name=name)
