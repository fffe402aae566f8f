"""Structured logging for carousel hosts, built on structlog.

Only the host-facing pieces log: the registry reports registrations, slide
changes and ignored tokens, and the settings loader reports where a config
came from. State, codec, transitions and geometry stay silent so they remain
pure.

Usage:
    from slidekit.core.logging import configure_logging, get_logger

    configure_logging(development=True)

    logger = get_logger(__name__)
    logger.info("carousel_registered", carousel_id="games", slide_count=3)
"""

import logging
import sys
from os import getenv
from typing import Any, cast

import structlog
from structlog.types import Processor

ENVIRONMENT_VAR = "ENVIRONMENT"
LOG_LEVEL_VAR = "LOG_LEVEL"
PRODUCTION = "production"
DEFAULT_LOG_LEVEL = "INFO"


def build_processors(development: bool) -> list[Processor]:
    """Return the structlog processor chain for one output mode.

    Development ends in a colored console renderer; production renders one
    JSON object per event, with exception info formatted into it.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if development:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    return processors


def configure_logging(
    development: bool | None = None,
    log_level: str | None = None,
    cache_loggers: bool = True,
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        development: Pretty console output if True, JSON if False. If None,
            anything but ENVIRONMENT=production counts as development.
        log_level: Level name, case-insensitive. If None, reads LOG_LEVEL
            (default INFO). Unknown names fall back to INFO.
        cache_loggers: Freeze each logger's configuration on first use.
            Test suites that reconfigure logging between tests turn this off.
    """
    if development is None:
        development = getenv(ENVIRONMENT_VAR, "development").lower() != PRODUCTION

    level_name = (log_level or getenv(LOG_LEVEL_VAR, DEFAULT_LOG_LEVEL)).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    structlog.configure(
        processors=build_processors(development),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache_loggers,
    )

    # force=True replaces handlers a host framework installed first
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
        force=True,
    )
    logging.getLogger().setLevel(numeric_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, typically with ``__name__``."""
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


def bind_contextvars(**kwargs: Any) -> None:
    """Attach fields to every following log call in this context.

    Example:
        bind_contextvars(page="home", widget_count=2)
        logger.info("dispatching")  # Includes page and widget_count
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_contextvars() -> None:
    structlog.contextvars.clear_contextvars()


def unbind_contextvars(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)
