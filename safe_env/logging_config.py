"""
Structured logging setup for safe-env

Diagnostics go through structlog on top of a dedicated stdlib logger named
'safe_env' that writes to stderr and does not propagate. The processor chain
is bound to that logger with structlog.wrap_logger; structlog.configure is
never called, so the host application's structlog and root logger settings
are left untouched.
"""

import logging
import sys
from typing import Any, List, Optional

import structlog

from safe_env.settings import get_logging_config, validate_log_format, validate_log_level

LOGGER_NAME = 'safe_env'

# Diagnostics must stay visible; higher levels would drop the warning channel.
MAX_LOG_LEVEL = logging.WARNING

_configured = False
_processors: List[Any] = []


def build_processors(fmt: str) -> List[Any]:
    """Build the processor chain, ending in a JSON or console renderer"""
    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == 'json'
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        renderer,
    ]


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None, force: bool = False) -> None:
    """
    Configure the 'safe_env' stdlib logger and the package's processor chain.

    Args:
        level: stdlib level name, defaults to Config.LOG_LEVEL; clamped to WARNING
        fmt: 'console' or 'json', defaults to Config.LOG_FORMAT
        force: reconfigure even if logging was already set up

    Raises:
        SafeEnvConfigError: explicit level or fmt arguments are invalid
    """
    global _configured, _processors
    if _configured and not force:
        return

    defaults = get_logging_config()
    level_name = validate_log_level(level) if level else defaults['level']
    fmt_name = validate_log_format(fmt) if fmt else defaults['format']

    stdlib_logger = logging.getLogger(LOGGER_NAME)
    stdlib_logger.setLevel(min(logging.getLevelName(level_name), MAX_LOG_LEVEL))
    stdlib_logger.propagate = False
    for handler in list(stdlib_logger.handlers):
        stdlib_logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(message)s'))
    stdlib_logger.addHandler(handler)

    _processors = build_processors(fmt_name)
    _configured = True


def get_logger(name: str = LOGGER_NAME):
    """Return a structlog logger bound to the package's own chain, configuring on first use"""
    configure_logging()
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + '.'):
        name = f"{LOGGER_NAME}.{name}"
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=False,
    )
