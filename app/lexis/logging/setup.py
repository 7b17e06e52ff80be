"""Structlog setup for lexis.

Importing lexis never touches logging configuration. Loggers returned by
get_logger() and get_module_logger() are lazy structlog proxies, so they
pick up whatever configuration the host application installs, whenever
it installs it.

Hosts without their own structlog setup can opt in:

    from lexis.logging import configure_logging

    configure_logging()                 # console output, level from LOG_LEVEL
    configure_logging(is_production=True)   # JSON lines

Dependencies:
    - lexis.configuration.Settings
"""

import inspect
import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from lexis.configuration import settings

LIBRARY_LOGGER = "lexis"


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _build_processors(prod_mode: bool) -> list:
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Route lexis events through structlog and the standard logging module.

    Only the "lexis" logger level is set; handlers are added to the root
    logger solely when it has none yet. Under pytest the "lexis" logger is
    silenced and no handlers are added.

    Args:
        log_level: Level for the "lexis" logger (default: settings.LOG_LEVEL).
        is_production: JSON output when True, console output otherwise
            (default: settings.is_production).

    Returns:
        Logger bound to the library name.
    """
    prod_mode = is_production if is_production is not None else settings.is_production

    structlog.configure(
        processors=_build_processors(prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    if _is_test_environment():
        library_logger.setLevel(logging.CRITICAL + 1)
        return get_logger(LIBRARY_LOGGER)

    # No-op when the host already installed handlers.
    logging.basicConfig(format="%(message)s")

    effective_log_level = (log_level or settings.LOG_LEVEL).upper()
    library_logger.setLevel(getattr(logging, effective_log_level, logging.INFO))

    return get_logger(LIBRARY_LOGGER)


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a lazy logger, optionally bound to a name.

    Args:
        name: Optional logger name (typically __name__ in calling module)

    Returns:
        Logger proxy resolved against the structlog configuration in force
        at first use.
    """
    if name:
        return structlog.stdlib.get_logger(name, logger_name=name)
    return structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Get a lazy logger for the calling module.

    Binds component and module_path context, and names the underlying
    standard logger after the module so "lexis.*" level settings apply.

    Example:
        # In lexis/i18n/loader.py
        logger = get_module_logger()
        # context: {"component": "loader", "module_path": "lexis.i18n.loader"}
    """
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(frame) if frame is not None else None

    if module is None:
        return structlog.stdlib.get_logger(component="unknown")

    module_name = module.__name__
    return structlog.stdlib.get_logger(
        module_name,
        component=module_name.split(".")[-1],
        module_path=module_name,
    )
