"""Structlog configuration and module loggers.

Every wint module logs through a structlog logger bound to its own module
path, so events such as ``lang_tag_resolved`` or ``url_host_missing`` carry
the component that emitted them.

Usage:
    from wint.logging import configure_logging, get_module_logger

    # Once, when the app starts
    configure_logging()

    # At module level
    logger = get_module_logger()
    logger.warning("lang_tag_host_missing", url_mode="host", lang_tag="en-GB")

Dependencies:
    - wint.configuration.Settings
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from wint.configuration import Settings

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _configure_silent() -> BoundLogger:
    logging.root.setLevel(SILENT_LEVEL)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
    return structlog.stdlib.get_logger()


def _processors(prod_mode: bool) -> List[Processor]:
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if prod_mode
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog for the application.

    Under pytest all output is suppressed. Otherwise events are rendered for
    the console in development and as JSON lines in production, with the
    callsite (file, line, function) and any context variables bound for the
    current request.

    Args:
        settings: Settings providing LOG_LEVEL and the production flag.
            Loaded from the environment if not provided.
        log_level: Level name overriding settings.LOG_LEVEL. Unknown names
            fall back to INFO.
        is_production: Overrides settings.is_production (JSON vs console).

    Returns:
        Configured logger instance
    """
    if _is_test_environment():
        return _configure_silent()

    settings = settings or Settings()
    prod_mode = settings.is_production if is_production is None else is_production

    structlog.configure(
        processors=_processors(prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Binds ``component`` (last part of the module name) and ``module_path``
    (full dotted name).

    Example:
        # In wint/i18n/resolvers.py
        logger = get_module_logger()
        # context: {"component": "resolvers", "module_path": "wint.i18n.resolvers"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    name = module.__name__
    return logger.bind(component=name.rsplit(".", 1)[-1], module_path=name)
