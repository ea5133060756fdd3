"""Structured logging for the localization engine.

configure_logging() installs the structlog pipeline once, at import time.
Modules obtain their logger with get_module_logger() and log snake_case
event names with keyword context:

    logger = get_module_logger()
    logger.info("namespace_loaded", namespace="common", locale="en")
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from localization.configuration import get_settings

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Return True when running under pytest."""
    return "pytest" in sys.modules


def _shared_processors() -> List[Processor]:
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
    ]


def _renderer(is_production: bool) -> Processor:
    if is_production:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _apply(processors: List[Processor], level: int, force: bool = False) -> BoundLogger:
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=force)
    return structlog.stdlib.get_logger()


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog over the standard library logging module.

    Under pytest every record is dropped. Otherwise records carry the log
    level, an ISO timestamp and the call site, and are rendered as JSON in
    production or as colored console lines elsewhere.

    Args:
        log_level: Level name overriding settings.LOG_LEVEL.
        is_production: Overrides settings.is_production.

    Returns:
        Root engine logger.
    """
    if _is_test_environment():
        logging.root.setLevel(SILENT_LEVEL)
        return _apply(
            [
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            SILENT_LEVEL,
            force=True,
        )

    settings = get_settings()
    if is_production is None:
        is_production = settings.is_production
    level_name = (log_level or settings.LOG_LEVEL).upper()
    return _apply(
        _shared_processors() + [_renderer(is_production)],
        getattr(logging, level_name, logging.INFO),
    )


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound with the calling module's component and path.

    Example:
        # in localization/i18n/namespaces.py
        logger = get_module_logger()
        # context: {"component": "namespaces",
        #           "module_path": "localization.i18n.namespaces"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    module_name = module.__name__
    return logger.bind(
        component=module_name.rsplit(".", 1)[-1], module_path=module_name
    )
