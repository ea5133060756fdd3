"""Structured logging for the localization engine.

Public API:
    - configure_logging(): (Re)configure the structlog pipeline
    - get_module_logger(): Logger bound to the calling module

Example:
    from localization.logging import get_module_logger

    logger = get_module_logger()
    logger.warning("invalid_namespace_resolver", namespace="common")
"""

from localization.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
]
