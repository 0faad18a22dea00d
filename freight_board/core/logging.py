"""
Structured logging setup.

All components log through structlog with snake_case event names and
keyword context, e.g. ``logger.info("freight_created", freight_id=...)``.
"""

import logging
from typing import Optional

import structlog

from freight_board.core.config import ConfigManager, get_config


def configure_logging(
    level: Optional[str] = None,
    fmt: Optional[str] = None,
    config_manager: Optional[ConfigManager] = None,
) -> None:
    """
    Configure structlog for the process.

    Args:
        level: Log level name (defaults to the configured level)
        fmt: "json" or "console" (defaults to the configured format)
        config_manager: Optional config manager (defaults to global instance)
    """
    logging_config = (config_manager or get_config()).get_logging_config()
    level_name = (level or logging_config.level).upper()
    renderer_name = (fmt or logging_config.format).lower()

    if renderer_name == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level_name)
        ),
        cache_logger_on_first_use=False,
    )
