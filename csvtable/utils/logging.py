"""
Logging setup for scripts and applications using csvtable.

Library modules only create module-level loggers; configuring handlers is
left to the entry point, which calls configure_logging() once at startup.
"""

import logging

from csvtable.config.settings import get_settings


def configure_logging(level: int | str | None = None) -> None:
    """
    Configure root logging with a plain console format.

    Args:
        level: Logging level (constant or name). Defaults to the configured
               CSVTABLE_LOG_LEVEL.
    """
    if level is None:
        level = get_settings().log_level_value
    elif isinstance(level, str):
        level = level.upper()

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
