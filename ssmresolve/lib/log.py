"""
Centralized application-specific logging using Loguru.

This module provides a function-based logging mechanism (`LOG`) that dynamically
respects the `beQuiet` flag from application settings.

Features:
- A custom `LOG` function for application-specific debug logging.
- Dynamic checking of the `beQuiet` flag to suppress logs when necessary.
- Consistent logging format on stderr, so that stdout stays free for
  resolved documents.

Example:
    from ssmresolve.lib.log import LOG
    LOG("Resolving 3 parameter reference(s)")

Environment:
- Set `SSMR_BEQUIET=True` to suppress detailed logging output.

Note:
    Parameter values must never be passed to `LOG`; log references only.
"""

from loguru import logger
from typing import Any
import sys

# Create a distinct logger instance for the app
app_logger = logger.bind(app="SSMRESOLVE")

logger_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<yellow>{name: >28}</yellow>::"
    "<cyan>{function: <24}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

app_logger.remove()  # Remove any default handlers
app_logger.add(sys.stderr, format=logger_format)


def LOG(*args: Any, **kwargs: Any) -> None:
    """
    Application-specific logging function.

    Checks the `beQuiet` flag in `appsettings` and logs the message only if
    logging is enabled.

    :param args: Positional arguments for the log message.
    :param kwargs: Keyword arguments for additional log metadata.
    """
    from ssmresolve.config.settings import appsettings  # Ensure up-to-date settings

    if not appsettings.beQuiet:
        app_logger.opt(depth=1).debug(*args, **kwargs)
