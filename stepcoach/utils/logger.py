"""Loguru setup for the relay.

Console output is always on; a rotating file sink is added when
``LOG_FILE`` is set.  Records from the standard ``logging`` module
(uvicorn, httpx, openai) are forwarded into Loguru.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

from ..config.app_config import AppConfig, get_app_config

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# Third-party loggers whose records should reach Loguru
BRIDGED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "httpx", "openai")


class InterceptHandler(logging.Handler):
    """Re-emit standard logging records through Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: Any = logger.level(record.levelname).name
        except (KeyError, ValueError):
            level = record.levelno

        # Skip frames inside the logging module so Loguru reports the real caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _sink_options(app_config: AppConfig) -> Dict[str, Any]:
    return {
        "level": app_config.log_level,
        "format": LOG_FORMAT,
        "backtrace": True,
        "diagnose": app_config.app_debug,
    }


def setup_logging(app_config: Optional[AppConfig] = None) -> None:
    """Install the Loguru sinks and the standard logging bridge.

    Safe to call more than once; existing sinks are replaced.
    """
    app_config = app_config or get_app_config()
    options = _sink_options(app_config)

    logger.remove()
    logger.add(sys.stdout, colorize=True, **options)

    if app_config.log_file:
        Path(app_config.log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(app_config.log_file, rotation="10 MB", retention="30 days", compression="zip", **options)

    intercept = InterceptHandler()
    logging.basicConfig(handlers=[intercept], level=logging.WARNING, force=True)
    for name in BRIDGED_LOGGERS:
        bridged = logging.getLogger(name)
        bridged.handlers = [intercept]
        bridged.propagate = False

    logger.debug("Logging configured (env={}, level={})", app_config.app_env, app_config.log_level)
