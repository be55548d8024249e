"""
Logging configuration
"""

import logging
import sys
from typing import Any, MutableMapping, Optional, Tuple

from core.config import settings

SERVICE_NAME = "jfp-app-cache-builder"


def setup_logging(level: Optional[str] = None, silent: bool = False):
    """Configure application logging"""

    level_name = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    if silent:
        handlers = [logging.NullHandler()]
    else:
        handlers = [logging.StreamHandler(sys.stdout)]

    # Configure root logger
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )

    # Set SQLAlchemy and httpx logging to WARNING to reduce noise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.debug(f"Logging configured at {level_name} level")


class ContextLogger(logging.LoggerAdapter):
    """
    Logger adapter that prefixes every message with bound key=value pairs.

    Used to give each transformer run its own child logger carrying the
    transformer name and the language it is scoped to.
    """

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        context = " ".join(f"{key}={value}" for key, value in self.extra.items())
        return f"[{context}] {msg}", kwargs


def get_context_logger(name: str, **context: Any) -> ContextLogger:
    return ContextLogger(logging.getLogger(name), {"service": SERVICE_NAME, **context})
