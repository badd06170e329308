import sys
from typing import Optional

from loguru import logger

from sizefill.core.config import get_settings


_base_logger: Optional[logger.__class__] = None  # type: ignore


def setup_logging(component: str = "cli", level: Optional[str] = None) -> None:
    settings = get_settings()

    # stdout may carry generated bytes, so every sink writes to stderr
    logger.remove()
    logger.configure(extra={"logger": "root"})
    if settings.log_json:
        logger.add(
            sys.stderr,
            level=(level or settings.log_level or "INFO").upper(),
            serialize=True,
            backtrace=False,
            diagnose=False,
        )
    else:
        logger.add(
            sys.stderr,
            level=(level or settings.log_level or "INFO").upper(),
            format="<level>{level: <8}</level> | {extra[logger]} - {message}",
            backtrace=False,
            diagnose=False,
        )

    global _base_logger
    _base_logger = logger.bind(
        service=settings.app_name,
        env=settings.app_env,
        version=settings.app_version,
        component=component,
    )


def get_logger(name: str):
    global _base_logger
    if _base_logger is None:
        setup_logging()
    # Bind a logical logger name without conflicting with record.name
    return _base_logger.bind(logger=name)
