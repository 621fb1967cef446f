import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "SHARECART_LOG_LEVEL"
PACKAGE_LOGGER = "sharecart1000"


def _level_from_env(default: Optional[int]) -> Optional[int]:
    level_name = os.getenv(LOG_LEVEL_ENV)
    if not level_name:
        return default
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else default


def configure_logging(default_level: int = logging.INFO, package_level: Optional[int] = None) -> None:
    """Configure root logger with a sane default format.

    For applications embedding the library; the library itself never
    installs handlers. SHARECART_LOG_LEVEL, if set, controls only the
    sharecart1000 loggers, so parser tracing can be turned on without
    flooding the host application's own output.
    """
    logging.basicConfig(
        level=default_level,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
    )
    level = _level_from_env(package_level)
    if level is not None:
        logging.getLogger(PACKAGE_LOGGER).setLevel(level)
