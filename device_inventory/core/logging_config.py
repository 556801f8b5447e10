"""
Logging Setup
=============

Root logger configuration driven by the LOG_LEVEL setting.
Modules obtain their own logger with logging.getLogger(__name__).
"""
import logging

from device_inventory.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging() -> None:
    """Configure the root logger once per process."""
    settings = get_settings()
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger(__name__).debug("Logging configured at %s", settings.log_level)
