# careerguide/core/logging_config.py
import logging
from typing import Optional

from careerguide.core.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from LOG_LEVEL (safe to call more than once)"""
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("careerguide").setLevel(level)
