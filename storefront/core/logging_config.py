# storefront/core/logging_config.py
import logging
from typing import Optional

from storefront.core.config import settings


def setup_logging(level: Optional[str] = None) -> str:
    """Настраивает корневой логгер и приглушает шумные библиотеки."""
    log_level = (level or settings.LOGGING_LEVEL).upper()
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return log_level
