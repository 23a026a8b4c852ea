# storefront/utils/logging.py
import logging

from storefront.utils.settings import LOG_LEVEL

_configured = False


def get_logger(name: str) -> logging.Logger:
    global _configured
    if not _configured:
        logging.basicConfig(
            level=LOG_LEVEL.upper(),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
        _configured = True
    return logging.getLogger(name)
