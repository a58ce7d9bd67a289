import logging
from .config import LOG_LEVEL

logger = logging.getLogger('xing_api')
logger.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.WARNING))
logger.addHandler(logging.NullHandler())
