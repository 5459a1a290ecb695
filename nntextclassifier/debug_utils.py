import logging
import os

from .config import ClassifierConfig

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger("nntextclassifier")


def setup_logging(log_file=None, level=logging.DEBUG):
    """
    Configure logging to a file. Falls back to ClassifierConfig.LOG_FILE,
    does nothing if neither is set.
    """
    log_file = log_file or ClassifierConfig.LOG_FILE
    if not log_file:
        return None

    log_dir = os.path.dirname(os.path.abspath(log_file))
    os.makedirs(log_dir, exist_ok=True)

    handler = logging.FileHandler(log_file, mode='w')
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


def log_debug(msg):
    logger.debug(msg)
    # Also print to console for terminal visibility
    print(f"[DEBUG] {msg}")


def log_error(msg):
    logger.error(msg)
    print(f"[ERROR] {msg}")
