import os
import logging
from logging.handlers import RotatingFileHandler

ROOT_LOGGER = "visgoth"

LOG_DIR = os.getenv(
    "VISGOTH_LOG_DIR",
    os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "config", "logs"),
)
LOG_FILE = os.path.join(LOG_DIR, "visgoth.log")
LOG_LEVEL = os.getenv("VISGOTH_LOG_LEVEL", "INFO").upper()

os.makedirs(LOG_DIR, exist_ok=True)

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Root handlers stay at INFO; VISGOTH_LOG_LEVEL only tunes the profiler's own loggers
logging.basicConfig(
    level=logging.INFO,
    format=LOG_FORMAT,
    datefmt=DATE_FORMAT,
    handlers=[
        logging.StreamHandler(),
        RotatingFileHandler(
            LOG_FILE,
            maxBytes=(10 * 1024 * 1024),   # 10MB per file
            backupCount=7,                 # Last 7 rotated logs kept
            encoding="utf-8"
        )
    ]
)
logging.getLogger(ROOT_LOGGER).setLevel(getattr(logging, LOG_LEVEL, logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``visgoth`` namespace."""
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
