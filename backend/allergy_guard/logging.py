import logging
import sys
from typing import Optional, Union


LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
)
ROOT_LOGGER_NAME = "allergy_guard"


def configure_logging(level: Union[str, int] = "INFO") -> None:
    """Attach a stdout handler once; later calls only adjust the level."""
    root = logging.getLogger()
    if isinstance(level, str):
        level = level.upper()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or ROOT_LOGGER_NAME)
