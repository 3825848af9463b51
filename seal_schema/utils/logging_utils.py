import logging
import sys
from typing import Optional


LOGGER_NAME = "seal_schema"
DEFAULT_FORMAT = "%(name)s - %(levelname)s - %(message)s"


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int) -> None:
        super().__init__()
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self._max_level


def resolve_level(name: Optional[str], fallback: int) -> int:
    """Translate a level name such as ``"debug"`` into a logging constant."""
    if not name:
        return fallback
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else fallback


def configure_split_stream_logging(
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
    logger_name: str = LOGGER_NAME,
) -> logging.Logger:
    """Configure the package logger:

    - records below ``stderr_level`` go to stdout
    - records at ``stderr_level`` and above go to stderr

    Only the CLI calls this; importing the library never touches handlers.
    """

    logger = logging.getLogger(logger_name)
    logger.handlers.clear()
    logger.setLevel(level)
    logger.propagate = False

    if formatter is None:
        formatter = logging.Formatter(DEFAULT_FORMAT)

    if stderr_level < logging.DEBUG:
        stderr_level = logging.DEBUG

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(_MaxLevelFilter(stderr_level - 1))
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(stderr_level)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)
    return logger
