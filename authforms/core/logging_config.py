import logging
import sys
from typing import Optional

# Third-party loggers that are only interesting when debugging requests
NOISY_LOGGERS = ("urllib3", "asyncio")


def parse_log_level(name: Optional[str], default: int = logging.INFO) -> int:
    """Map a level name such as "debug" to its logging constant."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def configure_logging(level: int = logging.INFO) -> None:
    """
    Configure root logging for the forms CLI.

    - Logs go to stdout, one line per record with time, level and logger
    - Handlers are only installed once; later calls just change the level
    - urllib3/asyncio chatter stays at WARNING unless level is DEBUG
    """
    root = logging.getLogger()

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        root.addHandler(handler)

    root.setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(
            logging.DEBUG if level <= logging.DEBUG else logging.WARNING
        )
