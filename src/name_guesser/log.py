import logging
import logging.config
from datetime import datetime
from pathlib import Path
from typing import Optional

LOGGER_NAME = "name_guesser"


def setup_logging(
    level: str = "INFO",
    log_dir: Optional[str] = None,
    console: bool = True,
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Level for the ``name_guesser`` logger.
        log_dir: If given, also write a timestamped log file there.
        console: Whether to log to stderr.
    """
    handlers = {}
    if console:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "formatter": "console",
        }
    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "plain",
            "filename": str(Path(log_dir) / f"{LOGGER_NAME}_{ts}.log"),
            "encoding": "utf-8",
            "mode": "w",
            "level": "DEBUG",
        }

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {
                "format": "{asctime} {levelname:<7} {name} - {message}",
                "style": "{",
            },
            "console": {
                "format": "{levelname:<7} {message}",
                "style": "{",
            },
        },
        "handlers": handlers,
        "loggers": {
            LOGGER_NAME: {
                "level": level.upper(),
                "handlers": list(handlers),
                "propagate": False,
            },
        },
    }
    logging.config.dictConfig(config)

    logger = logging.getLogger(LOGGER_NAME)
    logger.debug("Logging initialised at %s", level.upper())
    return logger
