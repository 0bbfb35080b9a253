# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOGGER_NAME = "shopping_cart"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(component: str) -> logging.Logger:
    # Per-module logger under the shared "shopping_cart" root, e.g. "shopping_cart.cart".
    # Handlers are left to setup_logger(); without it records go to the root logger.
    return logging.getLogger(f"{LOGGER_NAME}.{component}")


def setup_logger(log_dir: str | Path | None = None, level: int = logging.INFO) -> logging.Logger:
    """
    Attach handlers to the "shopping_cart" logger for the session that owns a cart.

    - Console output is always enabled.
    - If log_dir is given, records are also written to
      <log_dir>/shopping_cart.log, rotated at midnight with 7 days kept.
    - Calling it again only updates the level; handlers are not duplicated.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            filename=log_dir / "shopping_cart.log",
            when="midnight",
            backupCount=7,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Cart logging enabled (level=%s)", logging.getLevelName(level))
    return logger
