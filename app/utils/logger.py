"""
Centralized logging configuration.

Console output plus a rotating log file, both driven by LOG_LEVEL and
LOG_FILE_PATH. Our handlers are named so that repeated create_app() calls
(and handlers installed by other tools, e.g. pytest) never stack duplicates.
HTTP and LLM SDK loggers are held at WARNING or above.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from app.config import Settings, settings as default_settings

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

CONSOLE_HANDLER_NAME = "leadmate.console"
FILE_HANDLER_NAME = "leadmate.file"

NOISY_LOGGERS = ("httpx", "httpcore", "urllib3", "groq", "google")

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 5


def _resolve_level(raw_level: str) -> str:
    level = raw_level.upper()
    if level not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid LOG_LEVEL: {raw_level}")
    return level


def _console_handler(formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.set_name(CONSOLE_HANDLER_NAME)
    handler.setFormatter(formatter)
    return handler


def _file_handler(path: str, formatter: logging.Formatter) -> logging.Handler:
    log_file_path = Path(path)
    log_file_path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=log_file_path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.set_name(FILE_HANDLER_NAME)
    handler.setFormatter(formatter)
    return handler


def setup_logging(config: Optional[Settings] = None) -> None:
    """
    Configure application-wide logging.

    Safe to call more than once: levels are re-applied, handlers are only
    added the first time.
    """
    config = config or default_settings
    log_level = _resolve_level(config.LOG_LEVEL)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    quiet_level = max(logging.WARNING, logging.getLevelName(log_level))
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)

    installed = {handler.get_name(): handler for handler in root_logger.handlers}
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if CONSOLE_HANDLER_NAME not in installed:
        root_logger.addHandler(_console_handler(formatter))
    if FILE_HANDLER_NAME not in installed:
        root_logger.addHandler(_file_handler(config.LOG_FILE_PATH, formatter))

    for handler in root_logger.handlers:
        if handler.get_name() in (CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME):
            handler.setLevel(log_level)

    root_logger.info(
        "Logging initialized (level=%s, file=%s, provider=%s)",
        log_level,
        config.LOG_FILE_PATH,
        config.LLM_PROVIDER,
    )
