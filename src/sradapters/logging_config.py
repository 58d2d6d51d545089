"""
Logging Configuration
Console/file output for the 'sradapters' logger namespace.

The package itself only attaches a NullHandler; host applications that want
to see adapter diagnostics call `setup_logging()` once at start-up.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "sradapters"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Marks handlers installed here so a second call replaces only those
_OWNED = "_sradapters_owned"


def get_package_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def install_null_handler() -> None:
    """Silence 'no handler' warnings when the host never configures logging."""
    logger = get_package_logger()
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())


def _owned(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _OWNED, True)
    return handler


def reset_logging() -> None:
    """Close and detach every handler `setup_logging` installed."""
    logger = get_package_logger()
    for handler in list(logger.handlers):
        if getattr(handler, _OWNED, False):
            logger.removeHandler(handler)
            handler.close()


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    fmt: str = LOG_FORMAT,
) -> logging.Logger:
    """
    Route adapter diagnostics to stdout and optionally a file.

    Handlers added by the host application are left alone; repeated calls
    replace the handlers from the previous call.

    Args:
        level: Logging level (e.g. logging.DEBUG to see axis classification details)
        log_file: Optional path to save logs to a file.
        fmt: Record format shared by all installed handlers.

    Returns:
        The configured package logger.
    """
    reset_logging()
    logger = get_package_logger()
    logger.setLevel(level)

    formatter = logging.Formatter(fmt, datefmt='%H:%M:%S')
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(_owned(handler))

    logger.debug(f"Adapter logging at level {logging.getLevelName(level)}.")
    return logger
