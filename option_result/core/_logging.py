from __future__ import annotations

import logging
from typing import Optional

_logger: Optional[logging.Logger] = None

LOGGER_NAME: str = "option_result"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get or create the module-level logger for option_result.

    This logger is configured with NullHandler by default, making it silent
    unless the user configures logging in their application.

    Args:
        name: Optional logger name. If None, uses 'option_result'.
            Only honoured on the first call; later calls return the cached logger.

    Returns:
        Configured logger instance with NullHandler

    Example:
        >>> from option_result.core._logging import get_logger
        >>> logger = get_logger()
        >>> logger.debug("This is silent unless user configures logging")
    """
    global _logger

    if _logger is None:
        _logger = logging.getLogger(name or LOGGER_NAME)

        # Silent by default unless the application attaches handlers
        if not _logger.handlers:
            _logger.addHandler(logging.NullHandler())

    return _logger


def safe_log(logger: Optional[logging.Logger], level: str, message: str, **kwargs) -> None:
    """
    Safely log a message, handling any logger type or None.

    Logging failures are dropped so that a broken handler can never change
    the outcome of an Option/Result operation.

    Args:
        logger: Logger instance (any type) or None
        level: Log level ('info', 'warning', 'error', 'debug')
        message: Message to log
        **kwargs: Additional arguments for logging

    Example:
        >>> safe_log(get_logger(), 'debug', 'called unwrap() on Nothing')
    """
    if logger is None:
        return

    try:
        if isinstance(logger, logging.Logger):
            log_method = getattr(logger, level, logger.info)
            if kwargs:
                log_method(message, **kwargs)
            else:
                log_method(message)
        elif hasattr(logger, level):
            getattr(logger, level)(message)
        elif hasattr(logger, 'log'):
            logger.log(message)
    except Exception:
        return
