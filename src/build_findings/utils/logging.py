"""
Simple logging configuration using standard library logging.
"""

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """
    Configure console logging on stderr.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S"
        )
    )

    logging.basicConfig(level=level, handlers=[console_handler], force=True)

    # chardet is chatty at debug level
    logging.getLogger("chardet").setLevel(logging.WARNING)

    logger = get_logger(__name__)
    logger.debug(f"Logging configured - level: {level}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger
    """
    return logging.getLogger(name)


def _format(message: str, kwargs: dict) -> str:
    context = ", ".join(f"{k}={v}" for k, v in kwargs.items())
    if context:
        return f"{message} ({context})"
    return message


class LoggerMixin:
    """Mixin class to add logging capabilities to any class."""

    @property
    def logger(self) -> logging.Logger:
        """Get logger for this class."""
        if not hasattr(self, "_logger"):
            self._logger = get_logger(
                self.__class__.__module__ + "." + self.__class__.__name__
            )
        return self._logger

    def log_debug(self, message: str, **kwargs) -> None:
        """Log a debug message with context."""
        self.logger.debug(_format(message, kwargs))

    def log_info(self, message: str, **kwargs) -> None:
        """Log an info message with context."""
        self.logger.info(_format(message, kwargs))

    def log_warning(self, message: str, **kwargs) -> None:
        """Log a warning with context."""
        self.logger.warning(_format(message, kwargs))
