"""Logger adapter over Python's standard logging."""

import logging
from typing import Any

from ..ports.logger import LoggerPort


class SimpleLogger(LoggerPort):
    """LoggerPort implementation using Python's standard logging.

    Structured keyword context is passed to the stdlib logger as ``extra``
    and appended to the message, so it shows up with the default formatter.
    """

    def __init__(self, name: str = "chain_subscriptions", level: int = logging.INFO):
        """Initialize the logger.

        Args:
            name: Logger name (default: "chain_subscriptions")
            level: Logging level (default: INFO)
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)

        # Add console handler if not already present
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)

    @staticmethod
    def _format(message: str, context: dict[str, Any]) -> str:
        if not context:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{message} [{pairs}]"

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        self._logger.debug(self._format(message, kwargs), extra={"context": kwargs})

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        self._logger.info(self._format(message, kwargs), extra={"context": kwargs})

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        self._logger.warning(self._format(message, kwargs), extra={"context": kwargs})

    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        self._logger.error(self._format(message, kwargs), extra={"context": kwargs})
