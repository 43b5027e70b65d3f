"""Logging service."""

import logging

logger = logging.getLogger("wargame")


class LogService:
    """Service for structured logging.

    Messages are rendered as ``key=value`` pairs joined by `` | ``.
    """

    def __init__(self, level: str | int | None = None) -> None:
        """Initialize the service, optionally setting the game logger level."""
        if level is not None:
            logger.setLevel(level.upper() if isinstance(level, str) else level)

    @staticmethod
    def format(data: dict[str, object]) -> str:
        """Render log data as a single line."""
        return " | ".join(f"{k}={v}" for k, v in data.items())

    def info(self, data: dict[str, object]) -> None:
        """Log info message.

        Args:
            data: Log data as key-value pairs

        """
        logger.info(self.format(data))

    def error(self, data: dict[str, object]) -> None:
        """Log error message."""
        logger.error(self.format(data))

    def warning(self, data: dict[str, object]) -> None:
        """Log warning message."""
        logger.warning(self.format(data))

    def debug(self, data: dict[str, object]) -> None:
        """Log debug message."""
        logger.debug(self.format(data))
