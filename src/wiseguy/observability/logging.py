"""Logging configuration for Wise Guy."""

import logging
import logging.config
from typing import Any


def setup_logging(level: str = "INFO", json_file: str | None = None) -> None:
    """
    Configure logging for Wise Guy.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_file: Optional path of a rotating file receiving JSON formatted records
    """
    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structured": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "structured",
                "level": level,
            },
        },
        "loggers": {
            "wiseguy": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": "WARNING",
        },
    }

    if json_file:
        config["formatters"]["json"] = {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
        }
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": json_file,
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
            "formatter": "json",
            "level": level,
        }
        config["loggers"]["wiseguy"]["handlers"].append("file")

    logging.config.dictConfig(config)


class ContextLogger:
    """Logger with contextual information."""

    def __init__(self, name: str):
        """
        Initialize context logger.

        Args:
            name: Logger name (typically __name__)
        """
        self.logger = logging.getLogger(name)

    def with_context(self, **context: Any) -> logging.LoggerAdapter:
        """
        Add context to log messages.

        Args:
            **context: Context key-value pairs, e.g. request_id, session_id

        Returns:
            LoggerAdapter with context
        """
        return logging.LoggerAdapter(self.logger, context)
