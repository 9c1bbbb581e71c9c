"""JSON logging configuration for trust store operations."""

import logging

from pythonjsonlogger import jsonlogger

LOGGER_NAME = "devca_trust"


class TrustStoreJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that keeps the fields useful when debugging a failed install.

    Emits timestamp, level, message, exc_info, funcName and lineno only.
    """

    allowed_fields = frozenset(
        {
            "timestamp",
            "level",
            "message",
            "exc_info",
            "funcName",
            "lineno",
        }
    )

    def add_fields(self, log_record, record, message_dict):
        """Rename levelname to level and drop everything outside allowed_fields."""
        super().add_fields(log_record, record, message_dict)

        if "levelname" in log_record:
            log_record["level"] = log_record.pop("levelname")

        for key in [key for key in log_record if key not in self.allowed_fields]:
            log_record.pop(key)


def _setup_logger() -> logging.Logger:
    """Initialize and configure singleton logger.

    Returns:
        Logger writing JSON lines to stderr
    """
    logger = logging.getLogger(LOGGER_NAME)

    # Module reloads must not stack handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(
        TrustStoreJsonFormatter(
            fmt="%(timestamp)s %(levelname)s %(funcName)s %(lineno)d %(message)s",
            timestamp=True,
        )
    )

    logger.setLevel(logging.INFO)
    logger.addHandler(handler)
    logger.propagate = False

    return logger


LOGGER = _setup_logger()


def configure_logging(level: str | int) -> logging.Logger:
    """Set the singleton logger level, e.g. from TrustStoreConfig.log_level.

    Args:
        level: Level name ("DEBUG", "WARNING", ...) or numeric level

    Raises:
        ValueError: If level is not a known level name
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"unknown log level: {level!r}")
        level = resolved
    LOGGER.setLevel(level)
    return LOGGER
