"""Logging configuration helpers."""

import logging

LOGGER_NAME = "health_tracker"
_CONTEXT_FIELDS = ("key", "date")


class ContextFormatter(logging.Formatter):
    """Appends the storage key or date a record was logged with."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = [
            f"{name}={getattr(record, name)}"
            for name in _CONTEXT_FIELDS
            if hasattr(record, name)
        ]
        if not context:
            return message
        return f"{message} [{' '.join(context)}]"


def configure_logging(level: str = "INFO") -> None:
    """Configure application logging with a single stream handler."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
