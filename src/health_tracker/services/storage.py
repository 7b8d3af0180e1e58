"""Local key-value storage interface shared by the services."""

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """Interface for a local string key-value storage area."""

    def get_item(self, key: str) -> str | None:
        """Return the value stored under a key, if present."""

    def set_item(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""

    def remove_item(self, key: str) -> None:
        """Remove a key if it is present."""


def read_item(storage: KeyValueStorage, key: str) -> str | None:
    """Read a key, treating an unavailable storage area as empty."""
    try:
        return storage.get_item(key)
    except OSError:
        logger.warning("Storage unavailable while reading", extra={"key": key})
        return None
    except UnicodeDecodeError:
        logger.warning("Stored value is not valid UTF-8", extra={"key": key})
        return None


def write_item(storage: KeyValueStorage, key: str, value: str) -> bool:
    """Write a key; an unavailable storage area turns the write into a no-op."""
    try:
        storage.set_item(key, value)
    except OSError:
        logger.warning("Storage unavailable while writing", extra={"key": key})
        return False
    return True


def remove_item(storage: KeyValueStorage, key: str) -> bool:
    """Remove a key; an unavailable storage area turns this into a no-op."""
    try:
        storage.remove_item(key)
    except OSError:
        logger.warning("Storage unavailable while removing", extra={"key": key})
        return False
    return True
