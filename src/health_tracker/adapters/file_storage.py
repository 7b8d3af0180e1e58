"""File-backed local key-value storage."""

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote

from health_tracker.services.storage import KeyValueStorage


@dataclass
class FileKeyValueStorage(KeyValueStorage):
    """Stores each key as one UTF-8 file inside a data directory."""

    root: Path

    @classmethod
    def create(cls, data_dir: Path) -> "FileKeyValueStorage":
        """Create a storage area rooted at an expanded data directory."""
        return cls(root=data_dir.expanduser())

    def get_item(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""
        try:
            return self._path(key).read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def set_item(self, key: str, value: str) -> None:
        """Atomically replace the value stored under a key."""
        self.root.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=".tmp-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(tmp_name, self._path(key))
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def remove_item(self, key: str) -> None:
        """Remove a key if it is present."""
        self._path(key).unlink(missing_ok=True)

    def _path(self, key: str) -> Path:
        return self.root / quote(key, safe="-_.")
