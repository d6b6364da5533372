"""Flat-file storage for the preference list.

The whole list lives in one JSON array on disk. Every operation reads the
file, mutates the list in memory and writes the file back, pretty-printed.
"""

import json
import logging
import threading
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from .models import Preference

logger = logging.getLogger(__name__)

_preference_list = TypeAdapter(list[Preference])


class StorageError(Exception):
    """Raised when the data file cannot be read, parsed or written."""

    pass


class InvalidIndex(Exception):
    """Raised when a positional index is outside the current list."""

    def __init__(self, index, length: int):
        self.index = index
        self.length = length
        super().__init__(f"Invalid index {index!r} for list of length {length}")


class PreferenceStore:
    """Holder of the full preference list, backed by a single JSON file.

    A lock serializes the read-modify-write of each operation so two requests
    served by the same process cannot overwrite each other's changes.
    Processes sharing one file are not coordinated.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._lock = threading.Lock()

    def ensure_exists(self) -> None:
        """Create the data file holding an empty array if it is missing."""
        if self.path.exists():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("x", encoding="utf-8") as f:
                f.write("[]")
            logger.info(f"Created empty preference store at {self.path}")
        except FileExistsError:
            pass
        except OSError as e:
            raise StorageError(f"Could not create {self.path}: {e}") from e

    def load_all(self) -> list[Preference]:
        """Return every stored record in order."""
        with self._lock:
            return self._read()

    def append(self, pref: Preference) -> list[Preference]:
        """Add ``pref`` to the end of the list and return the new list."""
        with self._lock:
            prefs = self._read()
            prefs.append(pref)
            self._write(prefs)
        logger.info(f"Added preference for {pref.name} ({len(prefs)} total)")
        return prefs

    def remove_at(self, index: int) -> list[Preference]:
        """Remove the record at ``index`` and return the new list.

        Raises:
            InvalidIndex: If ``index`` is not an integer in ``[0, length)``.
        """
        with self._lock:
            prefs = self._read()
            if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(prefs):
                raise InvalidIndex(index, len(prefs))
            removed = prefs.pop(index)
            self._write(prefs)
        logger.info(f"Removed preference for {removed.name} at index {index}")
        return prefs

    def clear(self) -> list[Preference]:
        """Replace the stored list with an empty one."""
        with self._lock:
            self._write([])
        logger.info("Cleared all preferences")
        return []

    def check_health(self) -> bool:
        """Verify the data file can be read and parsed.

        Returns:
            True if the store is usable, False otherwise.
        """
        try:
            self.load_all()
            return True
        except StorageError as e:
            logger.error(f"Preference store health check failed: {e}")
            return False

    # Caller must hold self._lock for both helpers below.

    def _read(self) -> list[Preference]:
        self.ensure_exists()
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e
        try:
            return _preference_list.validate_python(json.loads(raw))
        except json.JSONDecodeError as e:
            raise StorageError(f"{self.path} is not valid JSON: {e}") from e
        except ValidationError as e:
            raise StorageError(f"{self.path} does not hold a preference list: {e}") from e

    def _write(self, prefs: list[Preference]) -> None:
        payload = json.dumps([p.model_dump() for p in prefs], indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e
