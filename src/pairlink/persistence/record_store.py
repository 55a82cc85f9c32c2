"""Integer key/value persistence for the endless-mode records."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Protocol

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    def read(self, key: str) -> int:
        """Stored value for ``key``, 0 when absent."""
        ...

    def write(self, key: str, value: int) -> None:
        ...


class MemoryRecordStore:
    def __init__(self, initial: Dict[str, int] | None = None) -> None:
        self._values: Dict[str, int] = dict(initial or {})

    def read(self, key: str) -> int:
        return int(self._values.get(key, 0))

    def write(self, key: str, value: int) -> None:
        self._values[key] = int(value)


class JsonRecordStore:
    """Records kept in a small JSON document, rewritten on every write.

    A missing or unreadable file behaves like an empty one; the next write
    replaces it.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._values: Dict[str, int] = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> Dict[str, int]:
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError:
            logger.warning("ignoring unreadable record file %s", self._path)
            return {}
        if not isinstance(payload, dict):
            logger.warning("ignoring malformed record file %s", self._path)
            return {}
        values: Dict[str, int] = {}
        for key, value in payload.items():
            try:
                values[str(key)] = int(value)
            except (TypeError, ValueError):
                logger.warning("ignoring non-integer record %r in %s", key, self._path)
        return values

    def read(self, key: str) -> int:
        return self._values.get(key, 0)

    def write(self, key: str, value: int) -> None:
        self._values[key] = int(value)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8") as handle:
            json.dump(self._values, handle, indent=2)
