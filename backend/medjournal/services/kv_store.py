# key-value persistence boundary
# each key holds one serialized collection (a json array as text)

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """minimal string key-value store, the same contract as browser local storage"""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def rename(self, key: str, new_key: str) -> None:
        """move the value under `key` to `new_key`, a no-op when `key` is missing"""
        ...


class InMemoryKeyValueStore(KeyValueStore):
    """dict-backed store, used by tests and ephemeral runs"""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def rename(self, key: str, new_key: str) -> None:
        if key in self._data:
            self._data[new_key] = self._data.pop(key)


class JsonFileKeyValueStore(KeyValueStore):
    """one <key>.json file per key inside a data directory.

    writes go to a temp file in the same directory which is then renamed
    over the target, so a crash mid-write never leaves a truncated file.
    """

    def __init__(self, directory: Path | str):
        self.directory = Path(directory).expanduser()

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_name(path.name + ".tmp")

        with open(tmp, "w", encoding="utf-8") as f:
            f.write(value)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)

        try:
            os.chmod(path, 0o600)
        except OSError:
            # permissions are not supported on every filesystem
            pass
        logger.debug(f"Wrote {len(value)} bytes to {path}")

    def rename(self, key: str, new_key: str) -> None:
        path = self._path(key)
        if path.exists():
            os.replace(path, self._path(new_key))
