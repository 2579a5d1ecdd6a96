# identity-keyed entry collection with upsert semantics
# one instance per entry type; order is insertion order, updates keep their slot

import logging
from typing import Callable, Generic, Iterable, Optional, Protocol, TypeVar

logger = logging.getLogger(__name__)


class Identified(Protocol):
    id: str


T = TypeVar("T", bound=Identified)


class EntryStore(Generic[T]):
    """ordered collection of entries keyed by id"""

    def __init__(self, entries: Optional[Iterable[T]] = None):
        self._entries: list[T] = []
        self._index: dict[str, int] = {}
        for entry in entries or []:
            self.upsert(entry)

    def upsert(self, entry: T) -> None:
        """replace the entry with the same id in place, or append it"""
        position = self._index.get(entry.id)
        if position is None:
            self._index[entry.id] = len(self._entries)
            self._entries.append(entry)
        else:
            self._entries[position] = entry

    def all(self) -> list[T]:
        """snapshot of the entries in store order"""
        return list(self._entries)

    def find_by_id(self, entry_id: str) -> Optional[T]:
        position = self._index.get(entry_id)
        if position is None:
            return None
        return self._entries[position]

    def find_where(self, predicate: Callable[[T], bool]) -> list[T]:
        return [entry for entry in self._entries if predicate(entry)]

    def replace_all(self, entries: Iterable[T]) -> None:
        """reset the store to the given entries (used when loading from persistence)"""
        self._entries = []
        self._index = {}
        for entry in entries:
            self.upsert(entry)
        logger.debug(f"Store reset with {len(self._entries)} entries")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._index
