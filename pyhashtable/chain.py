from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass
class Entry:
    key: Any
    value: Any


@dataclass
class Chain:
    """Entries sharing one bucket, in insertion order.

    Keys are compared with ``==`` and are pairwise distinct within a chain;
    the table guarantees that by updating in place instead of appending.
    """

    entries: list[Entry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def find(self, key: Any) -> Entry | None:
        for entry in self.entries:
            if entry.key == key:
                return entry
        return None

    def append(self, key: Any, value: Any) -> Entry:
        entry = Entry(key, value)
        self.entries.append(entry)
        return entry

    def unlink(self, key: Any) -> Entry | None:
        for i, entry in enumerate(self.entries):
            if entry.key == key:
                del self.entries[i]
                return entry
        return None

    def has_value(self, value: Any) -> bool:
        return any(entry.value == value for entry in self.entries)
