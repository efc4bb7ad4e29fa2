from dataclasses import dataclass
from typing import Any, Iterator

from .chain import Chain, Entry
from .debug import render_buckets
from .errors import InvalidCapacityError, InvalidConfigError, InvalidKeyError
from .shared import printf_err


DEFAULT_CAPACITY = 8
TABLE_MAX_LOAD = 0.75


_debug_trace_resize = False


def set_debug_trace_resize(b: bool):
    global _debug_trace_resize
    _debug_trace_resize = b


def _is_capacity(capacity: Any) -> bool:
    return isinstance(capacity, int) and not isinstance(capacity, bool) and capacity > 0


def _is_load(max_load: Any) -> bool:
    return isinstance(max_load, (int, float)) and not isinstance(max_load, bool) and max_load > 0


@dataclass(frozen=True)
class TableConfig:
    capacity: int = DEFAULT_CAPACITY
    max_load: float = TABLE_MAX_LOAD

    def __post_init__(self) -> None:
        if not _is_capacity(self.capacity):
            raise InvalidConfigError(f"capacity must be a positive int, got {self.capacity!r}")
        if not _is_load(self.max_load):
            raise InvalidConfigError(f"max_load must be positive, got {self.max_load!r}")


def calculate_index(key: Any, capacity: int) -> int:
    """Map a key to its bucket slot in ``[0, capacity)``.

    Every lookup, mutation and rehash goes through here, so a key lands in
    the same slot for as long as the capacity does not change.
    """
    if not _is_capacity(capacity):
        raise InvalidCapacityError(capacity)
    if key is None:
        raise InvalidKeyError(key)
    try:
        key_hash = hash(key)
    except TypeError as e:
        raise InvalidKeyError(key) from e

    index = key_hash % capacity
    return index + capacity if index < 0 else index


def _new_buckets(capacity: int) -> list[Chain]:
    return [Chain() for _ in range(capacity)]


class Table:
    """Hash table with separate chaining.

    The bucket array grows by doubling before a put would push the load past
    ``config.max_load``. It never shrinks on its own; ``resize`` can set any
    positive capacity explicitly.
    """

    def __init__(self, capacity: int | None = None, config: TableConfig | None = None) -> None:
        self.config = config if config is not None else TableConfig()
        if capacity is None:
            capacity = self.config.capacity
        if not _is_capacity(capacity):
            raise InvalidCapacityError(capacity)

        self._buckets = _new_buckets(capacity)
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._buckets)

    @property
    def buckets(self) -> tuple[Chain, ...]:
        return tuple(self._buckets)

    @property
    def load(self) -> float:
        return self._size / len(self._buckets)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def _chain(self, key: Any) -> Chain:
        return self._buckets[calculate_index(key, len(self._buckets))]

    def put(self, key: Any, value: Any) -> Any:
        chain = self._chain(key)
        entry = chain.find(key)
        if entry is not None:
            prev_value = entry.value
            entry.value = value
            return prev_value

        if self._resize_as_needed():
            chain = self._chain(key)
        chain.append(key, value)
        self._size += 1
        return None

    def get(self, key: Any, default: Any = None) -> Any:
        entry = self._chain(key).find(key)
        if entry is None:
            return default
        return entry.value

    def contains_key(self, key: Any) -> bool:
        return self._chain(key).find(key) is not None

    def contains_value(self, value: Any) -> bool:
        return any(chain.has_value(value) for chain in self._buckets)

    def remove(self, key: Any) -> Any:
        entry = self._chain(key).unlink(key)
        if entry is None:
            return None
        self._size -= 1
        return entry.value

    def _resize_as_needed(self) -> bool:
        if (self._size + 1) / len(self._buckets) <= self.config.max_load:
            return False
        self.resize(2 * len(self._buckets))
        return True

    def resize(self, new_capacity: int):
        if not _is_capacity(new_capacity):
            raise InvalidCapacityError(new_capacity)

        new_buckets = _new_buckets(new_capacity)
        for chain in self._buckets:
            for entry in chain:
                index = calculate_index(entry.key, new_capacity)
                new_buckets[index].entries.append(entry)

        if _debug_trace_resize:
            printf_err(
                "resize {0:d} -> {1:d} ({2:d} entries)\n",
                len(self._buckets),
                new_capacity,
                self._size,
            )
        self._buckets = new_buckets

    def entries(self) -> Iterator[Entry]:
        for chain in self._buckets:
            yield from chain

    def keys(self) -> Iterator[Any]:
        return (entry.key for entry in self.entries())

    def values(self) -> Iterator[Any]:
        return (entry.value for entry in self.entries())

    def items(self) -> Iterator[tuple[Any, Any]]:
        return ((entry.key, entry.value) for entry in self.entries())

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return self.keys()

    def __contains__(self, key: Any) -> bool:
        return self.contains_key(key)

    def __getitem__(self, key: Any) -> Any:
        entry = self._chain(key).find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key: Any, value: Any):
        self.put(key, value)

    def __delitem__(self, key: Any):
        if self._chain(key).unlink(key) is None:
            raise KeyError(key)
        self._size -= 1

    def __str__(self) -> str:
        return render_buckets(self._buckets)

    def __repr__(self) -> str:
        return f"Table(size={self._size}, capacity={len(self._buckets)})"
