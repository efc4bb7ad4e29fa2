from typing import Any


class TableError(Exception):
    pass


class InvalidCapacityError(TableError, ValueError):
    def __init__(self, capacity: Any) -> None:
        super().__init__(f"capacity must be a positive int, got {capacity!r}")
        self.capacity = capacity


class InvalidConfigError(TableError, ValueError):
    pass


class InvalidKeyError(TableError, TypeError):
    def __init__(self, key: Any, reason: str = "key must be hashable and not None") -> None:
        super().__init__(f"{reason}: {key!r}")
        self.key = key
