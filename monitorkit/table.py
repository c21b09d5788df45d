"""A fixed-size table of object slots shared between threads."""

from __future__ import annotations

import logging
from typing import Any

from monitorkit.synch import Condition, Lock

log = logging.getLogger(__name__)


class Table:
    """Holds up to `size` objects, each named by its slot index.

    Allocating in a full table waits until a slot is released.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self._slots: list[Any] = [None] * size
        self._count = 0
        self._lock = Lock("table_lock")
        self._not_full = Condition("table_full_con")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._slots):
            raise IndexError(f"table index {index} out of range")

    def alloc(self, obj: Any) -> int:
        """Store obj in the lowest free slot and return its index."""
        if obj is None:
            raise ValueError("None cannot be stored in a table slot")
        with self._lock:
            while self._count == len(self._slots):
                log.debug("table full, waiting for a free slot")
                self._not_full.wait(self._lock)
            index = self._slots.index(None)
            self._slots[index] = obj
            self._count += 1
            return index

    def get(self, index: int) -> Any:
        """Return the object in slot index, or None if the slot is free."""
        with self._lock:
            self._check_index(index)
            return self._slots[index]

    def release(self, index: int) -> None:
        """Free slot index; freeing an empty slot does nothing."""
        with self._lock:
            self._check_index(index)
            if self._slots[index] is None:
                log.debug("released an empty slot %d", index)
                return
            self._slots[index] = None
            self._count -= 1
            self._not_full.broadcast(self._lock)

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"Table(size={len(self._slots)}, used={self._count})"