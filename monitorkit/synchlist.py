"""A list that serialises access and makes removers wait for items."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from monitorkit.keyedlist import KeyedList
from monitorkit.synch import Condition, Lock


class SynchList:
    """A FIFO list guarded by a lock; removing from an empty list waits."""

    def __init__(self) -> None:
        self._items = KeyedList()
        self._mutex = Lock("list lock")
        self._not_empty = Condition("list empty cond")

    def append(self, item: Any) -> None:
        """Put an item at the end and wake one waiting remover."""
        with self._mutex:
            self._items.append(item)
            self._not_empty.signal(self._mutex)

    def remove(self) -> Any:
        """Take the first item off the front, waiting while the list is empty."""
        with self._mutex:
            while not len(self._items):
                self._not_empty.wait(self._mutex)
            entry = self._items.sorted_remove()
            if entry is None:
                raise RuntimeError("list emptied while holding its lock")
            item, _key = entry
            return item

    def mapcar(self, func: Callable[[Any], Any]) -> None:
        """Apply func to every item in order, holding the lock throughout."""
        with self._mutex:
            self._items.mapcar(func)

    def __repr__(self) -> str:
        return f"SynchList({self._items!r})"