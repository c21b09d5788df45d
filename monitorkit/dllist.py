"""A synchronized doubly ended list kept in ascending key order."""

from __future__ import annotations

import logging
import sys
import threading
from dataclasses import dataclass
from typing import Any

from monitorkit.synch import Condition, Lock

log = logging.getLogger(__name__)

_FIRST_KEY = 10


@dataclass
class _Element:
    key: int
    item: Any


class DLList:
    """A sorted list whose removers wait while it is empty."""

    def __init__(self) -> None:
        self._elements: list[_Element] = []
        self._lock = Lock("list lock")
        self._list_empty = Condition("list empty cond")

    @staticmethod
    def _thread_name() -> str:
        return threading.current_thread().name

    def prepend(self, item: Any) -> None:
        """Add an item at the head, with a key one below the smallest."""
        with self._lock:
            key = self._elements[0].key - 1 if self._elements else _FIRST_KEY
            self._elements.insert(0, _Element(key, item))
            log.debug("thread %s prepended the first item", self._thread_name())
            self._list_empty.broadcast(self._lock)

    def append(self, item: Any) -> None:
        """Add an item at the tail, with a key one above the largest."""
        with self._lock:
            key = self._elements[-1].key + 1 if self._elements else _FIRST_KEY
            self._elements.append(_Element(key, item))
            log.debug("thread %s appended the last item", self._thread_name())
            self._list_empty.broadcast(self._lock)

    def remove(self) -> tuple[Any, int]:
        """Remove the head, waiting while empty; returns (item, key)."""
        with self._lock:
            while not self._elements:
                self._list_empty.wait(self._lock)
            element = self._elements.pop(0)
            log.debug("thread %s removed %d", self._thread_name(), element.key)
            return element.item, element.key

    def is_empty(self) -> bool:
        """True if the list holds no elements."""
        return not self._elements

    def sorted_insert(self, item: Any, sort_key: int) -> None:
        """Insert before the first element whose key is not below sort_key."""
        with self._lock:
            position = next(
                (
                    index
                    for index, element in enumerate(self._elements)
                    if element.key >= sort_key
                ),
                len(self._elements),
            )
            self._elements.insert(position, _Element(sort_key, item))
            log.debug("thread %s inserted %d", self._thread_name(), sort_key)
            self._list_empty.broadcast(self._lock)

    def sorted_remove(self, sort_key: int) -> Any:
        """Remove the first element with this key and return its item.

        Waits while the list is empty; raises KeyError if no element
        carries the key.
        """
        with self._lock:
            while not self._elements:
                self._list_empty.wait(self._lock)
            for index, element in enumerate(self._elements):
                if element.key == sort_key:
                    del self._elements[index]
                    log.debug("thread %s removed %d", self._thread_name(), sort_key)
                    return element.item
            raise KeyError(sort_key)

    def keys(self) -> list[int]:
        """The keys from head to tail."""
        with self._lock:
            return [element.key for element in self._elements]

    def show(self) -> None:
        """Print the keys from head to tail on standard output."""
        out = sys.stdout
        out.write("\n***show list***\n")
        keys = self.keys()
        if not keys:
            out.write("*** Show list: List is empty! ***\n")
            return
        out.write("".join(f"{key} " for key in keys))
        out.write("\n\n")

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"DLList(keys={[e.key for e in self._elements]!r})"


def dll_func1(dllist: DLList, n: int) -> None:
    """Insert n items with keys 0 to n-1, then show the list."""
    name = threading.current_thread().name
    print(f"\n*** thread {name} is ready to Insert {n} elems to the list ***")
    for key in range(n):
        dllist.sorted_insert(None, key)
    dllist.show()
    print()


def dll_func2(dllist: DLList, n: int) -> None:
    """Remove n items from the head, waiting for them if needed, then show."""
    name = threading.current_thread().name
    print(
        f"\n*** thread {name} is ready to remove the first {n} elems from the list ***"
    )
    for _ in range(n):
        dllist.remove()
    dllist.show()
    print()