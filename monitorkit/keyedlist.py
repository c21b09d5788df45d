"""An unsynchronized list of items, each tagged with an integer sort key."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any


class KeyedList:
    """A list of items with priorities; callers provide any locking needed."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, Any]] = []

    def prepend(self, item: Any) -> None:
        """Put an item at the front, with key 0."""
        self._entries.insert(0, (0, item))

    def append(self, item: Any) -> None:
        """Put an item at the end, with key 0."""
        self._entries.append((0, item))

    def remove(self) -> Any:
        """Take the first item off the front; None if the list is empty."""
        removed = self.sorted_remove()
        return None if removed is None else removed[0]

    def mapcar(self, func: Callable[[Any], Any]) -> None:
        """Apply func to every item in order."""
        for _, item in self._entries:
            func(item)

    def is_empty(self) -> bool:
        """True if the list holds no items."""
        return not self._entries

    def sorted_insert(self, item: Any, sort_key: int) -> None:
        """Insert before the first entry whose key is greater than sort_key."""
        position = next(
            (i for i, (key, _) in enumerate(self._entries) if sort_key < key),
            len(self._entries),
        )
        self._entries.insert(position, (sort_key, item))

    def sorted_remove(self) -> tuple[Any, int] | None:
        """Remove the first entry, returning (item, key); None if empty."""
        if not self._entries:
            return None
        key, item = self._entries.pop(0)
        return item, key

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Any]:
        return (item for _, item in self._entries)

    def __repr__(self) -> str:
        return f"KeyedList({self._entries!r})"