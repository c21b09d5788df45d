"""A fixed-capacity byte ring buffer shared by producer and consumer threads."""

from __future__ import annotations

import sys

from monitorkit.synch import Condition, Lock


class BoundedBuffer:
    """Holds at most `maxsize` bytes.

    Reads wait for enough data and writes wait for enough room.
    """

    def __init__(self, maxsize: int) -> None:
        if maxsize <= 0:
            raise ValueError("buffer size must be positive")
        self._capacity = maxsize
        # One spare byte tells a full buffer from an empty one.
        self._storage = bytearray(maxsize + 1)
        self._head = 0  # next position to write
        self._tail = 0  # next position to read
        self._lock = Lock("BF lock")
        self._room = Condition("Empty Condition")
        self._data = Condition("Full Condition")

    @property
    def capacity(self) -> int:
        """The most bytes the buffer can hold at once."""
        return self._capacity

    def _used(self) -> int:
        return (self._head - self._tail) % len(self._storage)

    def _read_chunk(self, size: int) -> bytes:
        with self._lock:
            while self._used() < size:
                self._data.wait(self._lock)
            length = len(self._storage)
            end = self._tail + size
            if end <= length:
                chunk = bytes(self._storage[self._tail:end])
            else:
                chunk = bytes(self._storage[self._tail:]) + bytes(
                    self._storage[: end - length]
                )
            self._tail = end % length
            self._room.broadcast(self._lock)
        return chunk

    def _write_chunk(self, chunk: memoryview) -> None:
        size = len(chunk)
        with self._lock:
            while self._capacity - self._used() < size:
                self._room.wait(self._lock)
            length = len(self._storage)
            first_part = min(size, length - self._head)
            self._storage[self._head:self._head + first_part] = chunk[:first_part]
            self._storage[: size - first_part] = chunk[first_part:]
            self._head = (self._head + size) % length
            self._data.broadcast(self._lock)

    def read(self, size: int) -> bytes:
        """Read exactly `size` bytes, waiting for them to be written.

        `size` may exceed the capacity; the bytes are then taken in turns.
        """
        if size < 0:
            raise ValueError("cannot read a negative number of bytes")
        chunks = []
        remaining = size
        while remaining > 0:
            step = min(remaining, self._capacity)
            chunks.append(self._read_chunk(step))
            remaining -= step
        return b"".join(chunks)

    def write(self, data: bytes) -> None:
        """Write all of `data`, waiting for room as needed.

        `data` may be longer than the capacity; it is then put in turns.
        """
        view = memoryview(bytes(data))
        for start in range(0, len(view), self._capacity):
            self._write_chunk(view[start:start + self._capacity])

    def show_state(self) -> None:
        """Print the capacity and the write and read positions."""
        with self._lock:
            head, tail = self._head, self._tail
        out = sys.stdout
        out.write(f"0========================={self._capacity}\n")
        out.write(f"first at {head}\n")
        out.write(f"last  at {tail}\n\n")

    def __len__(self) -> int:
        with self._lock:
            return self._used()

    def __repr__(self) -> str:
        return f"BoundedBuffer(capacity={self._capacity})"