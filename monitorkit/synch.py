"""Semaphores, locks and Mesa-style condition variables for threads."""

from __future__ import annotations

import threading
from collections import deque


class Semaphore:
    """A counting semaphore with the classic P (wait) and V (signal) operations."""

    def __init__(self, name: str = "semaphore", initial_value: int = 0) -> None:
        if initial_value < 0:
            raise ValueError("semaphore value must not be negative")
        self.name = name
        self._value = initial_value
        self._guard = threading.Condition(threading.Lock())

    @property
    def value(self) -> int:
        """The current value; only a snapshot, it may change at once."""
        with self._guard:
            return self._value

    def p(self) -> None:
        """Wait until the value is positive, then decrement it."""
        with self._guard:
            while self._value == 0:
                self._guard.wait()
            self._value -= 1

    def v(self) -> None:
        """Increment the value, waking one waiter if there is one."""
        with self._guard:
            self._value += 1
            self._guard.notify()

    def __repr__(self) -> str:
        return f"Semaphore({self.name!r}, value={self._value})"


class Lock:
    """A non-reentrant lock that remembers which thread holds it."""

    def __init__(self, name: str = "lock") -> None:
        self.name = name
        self._sem = Semaphore(name, 1)
        self._holder: int | None = None

    def acquire(self) -> None:
        """Wait until the lock is free, then take it."""
        if self.is_held_by_current_thread():
            raise RuntimeError(f"lock {self.name!r} is already held by this thread")
        self._sem.p()
        self._holder = threading.get_ident()

    def release(self) -> None:
        """Free the lock; only the holding thread may do so."""
        if not self.is_held_by_current_thread():
            raise RuntimeError(f"lock {self.name!r} is not held by this thread")
        self._holder = None
        self._sem.v()

    def is_held_by_current_thread(self) -> bool:
        """True if the calling thread holds this lock."""
        return self._holder == threading.get_ident()

    def __enter__(self) -> Lock:
        self.acquire()
        return self

    def __exit__(self, *args) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"Lock({self.name!r}, held={self._holder is not None})"


class Condition:
    """A Mesa-style condition variable bound to the first lock it is used with."""

    def __init__(self, name: str = "condition") -> None:
        self.name = name
        self._bound_lock: Lock | None = None
        self._waiters: deque[Semaphore] = deque()

    def _check(self, lock: Lock) -> None:
        if self._bound_lock is None:
            self._bound_lock = lock
        if self._bound_lock is not lock:
            raise ValueError(
                f"condition {self.name!r} must always be used with the same lock"
            )
        if not lock.is_held_by_current_thread():
            raise RuntimeError(
                f"condition {self.name!r} used without holding its lock"
            )

    def wait(self, lock: Lock) -> None:
        """Release the lock, sleep until signalled, then re-acquire the lock."""
        self._check(lock)
        wakeup = Semaphore(f"{self.name} waiter", 0)
        self._waiters.append(wakeup)
        lock.release()
        wakeup.p()
        lock.acquire()

    def signal(self, lock: Lock) -> None:
        """Wake the longest-waiting thread, if any."""
        self._check(lock)
        if self._waiters:
            self._waiters.popleft().v()

    def broadcast(self, lock: Lock) -> None:
        """Wake every waiting thread."""
        self._check(lock)
        while self._waiters:
            self._waiters.popleft().v()

    def __repr__(self) -> str:
        return f"Condition({self.name!r}, waiters={len(self._waiters)})"