"""An event barrier: signalling waits until every waiter has responded."""

from __future__ import annotations

import logging
import threading

from monitorkit.synch import Condition, Lock

log = logging.getLogger(__name__)


class EventBarrier:
    """Threads wait for an event; the signaller waits for them all to complete.

    Signalling with no waiters blocks until some thread completes, so
    callers check `waiters()` first.
    """

    def __init__(self) -> None:
        self._lock = Lock("EventBarrier lock")
        self._signalled = Condition("signal")
        self._completed = Condition("complete")
        self._state = 0
        self._count = 0

    def wait(self) -> None:
        """Wait until the event is signalled; return at once if it already is."""
        with self._lock:
            if self._state == 0:
                self._count += 1
                log.debug(
                    "thread %s waits, %d waiting",
                    threading.current_thread().name,
                    self._count,
                )
                self._signalled.wait(self._lock)

    def signal(self) -> None:
        """Signal the event and wait until every waiter has completed.

        The barrier returns to the unsignalled state when this returns.
        """
        with self._lock:
            self._state += 1
            self._signalled.broadcast(self._lock)
            log.debug("thread %s signalled", threading.current_thread().name)
            self._completed.wait(self._lock)
            self._state -= 1

    def complete(self) -> None:
        """Report this thread has responded, then wait for the others."""
        with self._lock:
            if self._count <= 0:
                raise RuntimeError("complete() called with no thread responding")
            self._count -= 1
            if self._count > 0:
                self._completed.wait(self._lock)
            else:
                self._completed.broadcast(self._lock)
                log.debug("thread %s completed", threading.current_thread().name)

    def waiters(self) -> int:
        """The number of threads waiting or not yet completed."""
        return self._count

    def __repr__(self) -> str:
        return f"EventBarrier(waiters={self._count})"