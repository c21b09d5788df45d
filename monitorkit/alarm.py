"""An alarm clock that puts threads to sleep until a given time has passed."""

from __future__ import annotations

import heapq
import itertools
import logging
import threading
import time
from collections.abc import Callable

from monitorkit.synch import Semaphore

log = logging.getLogger(__name__)


class Alarm:
    """Lets threads sleep for a number of time units.

    `clock` returns the current time in ticks and `ticks_per_unit` says how
    many ticks one unit lasts. While any thread sleeps, a background checker
    thread calls `awaken` every `poll_interval` seconds; `awaken` may also be
    called directly, as a timer interrupt would.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        ticks_per_unit: float = 0.001,
        poll_interval: float = 0.001,
    ) -> None:
        self._clock = clock
        self._ticks_per_unit = ticks_per_unit
        self._poll_interval = poll_interval
        self._queue: list[tuple[float, int, Semaphore]] = []
        self._order = itertools.count()
        self._waiters = 0
        self._guard = threading.Lock()

    def check_empty(self) -> bool:
        """True if no thread is sleeping on the alarm."""
        with self._guard:
            return self._waiters == 0

    def _sentinel(self) -> None:
        while not self.check_empty():
            self.awaken()
            time.sleep(self._poll_interval)
        log.debug("alarm checker finished")

    def pause(self, how_long: int) -> None:
        """Sleep the calling thread for `how_long` units of time.

        A negative duration is ignored.
        """
        if how_long < 0:
            log.debug(
                "thread %s alarm failed, duration is negative",
                threading.current_thread().name,
            )
            return
        wakeup = Semaphore("alarm wakeup", 0)
        with self._guard:
            self._waiters += 1
            if self._waiters == 1:
                threading.Thread(
                    target=self._sentinel, name="CheckThread", daemon=True
                ).start()
                log.debug("alarm checker started")
            wake_time = self._clock() + self._ticks_per_unit * how_long
            heapq.heappush(self._queue, (wake_time, next(self._order), wakeup))
            log.debug(
                "thread %s sleeps until %s",
                threading.current_thread().name,
                wake_time,
            )
        wakeup.p()

    def awaken(self) -> None:
        """Wake every sleeping thread whose time has come, earliest first."""
        with self._guard:
            now = self._clock()
            while self._queue and self._queue[0][0] <= now:
                _, _, wakeup = heapq.heappop(self._queue)
                self._waiters -= 1
                wakeup.v()

    def __repr__(self) -> str:
        return f"Alarm(waiters={self._waiters})"