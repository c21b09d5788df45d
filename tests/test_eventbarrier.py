import threading
import time

import pytest

from monitorkit.eventbarrier import EventBarrier

pytestmark = pytest.mark.timeout(10)


def _await_waiters(barrier, count):
    for _ in range(1000):
        if barrier.waiters() == count:
            return
        time.sleep(0.005)
    raise AssertionError(f"barrier never reached {count} waiters")


def _rider(barrier, responses):
    barrier.wait()
    responses.append(threading.current_thread().name)
    barrier.complete()


def _spawn_riders(barrier, responses, count=1):
    riders = [
        threading.Thread(target=_rider, args=(barrier, responses), name=f"r{i}")
        for i in range(count)
    ]
    for rider in riders:
        rider.start()
    _await_waiters(barrier, count)
    return riders


def _all_finished(riders):
    for rider in riders:
        rider.join(5)
    return not any(rider.is_alive() for rider in riders)


def test_fresh_barrier_has_no_waiters():
    assert EventBarrier().waiters() == 0


def test_complete_without_waiters_raises():
    with pytest.raises(RuntimeError):
        EventBarrier().complete()


def test_waiter_is_counted_and_blocked():
    barrier = EventBarrier()
    responses = []
    riders = _spawn_riders(barrier, responses)
    time.sleep(0.05)
    assert riders[0].is_alive()
    assert responses == []
    barrier.signal()
    assert _all_finished(riders)
    assert barrier.waiters() == 0


def test_signal_returns_after_all_complete():
    barrier = EventBarrier()
    responses = []
    riders = _spawn_riders(barrier, responses, 3)
    barrier.signal()
    assert sorted(responses) == ["r0", "r1", "r2"]
    assert barrier.waiters() == 0
    assert _all_finished(riders)


def test_barrier_reverts_to_unsignalled():
    barrier = EventBarrier()
    responses = []
    first = _spawn_riders(barrier, responses)
    barrier.signal()
    assert _all_finished(first)

    second = _spawn_riders(barrier, responses)
    time.sleep(0.05)
    assert second[0].is_alive()
    assert len(responses) == 1
    barrier.signal()
    assert _all_finished(second)
    assert len(responses) == 2
    assert barrier.waiters() == 0