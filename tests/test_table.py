import threading
import time

import pytest

from monitorkit.table import Table

pytestmark = pytest.mark.timeout(10)


def _run_workers(target, count):
    workers = [threading.Thread(target=target, args=(n,)) for n in range(count)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join(5)


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        Table(0)


def test_alloc_uses_lowest_free_slot():
    table = Table(3)
    assert [table.alloc(name) for name in "abc"] == [0, 1, 2]


def test_get_returns_stored_object_and_keeps_it():
    table = Table(2)
    obj = object()
    index = table.alloc(obj)
    assert table.get(index) is obj
    assert table.get(index) is obj


def test_get_of_free_slot_is_none():
    assert Table(2).get(1) is None


def test_release_frees_slot_for_reuse():
    table = Table(3)
    second = [table.alloc(name) for name in "abc"][1]
    table.release(second)
    assert table.get(second) is None
    assert table.alloc("d") == second
    assert table.get(second) == "d"


def test_release_of_empty_slot_keeps_count():
    table = Table(2)
    table.alloc("a")
    table.release(1)
    assert len(table) == 1


@pytest.mark.parametrize("operation", ["get", "release"])
@pytest.mark.parametrize("index", [-1, 2])
def test_out_of_range_index_raises(operation, index):
    with pytest.raises(IndexError):
        getattr(Table(2), operation)(index)


def test_none_cannot_be_stored():
    with pytest.raises(ValueError):
        Table(1).alloc(None)


def test_alloc_waits_while_full():
    table = Table(1)
    table.alloc("first")
    results = []
    waiter = threading.Thread(target=lambda: results.append(table.alloc("second")))
    waiter.start()
    time.sleep(0.1)
    assert results == []
    table.release(0)
    waiter.join(2)
    assert results == [0]
    assert table.get(0) == "second"


def test_concurrent_allocs_get_distinct_slots():
    table = Table(20)
    indices = []
    guard = threading.Lock()

    def worker(n):
        for i in range(5):
            index = table.alloc((n, i))
            with guard:
                indices.append(index)

    _run_workers(worker, 4)
    assert sorted(indices) == list(range(20))
    assert len(table) == 20