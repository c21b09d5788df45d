# monitorkit

Building blocks for threaded programs written in the monitor style: a
lock plus condition variables guarding shared state. The structures are
meant to be shared between ordinary `threading.Thread`s.

## What is inside

| Module | Contents |
| --- | --- |
| `monitorkit.synch` | `Semaphore` (`p`/`v`, plus a `value` snapshot), `Lock` (owner-checked, usable as a context manager), `Condition` (Mesa-style `wait`/`signal`/`broadcast`) |
| `monitorkit.keyedlist` | `KeyedList`: an unsynchronized list of items with integer keys; `sorted_insert` keeps it in key order |
| `monitorkit.synchlist` | `SynchList`: a lock-guarded FIFO list whose `remove` waits until an item is there |
| `monitorkit.dllist` | `DLList`: a synchronized list kept in ascending key order, and the `dll_func1` / `dll_func2` drivers |
| `monitorkit.table` | `Table`: a fixed-size slot table; `alloc` waits while every slot is taken |
| `monitorkit.boundedbuffer` | `BoundedBuffer`: a circular byte buffer with blocking `read` and `write` |
| `monitorkit.eventbarrier` | `EventBarrier`: a signaller wakes a group of waiters and waits until each has called `complete` |
| `monitorkit.alarm` | `Alarm`: puts threads to sleep for a number of time units measured on a clock |
| `monitorkit.elevator` | `Elevator` and `Building`: an elevator controller built on event barriers |

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

A lock and a condition variable:

```python
import threading
from monitorkit.synch import Lock, Condition

lock = Lock("queue lock")
ready = Condition("queue ready")
items = []

def consumer():
    with lock:
        while not items:
            ready.wait(lock)
        print("got", items.pop(0))

t = threading.Thread(target=consumer)
t.start()
with lock:
    items.append(42)
    ready.signal(lock)
t.join()
```

A `Lock` may only be released by the thread that holds it, and a thread
that already holds it may not acquire it again; both raise
`RuntimeError`. Using a `Condition` without holding its lock raises
`RuntimeError`; using it with a different lock from the first one raises
`ValueError`.

A bounded buffer between a producer and a consumer:

```python
import threading
from monitorkit.boundedbuffer import BoundedBuffer

buf = BoundedBuffer(4)
t = threading.Thread(target=buf.write, args=(b"hello world",))
t.start()
print(buf.read(11))   # b'hello world'
t.join()
```

Reads and writes larger than the capacity are allowed; they are carried
out in pieces of at most the capacity, each waiting for enough data or
enough room. `show_state()` prints the capacity and the write and read
positions.

A slot table:

```python
from monitorkit.table import Table

table = Table(2)
index = table.alloc("process A")
assert table.get(index) == "process A"
table.release(index)
assert table.get(index) is None
```

`alloc` takes the lowest free slot and refuses `None`; `get` and
`release` raise `IndexError` for an index outside the table.

Elevator riders follow this protocol, with a car running
`building.start_elevator()` (or `elevator.operating()`) in its own
thread:

```python
def rider(building, src, dst):
    while True:
        if src < dst:
            building.call_up(src)
            car = building.await_up(src)
        else:
            building.call_down(src)
            car = building.await_down(src)
        if car.enter():          # False when the car is full
            break
    car.request_floor(dst)       # returns when the car reaches dst
    car.exit()
```

Floors are numbered from 1, a building has fewer than 100 floors, and a
car carries 7 riders unless `capacity` says otherwise. Travel between
floors takes ten alarm time units per floor.

## Semantics worth knowing

* Condition variables are Mesa-style: a woken thread re-acquires the lock
  and should re-check its predicate in a loop.
* `KeyedList.sorted_insert` places an item after every item with an equal
  key; `DLList.sorted_insert` places it before them.
* `DLList.remove` returns `(item, key)` and waits while the list is
  empty; `DLList.sorted_remove` raises `KeyError` if no element has the
  key. `prepend` and `append` give keys one below the smallest and one
  above the largest, starting from 10 on an empty list.
* `EventBarrier.signal` blocks until some thread calls `complete`, so
  check `waiters()` before signalling.
* `Alarm.pause` ignores a negative duration. While any thread sleeps, a
  background daemon thread calls `awaken`; `awaken` may also be called
  directly. The clock and the ticks per unit are constructor arguments.
* Diagnostic messages go to the standard `logging` module at debug level.

## What it does not do

There is no command-line program: the elevator controller and the other
structures are library classes, and running a simulation means starting
the car and rider threads yourself.