import threading
import time

import pytest

from monitorkit.boundedbuffer import BoundedBuffer


def test_write_then_read_round_trip():
    buf = BoundedBuffer(8)
    buf.write(b"hello")
    assert len(buf) == 5
    assert buf.read(5) == b"hello"
    assert len(buf) == 0


def test_wraps_around_the_end():
    buf = BoundedBuffer(4)
    buf.write(b"abc")
    assert buf.read(3) == b"abc"
    buf.write(b"defg")
    assert len(buf) == 4
    assert buf.read(2) == b"de"
    assert buf.read(2) == b"fg"


def test_show_state_fresh(capsys):
    buf = BoundedBuffer(4)
    buf.show_state()
    assert capsys.readouterr().out == (
        "0=========================4\nfirst at 0\nlast  at 0\n\n"
    )


def test_show_state_after_traffic(capsys):
    buf = BoundedBuffer(4)
    buf.write(b"abc")
    buf.read(1)
    buf.show_state()
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "first at 3"
    assert lines[2] == "last  at 1"


def test_read_zero_bytes():
    buf = BoundedBuffer(3)
    assert buf.read(0) == b""


@pytest.mark.parametrize("size", [0, -1])
def test_bad_capacity(size):
    with pytest.raises(ValueError):
        BoundedBuffer(size)


def test_negative_read():
    with pytest.raises(ValueError):
        BoundedBuffer(3).read(-1)


@pytest.mark.timeout(10)
def test_reader_waits_for_enough_bytes():
    buf = BoundedBuffer(4)
    result = []
    reader = threading.Thread(target=lambda: result.append(buf.read(3)))
    reader.start()
    buf.write(b"ab")
    time.sleep(0.05)
    assert reader.is_alive()
    buf.write(b"c")
    reader.join(5)
    assert not reader.is_alive()
    assert result == [b"abc"]


@pytest.mark.timeout(10)
def test_writer_waits_for_room():
    buf = BoundedBuffer(2)
    buf.write(b"xy")
    writer = threading.Thread(target=buf.write, args=(b"z",))
    writer.start()
    time.sleep(0.05)
    assert writer.is_alive()
    assert buf.read(1) == b"x"
    writer.join(5)
    assert not writer.is_alive()
    assert buf.read(2) == b"yz"


@pytest.mark.timeout(10)
def test_transfer_larger_than_capacity():
    buf = BoundedBuffer(5)
    payload = bytes(range(256)) * 3
    result = []
    reader = threading.Thread(target=lambda: result.append(buf.read(len(payload))))
    reader.start()
    buf.write(payload)
    reader.join(5)
    assert result == [payload]
    assert len(buf) == 0