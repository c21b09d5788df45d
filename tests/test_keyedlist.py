import pytest

from monitorkit.keyedlist import KeyedList


def test_new_list_is_empty():
    lst = KeyedList()
    assert lst.is_empty()
    assert len(lst) == 0
    assert lst.remove() is None
    assert lst.sorted_remove() is None


def test_append_keeps_order():
    lst = KeyedList()
    for item in ["a", "b", "c"]:
        lst.append(item)
    assert list(lst) == ["a", "b", "c"]
    assert not lst.is_empty()


def test_prepend_reverses_order():
    lst = KeyedList()
    for item in ["a", "b", "c"]:
        lst.prepend(item)
    assert list(lst) == ["c", "b", "a"]


def test_remove_takes_from_front():
    lst = KeyedList()
    lst.append("x")
    lst.append("y")
    assert lst.remove() == "x"
    assert lst.remove() == "y"
    assert lst.remove() is None
    assert lst.is_empty()


def test_append_and_prepend_use_key_zero():
    lst = KeyedList()
    lst.append("tail")
    lst.prepend("head")
    assert lst.sorted_remove() == ("head", 0)
    assert lst.sorted_remove() == ("tail", 0)


@pytest.mark.parametrize(
    "keys",
    [[5, 3, 9, 1, 7], [1, 2, 3, 4], [4, 3, 2, 1], [2, 2, 1, 3, 1]],
)
def test_sorted_insert_yields_sorted_keys(keys):
    lst = KeyedList()
    for k in keys:
        lst.sorted_insert(f"item{k}", k)
    removed = []
    while (entry := lst.sorted_remove()) is not None:
        removed.append(entry[1])
    assert removed == sorted(keys)


def test_sorted_insert_equal_keys_keep_insertion_order():
    lst = KeyedList()
    lst.sorted_insert("first", 5)
    lst.sorted_insert("second", 5)
    lst.sorted_insert("early", 1)
    lst.sorted_insert("third", 5)
    assert list(lst) == ["early", "first", "second", "third"]


def test_sorted_remove_returns_item_and_key():
    lst = KeyedList()
    lst.sorted_insert("later", 20)
    lst.sorted_insert("sooner", 10)
    assert lst.sorted_remove() == ("sooner", 10)
    assert lst.sorted_remove() == ("later", 20)
    assert lst.sorted_remove() is None


def test_mapcar_visits_every_item_in_order():
    lst = KeyedList()
    for item in [1, 2, 3]:
        lst.append(item)
    seen = []
    lst.mapcar(seen.append)
    assert seen == [1, 2, 3]
    assert len(lst) == 3


def test_len_tracks_inserts_and_removes():
    lst = KeyedList()
    lst.append("a")
    lst.sorted_insert("b", 4)
    lst.prepend("c")
    assert len(lst) == 3
    lst.remove()
    assert len(lst) == 2