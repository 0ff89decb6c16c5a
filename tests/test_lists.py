import pytest

from cubkit.lists import LinkedList


def test_init_keeps_order_and_length():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []


def test_push_front_prepends():
    lst = LinkedList([2, 3])
    lst.push_front(1)
    assert list(lst) == [1, 2, 3]


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    lst.push_front("x")
    assert lst.last() == "x"
    assert len(lst) == 1


def test_push_back_appends():
    lst = LinkedList()
    lst.push_back(1)
    lst.push_back(2)
    assert list(lst) == [1, 2]
    assert lst.last() == 2


def test_mixed_pushes():
    lst = LinkedList()
    lst.push_back("b")
    lst.push_front("a")
    lst.push_back("c")
    assert list(lst) == ["a", "b", "c"]
    assert lst.last() == "c"


def test_last_of_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().last()


def test_for_each_visits_in_order():
    seen = []
    LinkedList(["x", "y", "z"]).for_each(seen.append)
    assert seen == ["x", "y", "z"]


def test_map_builds_new_list():
    source = LinkedList(["ab", "c"])
    mapped = source.map(str.upper)
    assert list(mapped) == ["AB", "C"]
    assert list(source) == ["ab", "c"]
    assert len(mapped) == len(source)


def test_map_of_empty_is_empty():
    assert list(LinkedList().map(str.upper)) == []


def test_map_failure_deletes_produced_items():
    deleted = []

    def func(value):
        if value == "boom":
            raise RuntimeError(value)
        return value * 2

    lst = LinkedList(["a", "b", "boom", "c"])
    with pytest.raises(RuntimeError):
        lst.map(func, deleted.append)
    assert deleted == ["aa", "bb"]


def test_clear_calls_delete_and_empties():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert list(lst) == []
    with pytest.raises(IndexError):
        lst.last()


def test_clear_without_delete_then_reuse():
    lst = LinkedList(["a"])
    lst.clear()
    lst.push_back("b")
    assert list(lst) == ["b"]
    assert lst.last() == "b"