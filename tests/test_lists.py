import pytest

from ftkit.lists import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_init_from_items_keeps_order():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_push_front_prepends():
    lst = LinkedList([2, 3])
    node = lst.push_front(1)
    assert lst.head is node
    assert list(lst) == [1, 2, 3]


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.push_front("x")
    assert lst.last() is node


def test_push_back_appends():
    lst = LinkedList([1])
    node = lst.push_back(2)
    assert lst.last() is node
    assert list(lst) == [1, 2]
    assert node.next is None


def test_last_returns_final_node():
    lst = LinkedList(["first", "last"])
    last = lst.last()
    assert isinstance(last, Node)
    assert last.content == "last"


def test_nodes_are_linked():
    lst = LinkedList([1, 2])
    assert lst.head.next is lst.last()


def test_clear_calls_delete_in_order():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None
    assert lst.last() is None


def test_clear_without_delete():
    lst = LinkedList("abc")
    lst.clear()
    assert list(lst) == []


def test_list_usable_after_clear():
    lst = LinkedList([1, 2])
    lst.clear()
    lst.push_back(5)
    assert list(lst) == [5]


def test_for_each_visits_every_content():
    seen = []
    lst = LinkedList(["x", "y"])
    lst.for_each(seen.append)
    assert seen == ["x", "y"]


def test_map_builds_new_list():
    lst = LinkedList(["ab", "c"])
    mapped = lst.map(str.upper)
    assert list(mapped) == ["AB", "C"]
    assert list(lst) == ["ab", "c"]
    assert mapped is not lst


def test_map_empty():
    mapped = LinkedList().map(str.upper)
    assert len(mapped) == 0


def test_map_failure_deletes_partial_results():
    deleted = []

    def f(value):
        if value == 3:
            raise RuntimeError("boom")
        return value * 10

    lst = LinkedList([1, 2, 3, 4])
    with pytest.raises(RuntimeError):
        lst.map(f, deleted.append)
    assert deleted == [10, 20]


def test_len_tracks_mixed_operations():
    lst = LinkedList()
    lst.push_back("b")
    lst.push_front("a")
    lst.push_back("c")
    assert len(lst) == 3
    assert list(lst) == ["a", "b", "c"]