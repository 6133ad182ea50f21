import pytest

from pypipex.libft.lists import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_items_keep_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_prepends():
    lst = LinkedList([2, 3])
    node = lst.push_front(1)
    assert list(lst) == [1, 2, 3]
    assert lst.head is node
    assert node.next.content == 2


def test_push_back_appends_and_updates_last():
    lst = LinkedList()
    lst.push_back("x")
    node = lst.push_back("y")
    assert lst.last() is node
    assert lst.last().content == "y"
    assert lst.last().next is None
    assert list(lst) == ["x", "y"]


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.push_front("only")
    assert lst.last() is node
    assert lst.head is node


def test_none_is_a_valid_value():
    lst = LinkedList([None, None])
    assert len(lst) == 2
    assert list(lst) == [None, None]


def test_clear_calls_delete_in_order():
    seen = []
    lst = LinkedList([1, 2, 3])
    lst.clear(seen.append)
    assert seen == [1, 2, 3]
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_clear_without_delete():
    lst = LinkedList("ab")
    lst.clear()
    assert list(lst) == []
    lst.push_back("c")
    assert list(lst) == ["c"]


def test_for_each_visits_every_value():
    seen = []
    LinkedList(["p", "q"]).for_each(seen.append)
    assert seen == ["p", "q"]


def test_map_builds_new_list():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda v: v * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]
    assert mapped.last().content == 30


def test_map_of_empty_list_is_empty():
    assert list(LinkedList().map(str)) == []


def test_map_failure_deletes_partial_results():
    deleted = []

    def f(v):
        if v == 3:
            raise RuntimeError("boom")
        return v + 100

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(f, deleted.append)
    assert deleted == [101, 102]


def test_node_links():
    tail = Node("b")
    head = Node("a", tail)
    assert head.next is tail
    assert tail.next is None