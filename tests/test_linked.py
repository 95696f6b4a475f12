import pytest

from pushswap.linked import LinkedList, Node


def test_init_preserves_order():
    lst = LinkedList(["N1", "N2", "N3"])
    assert list(lst) == ["N1", "N2", "N3"]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_push_front():
    lst = LinkedList(["N1", "N2", "N3"])
    node = lst.push_front("New node")
    assert lst.head is node
    assert list(lst) == ["New node", "N1", "N2", "N3"]


def test_push_back():
    lst = LinkedList(["N1", "N2", "N3"])
    lst.push_back("new node")
    assert list(lst) == ["N1", "N2", "N3", "new node"]
    assert lst.last().content == "new node"


def test_push_back_on_empty_sets_head():
    lst = LinkedList()
    node = lst.push_back("only")
    assert lst.head is node
    assert lst.last() is node


def test_last():
    lst = LinkedList(["N1", "N2", "N3"])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.content == "N3"
    assert tail.next is None


def test_clear_calls_delete_in_order():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_empties():
    lst = LinkedList("abc")
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_all():
    seen = []
    LinkedList(["a", "b"]).for_each(seen.append)
    assert seen == ["a", "b"]


def test_map_builds_new_list():
    source = LinkedList([1, 2, 3])
    mapped = source.map(lambda x: x * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(source) == [1, 2, 3]
    assert mapped.head is not source.head


def test_map_failure_deletes_partial_results():
    deleted = []

    def f(x):
        if x == 3:
            raise RuntimeError("boom")
        return str(x)

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(f, deleted.append)
    assert deleted == ["1", "2"]


def test_length_matches_iteration():
    items = list(range(25))
    lst = LinkedList(items)
    assert len(lst) == len(list(lst)) == len(items)