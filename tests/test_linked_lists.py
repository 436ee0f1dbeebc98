import pytest

from algobox.linked_lists import (
    LinkedList,
    MultilevelNode,
    flatten,
    from_values,
    reverse_list,
    swap_pairs,
    to_values,
)


def _demo_list():
    linked = LinkedList()
    linked.insert_at_beginning(12)
    linked.insert_at_beginning(22)
    linked.insert_at_end(30)
    linked.insert_at_end(44)
    linked.insert_at_beginning(50)
    linked.insert_after(2, 33)
    return linked


def test_demo_sequence_matches_worked_example():
    linked = _demo_list()
    assert str(linked) == "[ 50  22  12  33  30  44 ]"
    linked.delete_at_beginning()
    linked.delete_at_end()
    linked.delete(12)
    assert str(linked) == "[ 22  33  30 ]"
    linked.insert_at_beginning(4)
    linked.insert_at_beginning(16)
    assert str(linked) == "[ 16  4  22  33  30 ]"
    assert 16 in linked


def test_insert_at_end_on_empty_list():
    linked = LinkedList()
    linked.insert_at_end(5)
    assert list(linked) == [5]
    assert len(linked) == 1


def test_constructor_keeps_order():
    values = [3, 1, 4, 1, 5]
    linked = LinkedList(values)
    assert list(linked) == values
    assert len(linked) == len(values)


def test_delete_returns_values():
    linked = LinkedList([7, 8, 9])
    assert linked.delete_at_beginning() == 7
    assert linked.delete_at_end() == 9
    assert list(linked) == [8]


def test_delete_missing_key_leaves_list():
    linked = LinkedList([1, 2, 3])
    assert linked.delete(42) is False
    assert list(linked) == [1, 2, 3]


def test_delete_removes_first_occurrence_only():
    linked = LinkedList([2, 5, 2])
    assert linked.delete(2) is True
    assert list(linked) == [5, 2]


def test_delete_at_end_of_single_node_empties():
    linked = LinkedList([6])
    assert linked.delete_at_end() == 6
    assert len(linked) == 0
    assert 6 not in linked


def test_deletes_on_empty_list_raise():
    with pytest.raises(IndexError):
        LinkedList().delete_at_beginning()
    with pytest.raises(IndexError):
        LinkedList().delete_at_end()


@pytest.mark.parametrize("position", [-1, 3, 10])
def test_insert_after_out_of_range(position):
    with pytest.raises(IndexError):
        LinkedList([1, 2, 3]).insert_after(position, 9)


def test_search_absent():
    assert 99 not in LinkedList([1, 2, 3])


def test_round_trip_values():
    values = [10, 20, 30, 40]
    assert to_values(from_values(values)) == values
    assert from_values([]) is None
    assert to_values(None) == []


@pytest.mark.parametrize("values", [[], [1], [1, 2], [5, 4, 3, 2, 1, 0]])
def test_reverse_list(values):
    assert to_values(reverse_list(from_values(values))) == values[::-1]
    assert to_values(reverse_list(reverse_list(from_values(values)))) == values


def test_swap_pairs_example():
    assert to_values(swap_pairs(from_values([1, 2, 3, 4, 5]))) == [2, 1, 4, 3, 5]


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5, 6, 7]])
def test_swap_pairs_is_involution(values):
    once = to_values(swap_pairs(from_values(values)))
    assert sorted(once) == sorted(values)
    assert to_values(swap_pairs(from_values(once))) == values


def _link(*nodes):
    for left, right in zip(nodes, nodes[1:]):
        left.next = right
        right.prev = left
    return nodes[0]


def test_flatten_worked_example():
    n1, n2, n3, n4, n5, n6, n7 = (MultilevelNode(v) for v in range(1, 8))
    _link(n1, n2, n3)
    _link(n4, n5)
    n1.child = n4
    n3.child = n6
    n4.child = n7

    head = flatten(n1)
    assert to_values(head) == [1, 2, 3, 4, 5, 6, 7]
    nodes = [n1, n2, n3, n4, n5, n6, n7]
    assert all(node.child is None for node in nodes)
    for left, right in zip(nodes, nodes[1:]):
        assert right.prev is left


def test_flatten_empty():
    assert flatten(None) is None