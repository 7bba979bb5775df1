import pytest

from dsakit.nodes import ListNode, delete_node, from_values, reverse_list, to_values


@pytest.mark.parametrize("values", [[1], [1, 2], [5, 4, 3, 2, 1], [7, 7, 0, -3]])
def test_round_trip(values):
    assert to_values(from_values(values)) == values


def test_empty_round_trip():
    assert from_values([]) is None
    assert to_values(None) == []


def test_iter_yields_nodes_from_head():
    values = [3, 1, 4, 1, 5]
    head = from_values(values)
    nodes = list(head)
    assert nodes[0] is head
    assert [node.val for node in nodes] == values
    assert nodes[-1].next is None


def test_iter_from_middle_node():
    head = from_values([10, 20, 30])
    middle = head.next
    assert [node.val for node in middle] == [20, 30]


def test_nodes_compare_by_identity():
    head = from_values([1, 1, 1])
    nodes = list(head)
    assert nodes.index(head.next) == 1
    assert nodes.index(head.next.next) == 2
    assert (ListNode(1) == ListNode(1)) is False


@pytest.mark.parametrize("values", [[1], [1, 2], [1, 2, 3, 4, 5], [9, 8, 8, 1]])
def test_reverse_list(values):
    assert to_values(reverse_list(from_values(values))) == values[::-1]


def test_reverse_list_twice_restores_order():
    values = [2, 4, 6, 8]
    assert to_values(reverse_list(reverse_list(from_values(values)))) == values


def test_reverse_reuses_nodes():
    head = from_values([1, 2, 3])
    original = {id(node) for node in head}
    reversed_head = reverse_list(head)
    assert {id(node) for node in reversed_head} == original
    assert head.next is None


def test_reverse_empty():
    assert reverse_list(None) is None


def test_delete_node_in_middle():
    values = [4, 5, 1, 9]
    head = from_values(values)
    delete_node(head.next)
    assert to_values(head) == values[:1] + values[2:]


def test_delete_node_head():
    values = [4, 5, 1, 9]
    head = from_values(values)
    delete_node(head)
    assert to_values(head) == values[1:]


def test_delete_last_node_raises():
    head = from_values([1, 2])
    with pytest.raises(ValueError):
        delete_node(head.next)