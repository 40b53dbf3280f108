import pytest

from algokit.linked import (
    ListNode,
    RandomNode,
    add_two_numbers,
    copy_random_list,
    has_cycle,
)


def _to_int(head):
    if head is None:
        return 0
    return int("".join(str(d) for d in reversed(list(head))))


def _random_list(values, random_targets):
    nodes = [RandomNode(v) for v in values]
    for node, following in zip(nodes, nodes[1:]):
        node.next = following
    for node, target in zip(nodes, random_targets):
        node.random = nodes[target] if target is not None else None
    return nodes


@pytest.mark.parametrize("values", [[1], [1, 2, 3], [9, 0, 9, 0]])
def test_from_values_round_trip(values):
    assert list(ListNode.from_values(values)) == values


def test_from_values_empty_is_none():
    assert ListNode.from_values([]) is None


def test_has_cycle_detects_loop():
    head = ListNode.from_values([3, 2, 0, -4])
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.next = head.next
    assert has_cycle(head) is True


def test_has_cycle_self_loop():
    head = ListNode(1)
    head.next = head
    assert has_cycle(head) is True


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5]])
def test_has_cycle_false_for_plain_lists(values):
    assert has_cycle(ListNode.from_values(values)) is False


def test_add_two_numbers_worked_example():
    result = add_two_numbers(
        ListNode.from_values([2, 4, 3]), ListNode.from_values([5, 6, 4])
    )
    assert list(result) == [7, 0, 8]


@pytest.mark.parametrize(
    "a, b",
    [([0], [0]), ([9, 9, 9, 9, 9, 9, 9], [9, 9, 9, 9]), ([1], [9, 9]), ([5], [5])],
)
def test_add_two_numbers_matches_integer_sum(a, b):
    left = ListNode.from_values(a)
    right = ListNode.from_values(b)
    result = add_two_numbers(left, right)
    assert _to_int(result) == _to_int(ListNode.from_values(a)) + _to_int(
        ListNode.from_values(b)
    )
    assert all(0 <= digit <= 9 for digit in result)


def test_add_two_numbers_leaves_inputs_intact():
    a = ListNode.from_values([1, 2])
    b = ListNode.from_values([3])
    add_two_numbers(a, b)
    assert list(a) == [1, 2]
    assert list(b) == [3]


def test_copy_random_list_is_deep_and_faithful():
    targets = [None, 0, 4, 2, 0]
    nodes = _random_list([7, 13, 11, 10, 1], targets)
    copy = copy_random_list(nodes[0])

    copied = []
    node = copy
    while node is not None:
        copied.append(node)
        node = node.next

    assert [n.val for n in copied] == [7, 13, 11, 10, 1]
    assert not any(c is o for c in copied for o in nodes)
    for copy_node, target in zip(copied, targets):
        if target is None:
            assert copy_node.random is None
        else:
            assert copy_node.random is copied[target]


def test_copy_random_list_keeps_original_links():
    nodes = _random_list([1, 2], [1, 1])
    copy_random_list(nodes[0])
    assert nodes[0].next is nodes[1]
    assert nodes[0].random is nodes[1]
    assert nodes[1].next is None


def test_copy_random_list_empty():
    assert copy_random_list(None) is None