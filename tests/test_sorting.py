import itertools
import random

import pytest

from pushswap.sorting import (
    Sorter,
    bigger_target,
    push_cost,
    smaller_target,
    sort_operations,
)
from pushswap.stack import Operation, Stack, apply_operation


def _replay(values, operations):
    a, b = Stack("a", values), Stack("b")
    for operation in operations:
        apply_operation(operation, a, b)
    return a, b


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 6])
def test_every_permutation_gets_sorted(size):
    for perm in itertools.permutations(range(size)):
        a, b = _replay(perm, sort_operations(perm))
        assert list(a) == sorted(perm)
        assert len(b) == 0


@pytest.mark.parametrize("seed,size", [(1, 20), (2, 50), (3, 100), (4, 101)])
def test_random_inputs_get_sorted(seed, size):
    rng = random.Random(seed)
    values = rng.sample(range(-10_000, 10_000), size)
    a, b = _replay(values, sort_operations(values))
    assert list(a) == sorted(values)
    assert len(b) == 0


@pytest.mark.parametrize("values", [[1, 5, 9], [-3, 0, 7, 12], [42]])
def test_sorted_input_needs_no_operations(values):
    assert sort_operations(values) == []


def test_empty_input_needs_no_operations():
    assert sort_operations([]) == []


def test_two_unsorted_values_use_single_swap():
    assert sort_operations([2, 1]) == [Operation.SA]


def test_three_values_never_use_stack_b():
    for perm in itertools.permutations([10, 20, 30]):
        operations = sort_operations(perm)
        assert Operation.PB not in operations
        assert Operation.PA not in operations
        a, _ = _replay(perm, operations)
        assert list(a) == [10, 20, 30]


def test_circularly_sorted_input_only_rotates():
    values = [3, 4, 5, 1, 2]
    operations = sort_operations(values)
    assert set(operations) <= {Operation.RA, Operation.RRA}
    assert len(set(operations)) == 1
    a, _ = _replay(values, operations)
    assert list(a) == sorted(values)


def test_sorter_mutates_stacks_and_matches_sort_operations():
    values = [5, 2, 9, 1, 7]
    a, b = Stack("a", values), Stack("b")
    operations = Sorter(a, b).sort()
    assert list(a) == sorted(values)
    assert len(b) == 0
    assert operations == sort_operations(values)


def test_sorting_is_deterministic():
    values = [8, -4, 15, 16, 23, 42, 0, 7]
    assert sort_operations(values) == sort_operations(list(values))


def test_duplicates_are_rejected():
    with pytest.raises(ValueError):
        Sorter(Stack("a", [1, 1]), Stack("b"))


def test_same_stack_twice_is_rejected():
    stack = Stack("a", [1, 2])
    with pytest.raises(ValueError):
        Sorter(stack, stack)


def test_smaller_target_is_closest_value_below():
    b = Stack("b", [3, 8, 4])
    assert b[smaller_target(5, b)] == 4


def test_smaller_target_falls_back_to_maximum():
    b = Stack("b", [3, 8, 4])
    assert b[smaller_target(1, b)] == max(b)


def test_bigger_target_is_closest_value_above():
    a = Stack("a", [3, 8, 4, 11])
    assert a[bigger_target(5, a)] == 8


def test_bigger_target_falls_back_to_minimum():
    a = Stack("a", [3, 8, 4])
    assert a[bigger_target(10, a)] == min(a)


def test_targets_on_empty_stack_raise():
    with pytest.raises(ValueError):
        smaller_target(1, Stack("b"))
    with pytest.raises(ValueError):
        bigger_target(1, Stack("a"))


def test_push_cost_of_both_tops_is_zero():
    assert push_cost(0, 0, Stack("a", [1, 2, 3]), Stack("b", [4, 5])) == 0


def test_push_cost_when_node_above_and_target_below():
    source = Stack("a", [1, 2, 3, 4])
    dest = Stack("b", [5, 6, 7, 8])
    assert push_cost(1, 3, source, dest) == 2


def test_push_cost_shares_reverse_rotations():
    source = Stack("a", [1, 2, 3, 4])
    dest = Stack("b", [5, 6, 7, 8])
    assert push_cost(3, 3, source, dest) == 1