"""Cost estimates that guide the sorter.

They find where an element of stack b belongs in stack a and how many
rotations it takes to bring both places to the top.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import takewhile
from typing import Protocol


class _StackState(Protocol):
    """What the estimates read from the sorter's state."""

    @property
    def a(self) -> Sequence[int]: ...

    @property
    def b(self) -> Sequence[int]: ...

    @property
    def a_len(self) -> int: ...

    @property
    def b_len(self) -> int: ...

    @property
    def is_first(self) -> int: ...


@dataclass(frozen=True)
class Candidate:
    """An element of b with its estimated cost and 1-based target positions."""

    value: int
    cost: int
    position_a: int
    position_b: int


def count_moves(num_item: int, len_stack: int) -> int:
    """Rotations needed to bring position ``num_item`` to the top.

    Positions in the upper half are rotated up, the rest rotated down.
    """
    if len_stack == 1 or len_stack < num_item:
        return 0
    if num_item <= len_stack // 2:
        return max(num_item - 1, 0)
    return len_stack - num_item + 1


def has_gap(a: Sequence[int]) -> bool:
    """True when a is not in ascending order from the top."""
    return any(x > y for x, y in zip(a, a[1:]))


def position_without_gap(a: Sequence[int], item: int) -> int:
    """Position in an ascending a before which ``item`` belongs."""
    return 1 + sum(1 for _ in takewhile(lambda value: item > value, a))


def _position_after_gap(a: Sequence[int], item: int, n_item: int, a_len: int) -> int:
    index = max(n_item - 1, 0)
    if index >= len(a):
        return n_item - 1
    while index + 1 < len(a) and a[index] < a[index + 1]:
        if item <= a[index]:
            break
        n_item += 1
        index += 1
    if a[0] > item and n_item == a_len and a[index] < item:
        n_item = 1
    return n_item


def position_with_gap(a: Sequence[int], item: int, a_len: int) -> int:
    """Position in a rotated ascending a before which ``item`` belongs."""
    n_item = 1
    not_found = True
    index = 0
    while index + 1 < len(a):
        current, following = a[index], a[index + 1]
        n_item += 1
        if current < following:
            if current < item < following:
                not_found = False
                break
            index += 1
        else:
            if current < item:
                not_found = False
            break
    if not_found and len(a) == 1 and item < a[0]:
        return 1
    if not_found:
        n_item = _position_after_gap(a, item, n_item, a_len)
    return n_item


def position_in_a(a: Sequence[int], item: int, a_len: int) -> int:
    """Position in a before which ``item`` belongs."""
    if has_gap(a):
        return position_with_gap(a, item, a_len)
    return position_without_gap(a, item)


def position_in_b(b: Sequence[int], item: int) -> int:
    """1-based position of ``item`` in b; ValueError if it is not there."""
    try:
        return b.index(item) + 1
    except ValueError:
        raise ValueError(f"{item} is not on stack b") from None


def _evaluate(stacks: _StackState, item: int) -> Candidate:
    a_len, b_len = stacks.a_len, stacks.b_len
    pos_b = position_in_b(stacks.b, item)
    pos_a = position_in_a(stacks.a, item, a_len)
    if pos_b <= b_len // 2 and pos_a <= a_len // 2:
        shared = max(min(pos_b - 1, pos_a - 1), 0)
        num_b, num_a = pos_b - shared, pos_a - shared
    else:
        shared = max(min(b_len - pos_b, a_len - pos_a + 1), 0)
        num_b, num_a = pos_b + shared, pos_a + shared
    cost = shared + count_moves(num_b, b_len) + count_moves(num_a, a_len)
    return Candidate(value=item, cost=cost, position_a=pos_a, position_b=pos_b)


def count_combined(stacks: _StackState, item: int) -> int:
    """Estimated moves to put ``item`` from b into its place in a."""
    return _evaluate(stacks, item).cost


def evaluate_candidates(stacks: _StackState) -> list[Candidate]:
    """Every element of b, top first, with its cost and positions."""
    return [_evaluate(stacks, item) for item in stacks.b]


def count_single(num_item: int, len_stack: int, is_first: int) -> int:
    """Rotations to bring ``num_item`` to the top when rotating one stack alone."""
    middle = (len_stack + 1) // 2
    if num_item <= middle:
        return max(num_item - 1, 0)
    if is_first == 1 or len_stack <= 1:
        return 0
    return max(len_stack - num_item + 1, 0)


def count_double(stacks: _StackState, num_a: int, num_b: int) -> int:
    """Moves when both stacks are rotated together as far as possible first."""
    a_len, b_len = stacks.a_len, stacks.b_len
    middle_a, middle_b = a_len // 2, b_len // 2
    if num_b <= middle_b and num_a <= middle_a:
        shared = max(min(num_a - 1, num_b - 1), 0)
        num_a, num_b = num_a - shared, num_b - shared
    elif num_a > middle_a and num_b > middle_b:
        shared = max(min(a_len - num_a, b_len - num_b + 1), 0)
        num_a, num_b = num_a + shared, num_b + shared
    else:
        shared = 0
    return (
        shared
        + count_single(num_b, b_len, stacks.is_first)
        + count_single(num_a, a_len, stacks.is_first)
    )


def need_double(stacks: _StackState, num_a: int, num_b: int) -> bool:
    """True when rotating both stacks together is cheaper than separately."""
    double = count_double(stacks, num_a, num_b)
    single = count_single(num_b, stacks.b_len, stacks.is_first) + count_single(
        num_a, stacks.a_len, stacks.is_first
    )
    return double < single