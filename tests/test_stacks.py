import random

import pytest

from pushswap.stacks import InvalidCommandError, Stacks

ALL_COMMANDS = ["sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"]


def test_sa_swaps_top_two():
    s = Stacks([3, 1, 2])
    s.sa()
    assert s.a == [1, 3, 2]


@pytest.mark.parametrize("numbers", [[1, 2], [5, 4, 3, 2, 1], [7, -3, 9]])
def test_sa_twice_is_identity(numbers):
    s = Stacks(numbers)
    s.sa()
    s.sa()
    assert s.a == numbers


@pytest.mark.parametrize("numbers", [[], [4]])
def test_sa_on_short_stack_does_nothing(numbers):
    s = Stacks(numbers)
    s.sa()
    assert s.a == numbers


def test_sb_swaps_top_of_b():
    s = Stacks([1, 2, 3])
    s.pb()
    s.pb()
    before = list(s.b)
    s.sb()
    assert s.b == before[::-1]


def test_ss_equals_sa_then_sb():
    first = Stacks([4, 8, 1, 6, 2])
    second = Stacks([4, 8, 1, 6, 2])
    for s in (first, second):
        s.pb()
        s.pb()
    first.ss()
    second.sa()
    second.sb()
    assert (first.a, first.b) == (second.a, second.b)


def test_pb_moves_top_of_a_to_b():
    numbers = [9, 4, 6]
    s = Stacks(numbers)
    s.pb()
    assert s.b == numbers[:1]
    assert s.a == numbers[1:]


def test_pb_then_pa_round_trip():
    numbers = [5, 2, 8, 1]
    s = Stacks(numbers)
    s.pb()
    s.pb()
    s.pa()
    s.pa()
    assert s.a == numbers
    assert s.b == []


def test_pa_with_empty_b_does_nothing():
    numbers = [3, 2, 1]
    s = Stacks(numbers)
    s.pa()
    assert s.a == numbers
    assert s.b == []


def test_pb_with_empty_a_does_nothing():
    s = Stacks([])
    s.pb()
    assert s.a == [] and s.b == []


def test_ra_moves_top_to_bottom():
    numbers = [1, 2, 3, 4]
    s = Stacks(numbers)
    s.ra()
    assert s.a[-1] == numbers[0]
    assert s.a[0] == numbers[1]
    assert len(s.a) == len(numbers)


def test_ra_full_cycle_is_identity():
    numbers = [6, 3, 8, 1, 0]
    s = Stacks(numbers)
    for _ in numbers:
        s.ra()
    assert s.a == numbers


def test_rra_undoes_ra():
    numbers = [6, 3, 8, 1, 0]
    s = Stacks(numbers)
    s.ra()
    s.rra()
    assert s.a == numbers


def test_rra_moves_bottom_to_top():
    numbers = [1, 2, 3]
    s = Stacks(numbers)
    s.rra()
    assert s.a[0] == numbers[-1]
    assert s.a[1:] == numbers[:-1]


def test_rrb_undoes_rb():
    s = Stacks([1, 2, 3, 4])
    for _ in range(3):
        s.pb()
    before = list(s.b)
    s.rb()
    assert s.b != before
    s.rrb()
    assert s.b == before


def test_rr_equals_ra_then_rb():
    first = Stacks([2, 7, 4, 9, 1, 3])
    second = Stacks([2, 7, 4, 9, 1, 3])
    for s in (first, second):
        for _ in range(3):
            s.pb()
    first.rr()
    second.ra()
    second.rb()
    assert (first.a, first.b) == (second.a, second.b)


def test_rrr_equals_rra_then_rrb():
    first = Stacks([2, 7, 4, 9, 1, 3])
    second = Stacks([2, 7, 4, 9, 1, 3])
    for s in (first, second):
        for _ in range(3):
            s.pb()
    first.rrr()
    second.rra()
    second.rrb()
    assert (first.a, first.b) == (second.a, second.b)


def test_apply_runs_commands_and_counts():
    numbers = [2, 1, 3]
    s = Stacks(numbers)
    s.apply("sa")
    s.apply("sa")
    s.apply("pb")
    assert s.count == 3
    assert s.b == numbers[:1]


@pytest.mark.parametrize("command", ["", "SA", "sa ", "swap", "rrrr", "p"])
def test_apply_rejects_unknown_command(command):
    s = Stacks([1, 2])
    with pytest.raises(InvalidCommandError) as info:
        s.apply(command)
    assert info.value.command == command


def test_commands_preserve_the_multiset():
    rng = random.Random(7)
    numbers = rng.sample(range(-50, 50), 20)
    s = Stacks(numbers)
    for _ in range(300):
        s.apply(rng.choice(ALL_COMMANDS))
    assert sorted(s.a + s.b) == sorted(numbers)


def test_a_is_sorted_true_for_ascending():
    assert Stacks([-3, 0, 4, 10]).a_is_sorted() is True


def test_a_is_sorted_false_for_unsorted():
    assert Stacks([1, 3, 2]).a_is_sorted() is False


def test_a_is_sorted_false_for_empty():
    assert Stacks([]).a_is_sorted() is False


def test_is_done_requires_empty_b():
    s = Stacks([1, 2, 3])
    assert s.is_done() is True
    s.pb()
    assert s.a_is_sorted() is True
    assert s.is_done() is False
    s.pa()
    assert s.is_done() is True