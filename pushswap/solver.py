"""The sorter: turns a list of distinct integers into stack operations."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Sequence

from .analysis import evaluate_candidates, has_gap, need_double
from .parsing import InputError, parse_arguments
from .stacks import Stacks

_PROGRAM = "push_swap"


def find_sorted_sequence(numbers: Sequence[int]) -> tuple[int, int]:
    """Locate the longest strictly ascending run.

    Returns ``(start, length)`` where ``length`` is the number of ascending
    steps in the run and ``start`` is the 0-based index of its second
    element. The first of several equally long runs wins; ``(0, 0)`` means
    no two neighbours ascend.
    """
    length = 0
    end = 0
    index = 0
    count = len(numbers)
    while index < count:
        run_end = index
        while run_end + 1 < count and numbers[run_end] < numbers[run_end + 1]:
            run_end += 1
        steps = run_end - index
        if steps > length:
            length = steps
            end = run_end + 1
        index = run_end + 1
    start = end - length if end else 0
    return start, length


class Solver:
    """Sorts stack a with the help of stack b, recording every command."""

    def __init__(self, numbers: Iterable[int]) -> None:
        self.stacks = Stacks(numbers)
        self.commands: list[str] = []
        self.is_first = 0

    @property
    def a(self) -> list[int]:
        return self.stacks.a

    @property
    def b(self) -> list[int]:
        return self.stacks.b

    @property
    def a_len(self) -> int:
        return len(self.stacks.a)

    @property
    def b_len(self) -> int:
        return len(self.stacks.b)

    def emit(self, command: str) -> None:
        """Apply ``command`` to the stacks and record it."""
        self.stacks.apply(command)
        self.commands.append(command)

    def sort_two(self) -> None:
        """Order the two elements of a."""
        if self.a[0] > self.a[1]:
            self.emit("sa")

    def sort_three(self) -> None:
        """Order the three elements of a."""
        first, second, third = self.a[:3]
        if first > second and second < third and first < third:
            self.emit("sa")
        elif third < second < first:
            self.emit("sa")
            self.emit("rra")
        elif first > second and second < third and third < first:
            self.emit("ra")
        elif first < second and first < third and second > third:
            self.emit("sa")
            self.emit("ra")
        elif first < second and first > third and second > third:
            self.emit("rra")

    def throw_without_sequence(self) -> None:
        """Push everything but three elements of a onto b."""
        while self.a_len > 3:
            self.emit("pb")

    def throw_sequence(self, start: int, length: int) -> None:
        """Push a onto b, rotating the ascending run at ``start`` out of the way."""
        len_a = self.a_len
        i = 0
        while i <= len_a:
            if i == start:
                for _ in range(length):
                    self.emit("ra")
                i += length
            self.emit("pb")
            i += 1

    def rotate(self, n_item: int, len_stack: int, which: str) -> None:
        """Bring position ``n_item`` of one stack to its top.

        When ``which`` is ``"a"`` and b is not empty, the top of b is then
        pushed onto a.
        """
        if which not in ("a", "b"):
            raise ValueError(f"unknown stack: {which!r}")
        if n_item <= len_stack // 2:
            for _ in range(max(n_item - 1, 0)):
                self.emit("r" + which)
        elif self.is_first != 1 and len_stack > 1:
            for _ in range(max(len_stack - n_item + 1, 0)):
                self.emit("rr" + which)
        if self.b and which == "a":
            self.emit("pa")

    def rotate_double(self, num_a: int, num_b: int) -> tuple[int, int]:
        """Rotate both stacks together as far as they agree.

        Returns the positions still to be brought up in a and b.
        """
        a_len, b_len = self.a_len, self.b_len
        middle_a, middle_b = a_len // 2, b_len // 2
        if num_b <= middle_b and num_a <= middle_a:
            while num_b > 1 and num_a > 1:
                self.emit("rr")
                num_a -= 1
                num_b -= 1
        elif num_b >= middle_b and num_a >= middle_a:
            while middle_a < num_a < a_len and middle_b < num_b <= b_len:
                self.emit("rrr")
                num_a += 1
                num_b += 1
        return num_a, num_b

    def move_common(self, num_a: int, num_b: int) -> None:
        """Bring the chosen places of both stacks up, then push b onto a."""
        if need_double(self, num_a, num_b):
            num_a, num_b = self.rotate_double(num_a, num_b)
        self.rotate(num_b, self.b_len, "b")
        self.rotate(num_a, self.a_len, "a")

    def throw_best(self) -> None:
        """Move the cheapest element of b into its place in a."""
        limit = self.a_len + self.b_len
        position_a, position_b = 0, 1
        for candidate in evaluate_candidates(self):
            if candidate.cost < limit:
                limit = candidate.cost
                position_a, position_b = candidate.position_a, candidate.position_b
        self.move_common(position_a, position_b)

    def final_rotates(self, num_item: int, a_len: int) -> None:
        """Rotate a so that position ``num_item`` comes to the top."""
        middle = (a_len + 1) // 2
        if num_item <= middle:
            for _ in range(max(num_item - 1, 0)):
                self.emit("ra")
        elif self.is_first != 1 and a_len > 1:
            for _ in range(max(a_len - num_item + 1, 0)):
                self.emit("rra")

    def eliminate_gap(self) -> None:
        """Rotate a rotated ascending a until its smallest element is on top."""
        if not has_gap(self.a):
            return
        position = 1
        for current, following in zip(self.a, self.a[1:]):
            position += 1
            if current > following:
                break
        self.final_rotates(position, self.a_len)

    def solve(self) -> list[str]:
        """Sort the stacks and return every command emitted."""
        start, length = find_sorted_sequence(self.a)
        if length > 3 and not self.stacks.is_done():
            self.throw_sequence(start, length)
        elif not self.stacks.is_done():
            self.throw_without_sequence()
        while not self.stacks.is_done():
            if self.a_len == 2:
                self.sort_two()
            elif self.a_len == 3:
                self.sort_three()
            if self.b_len > 0:
                self.throw_best()
            if self.b_len == 0:
                self.eliminate_gap()
        return self.commands


def solve(numbers: Iterable[int]) -> list[str]:
    """Return the commands that sort ``numbers``."""
    return Solver(numbers).solve()


def push_swap_usage() -> str:
    """The usage text of the sorting command."""
    return (
        f"Usage: ./{_PROGRAM} [options] <args>\n"
        "options:\n"
        "\t -f [file_name]  write instructions to file\n\n "
        "Example:\n"
        f"\t./{_PROGRAM} <args>\n"
        f"\t./{_PROGRAM} -f [file_name] <args>\n"
    )


def _write_file(path: str, text: str) -> None:
    descriptor = os.open(path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o600)
    with os.fdopen(descriptor, "w", encoding="ascii") as out:
        out.write(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the commands that sort the numbers given as arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stdout.write(push_swap_usage())
        return 1
    try:
        numbers, flags = parse_arguments([_PROGRAM, *args])
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    text = "".join(f"{command}\n" for command in solve(numbers))
    if flags.file_mode:
        try:
            if flags.file_name is None:
                raise OSError("no file name")
            _write_file(flags.file_name, text)
        except OSError:
            sys.stderr.write("Open/create file error\n")
            return 1
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())