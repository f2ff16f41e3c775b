"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections.abc import Iterable

_COMMANDS = frozenset(
    {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}
)


class InvalidCommandError(ValueError):
    """Raised for a command name that is not one of the eleven operations."""

    def __init__(self, command: str) -> None:
        super().__init__(f"unknown command: {command!r}")
        self.command = command


def _swap_top(stack: list[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: list[int]) -> None:
    if len(stack) >= 2:
        stack.append(stack.pop(0))


def _reverse_rotate(stack: list[int]) -> None:
    if len(stack) >= 2:
        stack.insert(0, stack.pop())


def _push(source: list[int], target: list[int]) -> None:
    if source:
        target.insert(0, source.pop(0))


class Stacks:
    """Stacks ``a`` and ``b``; index 0 is the top of each.

    ``count`` is the number of commands applied through :meth:`apply`.
    """

    def __init__(self, numbers: Iterable[int]) -> None:
        self.a: list[int] = list(numbers)
        self.b: list[int] = []
        self.count = 0

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    def sa(self) -> None:
        """Swap the two top elements of a."""
        _swap_top(self.a)

    def sb(self) -> None:
        """Swap the two top elements of b."""
        _swap_top(self.b)

    def ss(self) -> None:
        """Do sa and sb."""
        self.sa()
        self.sb()

    def pa(self) -> None:
        """Move the top of b onto a."""
        _push(self.b, self.a)

    def pb(self) -> None:
        """Move the top of a onto b."""
        _push(self.a, self.b)

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        _rotate(self.a)

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        _rotate(self.b)

    def rr(self) -> None:
        """Do ra and rb."""
        self.ra()
        self.rb()

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        _reverse_rotate(self.a)

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        _reverse_rotate(self.b)

    def rrr(self) -> None:
        """Do rra and rrb."""
        self.rra()
        self.rrb()

    def apply(self, command: str) -> None:
        """Run the operation named by ``command`` and count it."""
        if command not in _COMMANDS:
            raise InvalidCommandError(command)
        self.count += 1
        getattr(self, command)()

    def a_is_sorted(self) -> bool:
        """True when a is non-empty and in ascending order from the top."""
        return bool(self.a) and all(x <= y for x, y in zip(self.a, self.a[1:]))

    def is_done(self) -> bool:
        """True when a is sorted and b is empty."""
        return self.a_is_sorted() and not self.b