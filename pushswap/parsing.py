"""Command-line argument parsing and validation of the numbers to sort."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

# Characters 8 to 13 and the space, which the integer readers skip.
_LEADING_SPACE = frozenset("\b\t\n\v\f\r ")


class InputError(ValueError):
    """Raised for invalid arguments: bad flags, non-integers, duplicates."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


@dataclass
class Flags:
    """Options found among the first arguments.

    ``separator`` is the index of the last option argument; the numbers
    start right after it.
    """

    debug_mode: int = 0
    count_mode: int = 0
    file_mode: int = 0
    file_name: str | None = None
    separator: int = 0

    def _register(self, flag: str, argv: Sequence[str], index: int) -> None:
        if flag == "v":
            self.debug_mode += 1
            self.separator = index if self.separator == 0 else self.separator + 1
        elif flag == "c":
            self.count_mode += 1
            self.separator = index if self.separator == 0 else self.separator + 1
        elif flag == "f":
            self.file_mode += 1
            self.separator = index + 1
            self.file_name = argv[index + 1] if index + 1 < len(argv) else None


def _wrap(value: int, bits: int) -> int:
    modulus = 1 << bits
    value &= modulus - 1
    return value - modulus if value >= modulus >> 1 else value


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _skip_space(text: str) -> int:
    index = 0
    while index < len(text) and text[index] in _LEADING_SPACE:
        index += 1
    return index


def parse_flags(argv: Sequence[str]) -> Flags:
    """Read the -v, -c and -f options from argv[1:4]."""
    flags = Flags()
    for index, arg in enumerate(argv[1:4], start=1):
        if not arg.startswith("-"):
            continue
        if len(arg) == 1:
            raise InputError()
        for ch in arg[1:4]:
            if ch in "vcf":
                flags._register(ch, argv, index)
            elif not _is_digit(ch) and ch not in " -":
                raise InputError()
    if max(flags.debug_mode, flags.count_mode, flags.file_mode) > 1:
        raise InputError()
    return flags


def is_correct_input(tokens: Sequence[str]) -> bool:
    """True when every token is digits with an optional leading sign."""
    return all(
        _is_digit(ch) or (position == 0 and ch in "+-")
        for token in tokens
        for position, ch in enumerate(token)
    )


def atoi(text: str) -> int:
    """Read a leading integer the way the C library does, as a 32-bit value."""
    index = _skip_space(text)
    sign = 1
    if index < len(text) and text[index] in "+-":
        sign = -1 if text[index] == "-" else 1
        index += 1
    result = 0
    for ch in text[index:]:
        if not _is_digit(ch):
            break
        result = _wrap(result * 10 + ord(ch) - ord("0"), 64)
        if result < 0:
            return 0 if sign == -1 else -1
    return _wrap(result * sign, 32)


def atoi_for_overflow(text: str) -> int:
    """Read an integer in 32-bit arithmetic, flagging overflow.

    Returns -1 for a positive and 0 for a negative number whose digits
    no longer fit when shifted by one decimal place.
    """
    index = _skip_space(text)
    sign = 1
    if index < len(text) and text[index] in "+-":
        sign = -1 if text[index] == "-" else 1
        index += 1
    result = 0
    for ch in text[index:]:
        if ch == "\0" or ord(ch) > 127:
            break
        if _trunc_div(_wrap(result * 10, 32), 10) != result:
            return -1 if sign == 1 else 0
        result = _wrap(result * 10 + ord(ch) - ord("0"), 32)
    return _wrap(result * sign, 32)


def is_int(tokens: Sequence[str]) -> bool:
    """True when no token of ten or more characters overflows an int."""
    for token in tokens:
        if len(token) < 10:
            continue
        value = atoi_for_overflow(token)
        if token.startswith("-"):
            if value == 0 or token == "-2147483649":
                return False
        elif value < 0:
            return False
    return True


def needs_splitting(argv: Sequence[str], flags: Flags) -> bool:
    """True when the first number argument holds several space-separated numbers."""
    return " " in argv[flags.separator + 1]


def check_duplicates(numbers: Sequence[int]) -> None:
    """Raise InputError if any number appears twice."""
    if len(set(numbers)) != len(numbers):
        raise InputError()


def parse_arguments(argv: Sequence[str]) -> tuple[list[int], Flags]:
    """Parse argv (program name first) into the numbers and the options."""
    flags = parse_flags(argv)
    if len(argv) <= flags.separator + 1:
        raise InputError()
    rest = list(argv[flags.separator + 1 :])
    if len(rest) == 1 and needs_splitting(argv, flags):
        tokens = [piece for piece in rest[0].split(" ") if piece]
    else:
        tokens = rest
    if not tokens or not (is_correct_input(tokens) and is_int(tokens)):
        raise InputError()
    numbers = [atoi(token) for token in tokens]
    check_duplicates(numbers)
    return numbers, flags