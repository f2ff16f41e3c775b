"""The checker: replays commands on the stacks and tells whether they sort them."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from .parsing import InputError, parse_arguments
from .stacks import InvalidCommandError, Stacks

_PROGRAM = "checker"
_OK = "\033[32;1mOK\033[0m\n"
_KO = "\033[31;1mKO\033[0m\n"
_SEPARATOR = "-" * 45


@dataclass
class CheckResult:
    """Outcome of replaying the commands.

    ``ok`` is None when stack a ended up empty, in which case no verdict
    is given. ``count`` is the number of commands applied.
    """

    ok: bool | None
    count: int
    a: list[int] = field(default_factory=list)
    b: list[int] = field(default_factory=list)

    @property
    def verdict(self) -> str:
        """The coloured line printed for this result, or an empty string."""
        if self.ok is None:
            return ""
        return _OK if self.ok else _KO


def debug_report(a: Iterable[int], b: Iterable[int], command: str) -> str:
    """The block shown after each command in debug mode."""
    stack_a = "".join(f" {number}" for number in a)
    stack_b = "".join(f" {number}" for number in b)
    return (
        f"Execute the command - {command}\n"
        f"\033[33;1;4mStack A:\033[0m{stack_a}\n"
        f"\033[34;1;4mStack B:\033[0m{stack_b}"
        f"\n{_SEPARATOR}\n"
    )


def read_commands(stream: Iterable[str]) -> Iterator[str]:
    """Yield the lines of ``stream`` without their line endings.

    A last line without a newline is still yielded; an empty line in the
    middle is yielded as an empty string.
    """
    for line in stream:
        yield line[:-1] if line.endswith("\n") else line


def _judge(a: Sequence[int], b: Sequence[int]) -> bool | None:
    if not a:
        return None
    # Only neighbouring pairs of a are examined, so a single element
    # on a is accepted whatever remains on b.
    return not any(x > y or b for x, y in zip(a, a[1:]))


def run_checker(
    numbers: Iterable[int],
    commands: Iterable[str],
    debug: bool = False,
    on_debug: Callable[[str], object] | None = None,
) -> CheckResult:
    """Apply ``commands`` to a stack built from ``numbers`` and judge the result.

    Raises InvalidCommandError at the first unknown command. In debug mode
    the report for each command is passed to ``on_debug`` (standard output
    by default) as soon as the command has run.
    """
    report = on_debug if on_debug is not None else sys.stdout.write
    stacks = Stacks(numbers)
    for command in commands:
        stacks.apply(command)
        if debug:
            report(debug_report(stacks.a, stacks.b, command))
    return CheckResult(
        ok=_judge(stacks.a, stacks.b),
        count=stacks.count,
        a=list(stacks.a),
        b=list(stacks.b),
    )


def checker_usage() -> str:
    """The usage text of the checking command."""
    return (
        f"Usage: ./{_PROGRAM} [options] <args>\n"
        "options:\n\t -v  debugger\n"
        "\t -c  number of operations performed\n"
        "\t -f [file_name]  read instructions to "
        "file (this option should be the last one)\n\n"
        "Example:\n"
        f"\t./{_PROGRAM} <args>\n"
        f"\t./{_PROGRAM} -v <args>\n"
        f"\t./{_PROGRAM} -c <args>\n"
        f"\t./{_PROGRAM} -f [file_name] <args>\n\n"
        "\tYou also can combine options\n"
        f"\t./{_PROGRAM} -vc <args>\n"
        f"\t./{_PROGRAM} -fvc [file_name] <args>\n"
    )


def _check(numbers: list[int], stream: Iterable[str], debug: bool) -> CheckResult:
    return run_checker(numbers, read_commands(stream), debug, sys.stdout.write)


def main(argv: Sequence[str] | None = None) -> int:
    """Read commands and report whether they sort the numbers given as arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stdout.write(checker_usage())
        return 1
    try:
        numbers, flags = parse_arguments([_PROGRAM, *args])
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    debug = flags.debug_mode == 1
    try:
        if flags.file_mode:
            if flags.file_name is None:
                raise OSError("no file name")
            with open(flags.file_name, encoding="utf-8") as source:
                result = _check(numbers, source, debug)
        else:
            result = _check(numbers, sys.stdin, debug)
    except InvalidCommandError:
        sys.stderr.write("Error\n")
        return 1
    except OSError:
        sys.stderr.write("Open/create file error\n")
        return 1
    sys.stdout.write(result.verdict)
    if result.ok is False:
        return 1
    if result.ok and flags.count_mode:
        sys.stdout.write(f"{result.count}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())