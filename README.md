# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small
fixed set of instructions, and verify that an instruction list really sorts
a given input.

## Instructions

| Command | Effect |
|---------|--------|
| `sa` / `sb` / `ss` | swap the top two elements of `a`, `b`, or both |
| `pa` / `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra` / `rb` / `rr` | rotate `a`, `b`, or both upwards (top becomes bottom) |
| `rra` / `rrb` / `rrr` | rotate `a`, `b`, or both downwards (bottom becomes top) |

A list is sorted when `a` holds every number in ascending order from the top
and `b` is empty.

## Installation

```
pip install .
```

## Command line

Produce an instruction list, one command per line:

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
push-swap -f moves.txt 3 2 5 1 4
```

With `-f FILE` the instructions are written to `FILE` (created or
truncated) instead of standard output.

Check an instruction list, read one command per line from standard input:

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

The checker prints `OK` and exits with status 0 when the instructions leave
the stacks sorted, and prints `KO` and exits with status 1 otherwise. If the
commands leave stack `a` empty, no verdict is printed. Options, each given
as its own argument before the numbers:

- `-v` print the command and both stacks after every command
- `-c` after `OK`, print the number of commands executed
- `-f FILE` read the commands from `FILE` instead of standard input

For example `push-swap-checker -v -c 3 2 1` or
`push-swap-checker -f moves.txt 3 2 5 1 4`. Options are looked for only
among the first three arguments, and each may be given at most once.

Numbers may be given as separate arguments or as one argument separated by
spaces. Invalid input (non-integers, values outside the 32-bit signed range,
duplicates, bad options, unknown commands) produces `Error` on standard
error and exit status 1. A file that cannot be opened produces
`Open/create file error`. Run without arguments, either command prints its
usage and exits with status 1.

## Library use

```python
from pushswap.solver import solve
from pushswap.checker import run_checker

commands = solve([3, 2, 5, 1, 4])
result = run_checker([3, 2, 5, 1, 4], commands)
assert result.ok and result.count == len(commands)
```

- `pushswap.stacks.Stacks` holds the two stacks and offers the individual
  operations (`sa`, `pb`, `rra`, ...), `apply(command)` for running a
  command by name (raising `InvalidCommandError` for an unknown one),
  `a_is_sorted()` and `is_done()`.
- `pushswap.solver.Solver` is the sorter behind `solve`; it records every
  command it emits in `commands`.
- `pushswap.checker.run_checker` replays commands and returns a
  `CheckResult` with `ok`, `count`, the final stacks and the printed
  `verdict`; `read_commands` turns a text stream into commands.
- `pushswap.parsing.parse_arguments` turns command-line arguments into the
  numbers and a `Flags` record, raising `InputError` on invalid input.
- `pushswap.analysis` holds the cost estimates the sorter uses to pick the
  next element to move.