"""Command that checks whether a list of operations sorts the numbers."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from .parsing import InputError, has_duplicates, parse_arguments
from .stack import Operation, Stacks

_TWO_LETTER = {
    "sa": Operation.SA,
    "sb": Operation.SB,
    "pa": Operation.PA,
    "pb": Operation.PB,
    "ra": Operation.RA,
    "rb": Operation.RB,
    "rr": Operation.RR,
    "ss": Operation.SS,
}

_REVERSE = {
    "a": Operation.RRA,
    "b": Operation.RRB,
    "r": Operation.RRR,
}


def parse_instruction(line: str) -> Operation | None:
    """Read one instruction line, newline included.

    Returns None for a line of the form ``rr?`` whose third letter names
    no stack; such a line is accepted and does nothing. Raises
    InputError for anything else that is not an instruction.
    """
    if line[:2] == "rr" and line[3:4] == "\n":
        return _REVERSE.get(line[2])
    if line[2:3] == "\n" and line[:2] in _TWO_LETTER:
        return _TWO_LETTER[line[:2]]
    raise InputError(f"unknown instruction: {line!r}")


def check(numbers: Iterable[int], lines: Iterable[str]) -> bool:
    """Run the instruction lines on the numbers and report whether they
    end up sorted with stack ``b`` empty.

    Reading stops at the end of the lines or at the first empty line.
    """
    stacks = Stacks(numbers)
    for line in lines:
        if not line or line == "\n":
            break
        operation = parse_instruction(line)
        if operation is not None:
            stacks.apply(operation)
    return stacks.is_solved()


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print ``OK`` or ``KO``.

    Returns 0 after a verdict and 1 after printing ``Error``.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        numbers = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    if not numbers or has_duplicates(numbers):
        sys.stdout.write("Error\n")
        return 1
    try:
        solved = check(numbers, sys.stdin)
    except InputError:
        sys.stdout.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if solved else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())