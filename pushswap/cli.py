"""Command that prints the operations sorting the numbers it is given."""

from __future__ import annotations

import sys
from typing import Sequence

from .parsing import InputError, parse_arguments
from .solver import solve


def _fail() -> int:
    sys.stderr.write("Error\n")
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line that sorts the given numbers.

    Returns the exit status: 0 on success, 1 after printing ``Error``
    to standard error for bad, missing or duplicate numbers.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        numbers = parse_arguments(args)
        if not numbers:
            return _fail()
        operations = solve(numbers)
    except InputError:
        return _fail()
    if operations:
        sys.stdout.write("".join(f"{operation}\n" for operation in operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())