"""Reading the puzzle's numbers from command-line arguments."""

from __future__ import annotations

from typing import Iterable, Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_DIGITS = frozenset("0123456789")
_STRICT_SPACES = frozenset(" \t\n\f\v\r")
_LENIENT_SPACES = frozenset(" \t\n\v\f\r")
_FORBIDDEN = frozenset(
    chr(code)
    for code in (*range(58, 127), *range(33, 43), 44, 46, 47)
)


class InputError(ValueError):
    """Raised when the arguments do not describe a valid list of numbers."""


def split_words(text: str) -> list[str]:
    """Split ``text`` on single spaces, dropping empty words."""
    return [word for word in text.split(" ") if word]


def parse_number(text: str) -> int:
    """Parse a signed decimal number that must fit in 32 bits.

    Leading whitespace and one sign are allowed; everything after them
    must be a digit. An empty digit part reads as zero.
    """
    rest = text.lstrip("".join(_STRICT_SPACES))
    sign = 1
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    elif rest.startswith("+"):
        rest = rest[1:]
    if any(char not in _DIGITS for char in rest):
        raise InputError(f"not a number: {text!r}")
    value = sign * int(rest) if rest else 0
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"number out of range: {text!r}")
    return value


def lenient_atoi(text: str) -> int:
    """Read a leading number and ignore whatever follows it.

    The result wraps around like a 32-bit signed integer.
    """
    position = 0
    while position < len(text) and text[position] in _LENIENT_SPACES:
        position += 1
    negative = text[position:position + 1] == "-"
    if text[position:position + 1] in ("+", "-"):
        position += 1
    end = position
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    value = int(text[position:end]) if end > position else 0
    if negative:
        value = -value
    return (value - INT_MIN) % (1 << 32) + INT_MIN


def _well_formed(arg: str) -> bool:
    def char_at(index: int) -> str:
        return arg[index] if index < len(arg) else ""

    index = 0
    while char_at(index):
        char = char_at(index)
        if char in "+-":
            index += 1
            if char_at(index) not in _DIGITS:
                return False
        elif char in _DIGITS:
            index += 1
            following = char_at(index)
            if not following:
                break
            if following not in _DIGITS and following != " ":
                return False
        index += 1
    return True


def check_arguments(args: Sequence[str]) -> bool:
    """Check the shape of the arguments.

    Raises InputError if any argument holds a letter or other forbidden
    character; otherwise returns whether signs, digits and spaces are
    arranged acceptably.
    """
    for arg in args:
        if any(char in _FORBIDDEN for char in arg):
            raise InputError(f"forbidden character in {arg!r}")
    return all(_well_formed(arg) for arg in args)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the arguments into the numbers of stack ``a``, top first.

    A single argument is split on spaces; several arguments each hold
    one number. No arguments at all is an error.
    """
    if not args:
        raise InputError("no arguments")
    words = split_words(args[0]) if len(args) == 1 else list(args)
    return [parse_number(word) for word in words]


def has_duplicates(values: Iterable[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False