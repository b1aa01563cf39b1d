import random

import pytest

from pushswap.cli import main
from pushswap.stack import Stacks


def _run(capsys, args):
    status = main(args)
    captured = capsys.readouterr()
    return status, captured.out, captured.err


def _replay(numbers, output):
    stacks = Stacks(numbers)
    stacks.run(output.split())
    return stacks


def test_two_numbers_are_swapped(capsys):
    status, out, err = _run(capsys, ["2", "1"])
    assert status == 0
    assert out == "sa\n"
    assert err == ""


def test_sorted_input_prints_nothing(capsys):
    status, out, _ = _run(capsys, ["1", "2", "3", "4"])
    assert status == 0
    assert out == ""


@pytest.mark.parametrize(
    "args",
    [["3", "2", "1"], ["5", "1", "4", "2", "3"], ["-7", "12", "0", "3", "-1", "8"]],
)
def test_output_sorts_arguments(capsys, args):
    status, out, _ = _run(capsys, args)
    assert status == 0
    assert _replay([int(arg) for arg in args], out).is_solved()


def test_single_quoted_argument(capsys):
    status, out, _ = _run(capsys, ["4 1  3 2"])
    assert status == 0
    assert _replay([4, 1, 3, 2], out).is_solved()


def test_hundred_random_numbers(capsys):
    numbers = random.Random(7).sample(range(-1000, 1000), 100)
    status, out, _ = _run(capsys, [str(n) for n in numbers])
    assert status == 0
    stacks = _replay(numbers, out)
    assert stacks.is_solved()
    assert sorted(stacks.a) == sorted(numbers)


@pytest.mark.parametrize(
    "args",
    [[], [""], ["1", "1"], ["1", "abc"], ["2147483648", "1"], ["1 2 2"]],
)
def test_errors(capsys, args):
    status, out, err = _run(capsys, args)
    assert status == 1
    assert err == "Error\n"
    assert out == ""