# pushswap

Sort a list of integers using two stacks, `a` and `b`, and nothing but a
small set of instructions, then verify that a given list of instructions
really does sort the numbers.

## The instructions

| Instruction | Effect |
|-------------|--------|
| `sa` / `sb` | swap the two top elements of `a` / `b` |
| `ss`        | `sa` and `sb` together |
| `pa` / `pb` | move the top of `b` onto `a` / the top of `a` onto `b` |
| `ra` / `rb` | rotate `a` / `b` up: the top element goes to the bottom |
| `rr`        | `ra` and `rb` together |
| `rra` / `rrb` | rotate `a` / `b` down: the bottom element comes to the top |
| `rrr`       | `rra` and `rrb` together |

The numbers start in `a`, with the first number on top. They are sorted when
`a` holds them in ascending order from the top and `b` is empty.

`ss`, `rr` and `rrr` only act when both stacks hold at least two numbers; an
instruction that cannot act does nothing.

## Installing

```
pip install .
```

## Command line

Print the instructions that sort a list of numbers, one per line:

```
push-swap 3 2 5 1 4
```

The numbers may also be given as one quoted, space-separated argument:

```
push-swap "3 2 5 1 4"
```

Nothing is printed for a list that is already sorted. No numbers at all,
anything that is not an integer in the 32-bit signed range, or a duplicate,
makes the command print `Error` to standard error and exit with status 1.

Check a sequence of instructions, one per line on standard input:

```
push-swap 3 2 5 1 4 | pushswap-checker 3 2 5 1 4
```

The checker prints `OK` when the instructions leave `a` sorted and `b`
empty, and `KO` otherwise. Reading stops at the end of input or at the first
empty line. Bad numbers make it print `Error` to standard error; missing or
duplicate numbers and unknown instructions make it print `Error` to standard
output. In each error case it exits with status 1.

## From Python

```python
from pushswap.solver import solve
from pushswap.stack import Stacks
from pushswap.checker import check

numbers = [3, 2, 5, 1, 4]
operations = solve(numbers)          # list of pushswap.stack.Operation

stacks = Stacks(numbers)
stacks.run(operations)
assert stacks.is_solved()

print(check(numbers, [f"{op}\n" for op in operations]))  # True
```

- `pushswap.stack.Stacks` holds stacks `a` and `b` as deques (top on the
  left), performs operations with `apply` and `run`, and records every
  operation that changed the stacks in `history`.
- `pushswap.solver.solve` returns the operations that sort a list of
  distinct numbers and raises `pushswap.parsing.InputError` on duplicates;
  `sort_stacks` sorts a `Stacks` in place.
- `pushswap.checker.parse_instruction` reads one instruction line and
  `check` runs instruction lines against a list of numbers.
- `pushswap.parsing.parse_arguments` turns command-line style arguments into
  a list of integers and raises `pushswap.parsing.InputError` on bad input.

## Running the tests

```
pip install ".[test]"
pytest
```