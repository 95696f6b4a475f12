# pushswap

This package sorts a list of distinct integers using two stacks, `a` and `b`,
and a fixed set of instructions. For a given input it prints a short sequence
of instructions that sorts it.

## Instructions

| Name  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the two top elements of `a`                |
| `sb`  | swap the two top elements of `b`                |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up: the first element becomes last   |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down: the last element becomes first |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

The first number given is the top of stack `a`. Stack `b` starts empty.

## Installing

```
pip install .
```

## Sorting from the command line

You can pass the numbers as separate arguments or as one argument separated
by spaces:

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

The command prints each instruction on its own line. Input that is already
sorted prints nothing. With no arguments the command prints nothing and
exits with status 0.

The command rejects the input in these cases:

- an argument is not an integer;
- a number is outside the 32-bit signed range;
- a number appears twice;
- a single argument holds no numbers.

A rejected input prints `Error` on standard error and exits with status 1.

## Using it from Python

```python
from pushswap.sorting import sort_operations
from pushswap.stack import Stack, apply_operation

ops = sort_operations([3, 2, 5, 1, 4])

a, b = Stack("a", [3, 2, 5, 1, 4]), Stack("b")
for op in ops:
    apply_operation(op, a, b)
assert a.is_sorted() and len(b) == 0
```

The modules are:

- `pushswap.stack` has `Stack`, with `swap`, `push_from`, `rotate`,
  `reverse_rotate`, `is_sorted` and `is_circularly_sorted`. It also has the
  `Operation` enum, the `ss`, `rr` and `rrr` functions, and
  `apply_operation`, which takes an `Operation` or its name.
- `pushswap.sorting` has `Sorter` and `sort_operations`. It also has the
  helpers `smaller_target`, `bigger_target` and `push_cost`.
- `pushswap.parsing` has `parse_arguments`, `parse_integer` and
  `check_unique`. They raise `InputError` on invalid input.
- `pushswap.debug` has `format_stack` and `describe_stack`, which give
  readable dumps of a stack.

The package also holds smaller helper modules:

- `pushswap.text`: string helpers.
- `pushswap.search`: bounded string search and copying.
- `pushswap.chars`: ASCII character tests.
- `pushswap.memory`: byte-buffer helpers.
- `pushswap.linked`: `LinkedList`.
- `pushswap.output`: stream writers.
- `pushswap.printf`: `render` and `printf`, which support `%c %s %p %d %i %u %x %X %%`.

## What it does not do

The package has no command that reads instructions from standard input and
reports whether they sort a given input. To check a sequence, replay it with
`apply_operation` as shown above.

## Running the tests

```
pip install ".[test]"
pytest
```