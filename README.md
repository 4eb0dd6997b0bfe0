# pushswap

pushswap sorts a list of distinct integers using two stacks, `a` and `b`, and a small set of operations. It prints the operations that sort stack `a` in ascending order, with the smallest on top. It tries to use few operations.

## The operations

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | Swap the top two elements of `a`, of `b`, or of both. |
| `pa`, `pb` | Move the top of `b` onto `a`, or the top of `a` onto `b`. |
| `ra`, `rb`, `rr` | Rotate up: the top element becomes the bottom one. |
| `rra`, `rrb`, `rrr` | Rotate down: the bottom element becomes the top one. |

An operation that has nothing to act on, such as `pa` with an empty `b`, leaves the stacks unchanged. It is still recorded and printed.

## Command line

After installation the `push-swap` command is available:

```console
$ push-swap 2 1 3
sa
$ push-swap "3 2 1"
ra
sa
```

The numbers can be separate arguments or one space-separated string. The first number is the top of the stack. The command prints one operation per line on standard output. If the input is already sorted, it prints nothing.

The command writes `Error` to standard error and exits with status 1 if:

* there are no arguments, or the only argument is empty;
* an argument is not a plain decimal integer: an optional leading `-` followed by ASCII digits only. A `+` sign, spaces inside a separate argument, and a leading zero before another digit (as in `01`) are rejected;
* a number is outside the 32-bit signed range;
* a number appears more than once.

A lone `-` is read as 0.

## Library use

```python
from pushswap.sorter import solve
from pushswap.parsing import parse_arguments, InputError
from pushswap.stacks import Stacks, is_sorted

moves = solve([3, 2, 1])        # ["ra", "sa"]

values = parse_arguments(["4", "-7", "12"])   # [4, -7, 12]
```

* `pushswap.sorter.solve(values)` returns the list of moves and prints nothing. It raises `ValueError` if the values are not distinct.
* `pushswap.parsing.parse_int(text)` and `parse_arguments(args)` apply the command-line rules. They raise `InputError`, a subclass of `ValueError`, on bad input.
* `pushswap.stacks.Stacks(values, out=None)` holds the stacks as deques `a` and `b`, each with its top at index 0. It has one method per operation: `sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`, `rr`, `rra`, `rrb` and `rrr`. Each call applies the operation, appends its name to `moves`, and writes the name and a newline to `out`, or to standard output if `out` is not given.
* `pushswap.stacks.is_sorted(values)` checks for non-decreasing order.
* `pushswap.sorter.sort_three`, `sort_all` and `sort_stacks` run the sorting strategy on a `Stacks` object. `sort_stacks` always swaps a two-element stack, so check `is_sorted` first.
* `pushswap.cli.main(argv=None)` is the command itself. It returns the exit status.

## Helpers

The `pushswap.libft` sub-package holds general helpers:

* `chars`: ASCII character classes and case conversion.
* `memory`: operations on byte buffers and NUL-terminated byte strings.
* `strings`: string searching, slicing, trimming, splitting and mapping.
* `conversions`: `atoi` and `itoa`.
* `fdio`: writing characters, strings and numbers to file descriptors.
* `lists`: the `LinkedList` and `Node` classes.
* `lines`: `LineReader`, which reads a file descriptor one line at a time.

## What it does not do

The package finds and prints moves. It has no command that reads a list of moves and checks whether they sort a given input.

## Development

```console
$ pip install -e ".[test]"
$ pytest
```