"""Command line: print the moves that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from pushswap.libft.strings import split
from pushswap.parsing import InputError, parse_arguments
from pushswap.sorter import sort_stacks
from pushswap.stacks import Stacks, is_sorted


def _error() -> int:
    sys.stderr.write("Error\n")
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort the integers given as arguments, or as one space-separated argument.

    Moves go to standard output, one per line. Invalid input prints ``Error``
    to standard error and returns 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and not args[0]):
        return _error()
    if len(args) == 1:
        args = split(args[0], " ")
    try:
        values = parse_arguments(args)
    except InputError:
        return _error()
    stacks = Stacks(values)
    if not is_sorted(stacks.a):
        sort_stacks(stacks)
    return 0