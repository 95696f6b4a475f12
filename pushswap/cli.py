"""Command that prints the operations sorting the numbers given as arguments."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.output import put_endl
from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import sort_operations


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one operation per line; report ``Error`` on invalid input."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except InputError:
        put_endl("Error", sys.stderr)
        return 1
    for operation in sort_operations(values):
        put_endl(str(operation), sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())