"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.algorithm import sort_operations
from pushswap.parsing import InputError, parse_arguments


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the numbers, write one operation per line and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        numbers = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    operations = sort_operations(numbers)
    sys.stdout.write("".join(f"{name}\n" for name in operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())