"""Command line: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import InputError, parse_arguments
from .sorting import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Print one move per line, or ``Error`` on invalid input; always return 0."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stdout.write("Error\n")
        return 0
    moves = solve(values)
    if moves:
        sys.stdout.write("\n".join(moves) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())