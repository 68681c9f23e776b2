"""Adding up integers."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

_DEFAULT_NUMBERS = (1, 2, 3, 4, 5)


def sum_numbers(*args: int) -> int:
    """Return the sum of all given integers; zero when none are given."""
    return sum(args)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sum of the given integers, or of one through five if none are given."""
    parser = argparse.ArgumentParser(description="Add up integers.")
    parser.add_argument("numbers", nargs="*", type=int, help="integers to add")
    args = parser.parse_args(argv if argv is not None else [])
    numbers = args.numbers or _DEFAULT_NUMBERS
    print(sum_numbers(*numbers))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())