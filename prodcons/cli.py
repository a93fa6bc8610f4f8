"""Command-line entry point: prodcons <num_producers> <num_consumers> <buffer_size>."""

from __future__ import annotations

import re
import sys

from prodcons.simulation import run_simulation

_INT_MAX = 2**31 - 1
_INTEGER = re.compile(r"\s*[+-]?\d+")


def parse_positive_int(text: str) -> int:
    """Parse a strictly positive decimal int; raise ValueError otherwise."""
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    value = int(text)
    if value <= 0 or value > _INT_MAX:
        raise ValueError(f"out of range: {text!r}")
    return value


def main(argv: list[str] | None = None) -> int:
    """Run the simulation from command-line arguments; return the exit status."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 3:
        print(
            "Usage: prodcons <num_producers> <num_consumers> <buffer_size>",
            file=sys.stderr,
        )
        return 1
    try:
        producers, consumers, buffer_size = (parse_positive_int(a) for a in args)
    except ValueError:
        print("All arguments must be positive integers greater than zero.", file=sys.stderr)
        return 1

    result = run_simulation(producers, consumers, buffer_size, out=sys.stdout)
    if not result.ok():
        print("Warning: mismatch between produced and consumed item counts.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())