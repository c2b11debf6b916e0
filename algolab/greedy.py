"""Minimum total cost of buying plants when each purchase raises the buyer's price."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Sequence


def min_plant_cost(costs: Iterable[int], friends: int) -> int:
    """Total cost when friends take turns buying the dearest plant left.

    A friend who has already bought ``k`` plants pays ``(k + 1)`` times the price.
    """
    if friends <= 0:
        raise ValueError("there must be at least one friend")
    ordered = sorted(costs, reverse=True)
    return sum((rank // friends + 1) * cost for rank, cost in enumerate(ordered))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Read 'plants friends' and the plant costs; print the minimum total cost."
    )
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)

    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()

    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        parser.error(str(exc))
    if len(numbers) < 2:
        parser.error("expected the number of plants and of friends")
    plants, friends = numbers[0], numbers[1]
    costs = numbers[2 : 2 + plants]
    if len(costs) < plants:
        parser.error(f"expected {plants} costs, got {len(costs)}")
    try:
        print(min_plant_cost(costs, friends))
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())