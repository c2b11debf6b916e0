"""Count the ways a set of dice can roll a given total."""

from __future__ import annotations

import argparse
import sys
from itertools import accumulate
from typing import Sequence

MODULUS = 1_000_000_007


def count_dice_sums(faces: Sequence[int], total: int) -> int:
    """Number of rolls summing to ``total``, modulo 1000000007.

    Die ``i`` shows a value from 1 to ``faces[i]``.
    """
    if not faces:
        raise ValueError("at least one die is needed")
    if any(face < 1 for face in faces):
        raise ValueError("every die needs at least one face")
    if total < 0:
        return 0
    ways = [1] + [0] * total
    for face in faces:
        prefix = list(accumulate(ways, initial=0))
        ways = [
            (prefix[s] - prefix[max(0, s - face)]) % MODULUS for s in range(total + 1)
        ]
    return ways[total]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Read 'dice total' and the face counts; print the number of rolls."
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
        parser.error("expected the number of dice and the total")
    dice, total = numbers[0], numbers[1]
    faces = numbers[2 : 2 + dice]
    if len(faces) < dice:
        parser.error(f"expected {dice} face counts, got {len(faces)}")
    try:
        print(count_dice_sums(faces, total))
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())