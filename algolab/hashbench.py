"""Measure collisions and lookup probes of the hash tables on random words."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from typing import Any, Callable, Protocol, Sequence

from algolab.hashfuncs import random_words
from algolab.hashtables import ChainHash, CustomProbing, DoubleHash

_MAX_STEP = 20
_OPEN_TABLE_SIZE = 20011


class _Table(Protocol):
    collisions: int
    probes: int

    def insert(self, key: str, value: Any) -> None: ...

    def search(self, key: str) -> Any: ...

    def reset_probes(self) -> None: ...


@dataclass(frozen=True)
class RoundResult:
    """Outcome of filling one table and running lookups on it."""

    collisions: int
    mean_probes: float
    mismatches: int


def run_round(
    table: _Table, words: Sequence[str], lookups: int, rng: random.Random
) -> RoundResult:
    """Insert ``words`` numbered from 1, then look up words at random forward steps."""
    if not words:
        raise ValueError("at least one word is needed")
    for value, word in enumerate(words, start=1):
        table.insert(word, value)

    position = rng.randrange(_MAX_STEP) % len(words)
    mismatches = 0
    for _ in range(lookups):
        if table.search(words[position]) != position + 1:
            mismatches += 1
        position = (position + rng.randrange(_MAX_STEP)) % len(words)

    mean = table.probes / lookups if lookups else 0.0
    result = RoundResult(table.collisions, mean, mismatches)
    table.reset_probes()
    return result


def run_benchmark(
    table_factory: Callable[[], _Table],
    rounds: int,
    word_count: int,
    word_len: int,
    lookups: int,
    rng: random.Random,
) -> list[RoundResult]:
    """Run ``rounds`` rounds, each on a fresh table and a fresh word list."""
    return [
        run_round(table_factory(), random_words(word_count, word_len, rng), lookups, rng)
        for _ in range(rounds)
    ]


def _factory(method: str, size: int | None, word_count: int, c1: int, c2: int):
    if method == "chain":
        return lambda: ChainHash(size or word_count)
    if method == "double":
        return lambda: DoubleHash(size or _OPEN_TABLE_SIZE)
    return lambda: CustomProbing(size or _OPEN_TABLE_SIZE, c1, c2)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--method", choices=["chain", "double", "custom"], default="custom")
    parser.add_argument("--rounds", type=int, default=20)
    parser.add_argument("--words", type=int, default=10000)
    parser.add_argument("--length", type=int, default=7)
    parser.add_argument("--lookups", type=int, default=1000)
    parser.add_argument("--size", type=int, default=None)
    parser.add_argument("--c1", type=int, default=2)
    parser.add_argument("--c2", type=int, default=4)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    if args.rounds <= 0:
        parser.error("--rounds must be positive")

    factory = _factory(args.method, args.size, args.words, args.c1, args.c2)
    results = run_benchmark(
        factory, args.rounds, args.words, args.length, args.lookups, random.Random(args.seed)
    )
    for result in results:
        if result.mismatches:
            print(f"{result.mismatches} lookups returned a wrong value", file=sys.stderr)
        print(f"{result.collisions}\t{result.mean_probes:g}")

    mean_collisions = sum(r.collisions for r in results) / len(results)
    mean_probes = sum(r.mean_probes for r in results) / len(results)
    print()
    print(f"{mean_collisions:g}\t{mean_probes:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())