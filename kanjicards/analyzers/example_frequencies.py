#!/usr/bin/env python3
"""
example_frequencies.py

Report how common the chosen example words are, bucketed by order of
magnitude of their frequency rank.

Usage:
    python -m kanjicards.analyzers.example_frequencies --input kanji.txt
    python -m kanjicards.analyzers.example_frequencies --grade 1
    python -m kanjicards.analyzers.example_frequencies --jlpt 4
"""

import sys
from typing import Iterable

from ..adapters.kanjidic import KanjiRecord

# (lower bound, label), largest first
FREQUENCY_BUCKETS = (
    (1_000_000, "1,000,000+"),
    (100_000, "100,000+"),
    (10_000, "10,000+"),
    (1_000, "1,000+"),
    (100, "100+"),
    (10, "10+"),
    (1, "1+"),
)


def bucket_label(rank: int) -> str:
    """Label of the bucket a rank falls in; ranks below 1 count as 1+."""
    for lower, label in FREQUENCY_BUCKETS:
        if rank >= lower:
            return label
    return FREQUENCY_BUCKETS[-1][1]


def count_example_frequencies(records: Iterable[KanjiRecord]) -> dict[str, int]:
    """
    Count the examples of all records per frequency bucket.

    Returns:
        Dict mapping bucket label -> count, largest bucket first
    """
    counts = {label: 0 for _, label in FREQUENCY_BUCKETS}
    for record in records:
        for example in record.examples:
            counts[bucket_label(example.frequency_rank)] += 1
    return counts


def print_example_frequencies(counts: dict[str, int]) -> None:
    for label, count in counts.items():
        print(f"   - {label:>10} = {count}")
    print(f"   - {'Total':>10} = {sum(counts.values())}")


def main(argv: list[str] | None = None) -> int:
    # deck_generator imports this module at load time
    from ..generators.deck_generator import SOURCE_ERRORS, build_parser, build_records

    parser = build_parser(
        description="Report frequency ranks of the example words chosen for a kanji set"
    )
    args = parser.parse_args(argv)

    try:
        records = build_records(args)
    except SOURCE_ERRORS as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\nExample frequencies:")
    print_example_frequencies(count_example_frequencies(records))
    return 0


if __name__ == "__main__":
    sys.exit(main())
