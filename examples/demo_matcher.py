"""
Demo script for the DNA matcher.

Shows the skip table of a pattern, a search with overlapping matches, a
search over several FASTA-style records and a timing comparison against
brute-force search on a generated sequence.
"""

import sys
import os
import time

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from dna_matcher import (
    HorspoolSearcher,
    build_skip_table,
    generate_sequence,
    naive_search,
    search,
)
from dna_io.parsers import format_match_report, format_match_reports


def example_1_skip_table():
    """Example 1: Bad-character skip table."""
    print("=" * 80)
    print("Example 1: Skip table for GCAGAGAG")
    print("=" * 80)

    table = build_skip_table("GCAGAGAG")
    for base, distance in table.as_dict().items():
        print(f"  {base}: skip {distance}")
    print()


def example_2_overlapping():
    """Example 2: Overlapping matches are all reported."""
    print("=" * 80)
    print("Example 2: Overlapping matches")
    print("=" * 80)

    pattern = "AA"
    sequence = "AAAA"
    matched, positions = search(pattern, sequence, build_skip_table(pattern))
    print(f"  {pattern} in {sequence}: matched={matched}, positions={positions}\n")


def example_3_records():
    """Example 3: One pattern, several sequences."""
    print("=" * 80)
    print("Example 3: Searching several records")
    print("=" * 80)

    searcher = HorspoolSearcher("TATA")
    results = searcher.search_many({
        "promoter_1": "GGCTATAAAAGGCGCTATATAAGC",
        "promoter_2": "GGCCAATCGGCGCGCC",
    })
    print(format_match_reports(results))
    print()


def example_4_timing(length: int = 200_000):
    """Example 4: Horspool vs brute force on a random sequence."""
    print("=" * 80)
    print(f"Example 4: Timing on {length:,} random bases")
    print("=" * 80)

    sequence = generate_sequence(length, seed=42)
    searcher = HorspoolSearcher("GATTACAGATTACA")

    start = time.time()
    result = searcher.search(sequence)
    horspool_time = time.time() - start

    start = time.time()
    expected = naive_search(searcher.pattern, sequence)
    naive_time = time.time() - start

    print(f"  {format_match_report(result)}")
    print(f"  Horspool:    {horspool_time:.3f}s")
    print(f"  Brute force: {naive_time:.3f}s")
    print(f"  Same result: {list(result.positions) == expected}")
    print()


if __name__ == "__main__":
    example_1_skip_table()
    example_2_overlapping()
    example_3_records()
    example_4_timing()
