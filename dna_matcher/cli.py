#!/usr/bin/env python3
"""
Command-line interface for the DNA matcher.

Usage:
    dna-match PATTERN SEQUENCE_FILE [--format {auto,text,fasta}]
              [--output FILE] [--csv FILE] [--ignore-case]
              [--progress] [--verify] [--config JSON] [-v]

    dna-generate LENGTH [--seed N] [--output FILE] [--fasta] [--record-id ID]

Exit status is 0 when the search ran (with or without matches) and 1 on any
error: unreadable file, invalid pattern or invalid sequence.
"""

import argparse
import logging
import sys
from typing import List, Optional

from tqdm import tqdm

from dna_io.parsers import (
    format_match_reports,
    load_sequences,
    save_matches_to_csv,
    write_fasta,
    write_match_report,
)

from . import __version__
from .alphabet import validate_dna
from .config import INPUT_FORMATS, MatcherConfig
from .exceptions import MatcherError
from .horspool import HorspoolSearcher, MatchResult, naive_search
from .sequence_generator import generate_sequence

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )


class TqdmProgress:
    """Progress callback that drives a tqdm bar on stderr."""

    def __init__(self, desc: str):
        self.desc = desc
        self.bar = None

    def __call__(self, done: int, total: int) -> None:
        if self.bar is None:
            self.bar = tqdm(total=total, desc=self.desc, unit="bp",
                            unit_scale=True, file=sys.stderr, leave=False)
        self.bar.update(done - self.bar.n)
        if done >= total:
            self.close()

    def close(self) -> None:
        if self.bar is not None:
            self.bar.close()
            self.bar = None


def build_match_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dna-match",
        description="Find every occurrence of a nucleobase pattern in a DNA sequence "
                    "(Boyer-Moore-Horspool search)",
    )
    parser.add_argument("pattern", help="Pattern of A/C/G/T nucleobases to search for")
    parser.add_argument("sequence_file", help="Text or FASTA file holding the DNA sequence")
    parser.add_argument(
        "--format", dest="input_format", choices=INPUT_FORMATS, default=None,
        help="Sequence file format (default: auto)",
    )
    parser.add_argument(
        "--output", "-o", default=None,
        help="Write the match report to this file instead of stdout",
    )
    parser.add_argument(
        "--csv", dest="csv_output", default=None,
        help="Also save match positions as CSV (TSV for .tsv files)",
    )
    parser.add_argument(
        "--ignore-case", action="store_true", default=None,
        help="Upper-case pattern and sequence before validation",
    )
    parser.add_argument(
        "--progress", dest="show_progress", action="store_true", default=None,
        help="Show a progress bar while scanning",
    )
    parser.add_argument(
        "--verify", action="store_true", default=None,
        help="Cross-check the result against a brute-force search",
    )
    parser.add_argument("--config", default=None, help="JSON configuration file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run_search(pattern: str, config: MatcherConfig, sequence_file: str) -> List[MatchResult]:
    """
    Validate the inputs, search every sequence of the file and return the results.

    Raises:
        OSError: If the sequence file is missing or cannot be read
        MatcherError: If the pattern or a sequence is invalid
        ValueError: If the file cannot be parsed
    """
    logger.info("DNA matcher initializing...")

    if config.ignore_case:
        pattern = pattern.upper()

    logger.info("Checking DNA pattern...")
    validate_dna(pattern, label="pattern")
    logger.info("Pattern OK!")

    sequences = load_sequences(sequence_file, config.input_format, config.ignore_case)

    logger.info("Checking DNA sequence...")
    for seq_id, sequence in sequences:
        validate_dna(sequence, label=f"sequence '{seq_id}'")
    logger.info("Sequence OK!")

    searcher = HorspoolSearcher(pattern)
    logger.debug("Skip table: %s", searcher.table.as_dict())

    results = []
    for seq_id, sequence in sequences:
        progress = TqdmProgress(desc=seq_id) if config.show_progress else None
        try:
            result = searcher.search(sequence, sequence_id=seq_id, progress=progress)
        finally:
            if progress is not None:
                progress.close()
        logger.info("%s: %d match(es) in %d bp", seq_id, result.count, result.sequence_length)

        if config.verify:
            expected = naive_search(pattern, sequence)
            if list(result.positions) != expected:
                raise MatcherError(
                    f"Verification failed for {seq_id}: "
                    f"{len(result.positions)} vs {len(expected)} brute-force matches"
                )
            logger.info("%s: verified against brute-force search", seq_id)

        results.append(result)
    return results


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_match_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = MatcherConfig.load(args.config).override(
            input_format=args.input_format,
            ignore_case=args.ignore_case,
            show_progress=args.show_progress,
            verify=args.verify,
            output=args.output,
            csv_output=args.csv_output,
        )
        results = run_search(args.pattern, config, args.sequence_file)

        if config.output:
            write_match_report(results, config.output)
        else:
            print(format_match_reports(results))

        if config.csv_output:
            save_matches_to_csv(results, config.csv_output, sep=config.csv_separator)

    except (MatcherError, OSError, ValueError) as e:
        logger.error("Error: %s", e)
        return 1

    return 0


def build_generate_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dna-generate",
        description="Generate a random DNA sequence with equiprobable nucleobases",
    )
    parser.add_argument("length", type=int, help="Length of the sequence")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--output", "-o", default=None,
                        help="Output file (default: stdout)")
    parser.add_argument("--fasta", action="store_true",
                        help="Write FASTA instead of a bare sequence")
    parser.add_argument("--record-id", default="random_sequence",
                        help="FASTA record id (default: random_sequence)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def generate_main(argv: Optional[List[str]] = None) -> int:
    parser = build_generate_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        sequence = generate_sequence(args.length, seed=args.seed)

        if args.fasta and args.output:
            write_fasta(sequence, args.output, record_id=args.record_id,
                        description=f"length={len(sequence)}")
        elif args.fasta:
            print(f">{args.record_id} length={len(sequence)}")
            print(sequence)
        elif args.output:
            with open(args.output, 'w') as f:
                f.write(sequence + '\n')
            logger.info("Wrote %d bp to %s", len(sequence), args.output)
        else:
            print(sequence)

    except (OSError, ValueError) as e:
        logger.error("Error: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
