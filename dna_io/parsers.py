"""
Parsers Module for DNA Matcher

Reading sequence files and writing search results:
- Plain text sequence files (all lines joined)
- FASTA files (via Biopython SeqIO)
- Match reports ("Match found @ indexes [...]")
- CSV/TSV export of match positions (via pandas)

Usage:
    from dna_io.parsers import load_sequences, format_match_report
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import pandas as pd
from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from dna_matcher.horspool import MatchResult

logger = logging.getLogger(__name__)

FASTA_EXTENSIONS = ['.fa', '.fasta', '.fna', '.ffn', '.fas']

MATCH_COLUMNS = ['sequence_id', 'pattern', 'position', 'end']


# ============================================
# Data Classes
# ============================================

@dataclass
class FastaRecord:
    """Represents a FASTA sequence record"""
    id: str
    description: str
    sequence: str

    @property
    def length(self) -> int:
        return len(self.sequence)


# ============================================
# Sequence Readers
# ============================================

def read_sequence_file(file_path: str) -> str:
    """
    Read a plain text sequence file into a single string.

    Line terminators are dropped and the lines are joined, so a sequence
    wrapped over several lines reads back as one.

    Args:
        file_path: Path to the sequence file

    Returns:
        Sequence string

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    if not Path(file_path).exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    lines = []
    with open(file_path, 'r') as f:
        for line in f:
            lines.append(line.rstrip('\r\n'))
    return ''.join(lines)


def iter_fasta(fasta_path: str) -> Iterator[FastaRecord]:
    """
    Iterate over FASTA records without loading the entire file into memory.

    Args:
        fasta_path: Path to FASTA file

    Yields:
        FastaRecord objects
    """
    if not Path(fasta_path).exists():
        raise FileNotFoundError(f"File not found: {fasta_path}")

    for record in SeqIO.parse(fasta_path, "fasta"):
        yield FastaRecord(
            id=record.id,
            description=record.description,
            sequence=str(record.seq)
        )


def parse_fasta(fasta_path: str) -> Dict[str, str]:
    """
    Parse a FASTA file into a dictionary.

    Args:
        fasta_path: Path to FASTA file

    Returns:
        Dict mapping sequence_id -> sequence
    """
    return {record.id: record.sequence for record in iter_fasta(fasta_path)}


def detect_file_format(file_path: str) -> str:
    """
    Detect whether a sequence file is FASTA or plain text.

    Args:
        file_path: Path to file

    Returns:
        'fasta' or 'text'
    """
    path = Path(file_path)
    if path.suffix.lower() in FASTA_EXTENSIONS:
        return 'fasta'

    with open(file_path, 'r') as f:
        first_line = f.readline()
        if first_line.startswith('>'):
            return 'fasta'

    return 'text'


def load_sequences(file_path: str,
                   file_format: str = 'auto',
                   ignore_case: bool = False) -> List[Tuple[str, str]]:
    """
    Load every sequence of a file.

    Args:
        file_path: Path to a text or FASTA file
        file_format: 'auto', 'text' or 'fasta'
        ignore_case: Upper-case the sequences (for soft-masked input)

    Returns:
        List of (sequence_id, sequence) pairs in file order. Records that
        share an id are all kept. A text file yields a single pair keyed by
        the file stem.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: For an unknown format or a FASTA file with no records
    """
    if not Path(file_path).exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_format == 'auto':
        file_format = detect_file_format(file_path)
        logger.debug("Detected %s format for %s", file_format, file_path)

    if file_format == 'text':
        sequences = [(Path(file_path).stem, read_sequence_file(file_path))]
    elif file_format == 'fasta':
        sequences = [(record.id, record.sequence) for record in iter_fasta(file_path)]
        if not sequences:
            raise ValueError(f"No FASTA records found in {file_path}")
    else:
        raise ValueError(f"Unsupported sequence format: {file_format}")

    if ignore_case:
        sequences = [(seq_id, seq.upper()) for seq_id, seq in sequences]

    total = sum(len(seq) for _, seq in sequences)
    logger.info("Loaded %d sequence(s), %d bp from %s", len(sequences), total, file_path)
    return sequences


def write_fasta(sequence: str,
                output_file: str,
                record_id: str = "sequence",
                description: str = "") -> None:
    """
    Write a single sequence as a FASTA file.

    Args:
        sequence: DNA sequence
        output_file: Path to output FASTA file
        record_id: Record identifier for the header
        description: Optional header description
    """
    record = SeqRecord(Seq(sequence), id=record_id, description=description)
    with open(output_file, 'w') as f:
        SeqIO.write(record, f, "fasta")
    logger.info("Wrote %d bp to %s", len(sequence), output_file)


# ============================================
# Match Reports
# ============================================

def format_match_report(result: MatchResult, include_id: bool = False) -> str:
    """
    Format one search result as a human-readable line.

    Args:
        result: MatchResult to describe
        include_id: Prefix the line with the sequence id

    Returns:
        "Match found @ indexes [0, 3, 5]" or "No match found"
    """
    if result.matched:
        indexes = ', '.join(str(pos) for pos in result.positions)
        line = f"Match found @ indexes [{indexes}]"
    else:
        line = "No match found"

    if include_id and result.sequence_id is not None:
        line = f"{result.sequence_id}: {line}"
    return line


def format_match_reports(results: List[MatchResult]) -> str:
    """Format several results, one line each; ids are shown when there are several."""
    include_id = len(results) > 1
    return '\n'.join(format_match_report(r, include_id=include_id) for r in results)


def write_match_report(results: List[MatchResult], output_file: str) -> None:
    """
    Write match reports to a text file.

    Args:
        results: List of MatchResult objects
        output_file: Path to output file
    """
    with open(output_file, 'w') as f:
        f.write(format_match_reports(results) + '\n')
    logger.info("Wrote %d report line(s) to %s", len(results), output_file)


# ============================================
# DataFrame Conversion Functions
# ============================================

def matches_to_dataframe(results: Iterable[MatchResult]) -> pd.DataFrame:
    """
    Convert search results to a pandas DataFrame, one row per match.

    Args:
        results: MatchResult objects

    Returns:
        DataFrame with columns sequence_id, pattern, position (0-based start)
        and end (exclusive)
    """
    rows = []
    for result in results:
        pattern_length = len(result.pattern)
        for pos in result.positions:
            rows.append({
                'sequence_id': result.sequence_id,
                'pattern': result.pattern,
                'position': pos,
                'end': pos + pattern_length,
            })

    if not rows:
        return pd.DataFrame(columns=MATCH_COLUMNS)

    df = pd.DataFrame(rows, columns=MATCH_COLUMNS)
    df['position'] = df['position'].astype('int64')
    df['end'] = df['end'].astype('int64')
    return df


def save_matches_to_csv(results: Iterable[MatchResult],
                        output_file: str,
                        sep: Optional[str] = None) -> None:
    """
    Save match positions to a CSV (or TSV) file.

    Args:
        results: MatchResult objects
        output_file: Path to output file
        sep: Field separator; defaults to tab for .tsv files and comma otherwise
    """
    if sep is None:
        sep = '\t' if Path(output_file).suffix.lower() == '.tsv' else ','

    df = matches_to_dataframe(results)
    if df.empty:
        logger.warning("No matches to save; writing header only to %s", output_file)

    df.to_csv(output_file, sep=sep, index=False)
    logger.info("Saved %d matches to %s", len(df), output_file)
