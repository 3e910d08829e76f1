# Sequence file and report I/O for the DNA matcher

from .parsers import (
    # Data class
    FastaRecord,
    # Sequence readers
    read_sequence_file,
    iter_fasta,
    parse_fasta,
    detect_file_format,
    load_sequences,
    write_fasta,
    # Match reports
    format_match_report,
    format_match_reports,
    write_match_report,
    # DataFrame conversion
    matches_to_dataframe,
    save_matches_to_csv,
)
