"""
Nucleobase Alphabet Module

Defines the four-letter DNA alphabet used by the matcher and the checks that
keep anything else out of the search core.

Usage:
    from dna_matcher.alphabet import Nucleobase, symbol_index, validate_dna

    symbol_index('G')           # 2
    validate_dna("ACGT")        # returns "ACGT"
    validate_dna("ACGU")        # raises InvalidAlphabetError
"""

from enum import IntEnum
from typing import Dict, Sequence, Union

from .exceptions import InvalidAlphabetError


class Nucleobase(IntEnum):
    """DNA nucleobases, valued by their slot in a skip table."""
    A = 0
    C = 1
    G = 2
    T = 3

    @property
    def symbol(self) -> str:
        return self.name

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Nucleobase':
        """Look up a nucleobase by its one-letter symbol."""
        try:
            return _BY_SYMBOL[symbol]
        except (KeyError, TypeError):
            raise InvalidAlphabetError(symbol) from None


# Symbols in slot order
NUCLEOBASES = tuple(base.symbol for base in Nucleobase)
ALPHABET_SIZE = len(NUCLEOBASES)

_BY_SYMBOL: Dict[str, Nucleobase] = {base.symbol: base for base in Nucleobase}

Symbol = Union[str, Nucleobase]


def symbol_index(symbol: Symbol) -> int:
    """
    Map a nucleobase to its table slot (0..3).

    Args:
        symbol: One-letter symbol ('A', 'C', 'G', 'T') or a Nucleobase

    Returns:
        Slot index

    Raises:
        InvalidAlphabetError: If the symbol is not a nucleobase
    """
    if isinstance(symbol, Nucleobase):
        return int(symbol)
    return int(Nucleobase.from_symbol(symbol))


def check_nucleobase(symbol: Symbol) -> bool:
    """Return True if the symbol is one of A, C, G or T."""
    return isinstance(symbol, Nucleobase) or symbol in _BY_SYMBOL


def check_dna(sequence: Sequence[Symbol]) -> bool:
    """Return True if every symbol of the sequence is a nucleobase."""
    return all(check_nucleobase(base) for base in sequence)


def validate_dna(sequence: Sequence[Symbol], label: str = "sequence") -> Sequence[Symbol]:
    """
    Check that a pattern or sequence uses only A, C, G and T.

    Args:
        sequence: Symbols to check
        label: Name used in the error message ("pattern", "sequence", ...)

    Returns:
        The unchanged sequence

    Raises:
        InvalidAlphabetError: On the first symbol outside the alphabet
    """
    for position, base in enumerate(sequence):
        if not check_nucleobase(base):
            raise InvalidAlphabetError(base, position=position, label=label)
    return sequence
