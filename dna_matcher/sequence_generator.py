"""
Random DNA Sequence Generator

Produces random nucleobase sequences for exercising the matcher on large
inputs. Each base is drawn equiprobably: a number between 1 and 100 is rolled
and mapped onto four buckets of 25.

Usage:
    from dna_matcher.sequence_generator import generate_sequence

    seq = generate_sequence(1_000_000, seed=42)
"""

import logging
import random
from typing import Optional

from .alphabet import NUCLEOBASES

logger = logging.getLogger(__name__)


def select_nucleobase(n: int) -> str:
    """
    Select a nucleobase given a number between 1 and 100.

    Args:
        n: Integer in [1, 100]

    Returns:
        'A' for 1-25, 'C' for 26-50, 'G' for 51-75, 'T' for 76-100

    Raises:
        ValueError: If n is outside [1, 100]
    """
    if not 1 <= n <= 100:
        raise ValueError(f"n must be between 1 and 100, got {n}")

    if n <= 25:
        return NUCLEOBASES[0]
    elif n <= 50:
        return NUCLEOBASES[1]
    elif n <= 75:
        return NUCLEOBASES[2]
    else:
        return NUCLEOBASES[3]


def generate_sequence(length: int,
                      seed: Optional[int] = None,
                      rng: Optional[random.Random] = None) -> str:
    """
    Generate a random DNA sequence.

    Args:
        length: Number of bases to generate
        seed: Seed for a fresh random generator (ignored if rng is given)
        rng: Random generator to draw from

    Returns:
        Sequence of A/C/G/T of the requested length

    Raises:
        ValueError: If length is negative
    """
    if length < 0:
        raise ValueError(f"Sequence length cannot be negative: {length}")

    if rng is None:
        rng = random.Random(seed)

    logger.debug("Generating %d random nucleobases (seed=%s)", length, seed)
    return ''.join(select_nucleobase(rng.randint(1, 100)) for _ in range(length))
