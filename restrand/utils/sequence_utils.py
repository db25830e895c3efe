#!/usr/bin/env python3
"""
Sequence processing utility functions

Provides the payload transformations needed to flip a read onto the other strand
"""

from typing import Iterator

from Bio.Data.IUPACData import ambiguous_dna_complement


# Conventional FASTA line length
FASTA_WRAP_WIDTH = 60

# IUPAC DNA complement in both cases; every other character maps to itself
_COMPLEMENT_TABLE = str.maketrans(
    "".join(ambiguous_dna_complement) + "".join(ambiguous_dna_complement).lower(),
    "".join(ambiguous_dna_complement.values()) + "".join(ambiguous_dna_complement.values()).lower(),
)


def reverse_complement(seq: str) -> str:
    """
    Calculate reverse complement of a nucleotide sequence

    Case is preserved and IUPAC ambiguity codes are complemented with the
    Biopython ambiguous DNA table. Characters outside the alphabet (including
    U) pass through unchanged; no validation is done.

    Args:
        seq: Nucleotide sequence string

    Returns:
        str: Reverse complement sequence

    Examples:
        >>> reverse_complement("ATCG")
        'CGAT'
        >>> reverse_complement("aaCGn")
        'nCGtt'
    """
    if not seq:
        return ""
    return seq.translate(_COMPLEMENT_TABLE)[::-1]


def reverse_quality(qual: str) -> str:
    """Reverse a quality string so it stays aligned with a reverse-complemented sequence"""
    return qual[::-1]


def wrap_sequence(seq: str, line_length: int = FASTA_WRAP_WIDTH) -> Iterator[str]:
    """
    Split a sequence into fixed-width lines

    Args:
        seq: Sequence to wrap
        line_length: Length per line, the last line may be shorter

    Yields:
        str: Successive lines; nothing for an empty sequence
    """
    if line_length < 1:
        raise ValueError(f"line_length must be positive, got {line_length}")

    for i in range(0, len(seq), line_length):
        yield seq[i:i + line_length]
