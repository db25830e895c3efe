#!/usr/bin/env python3
"""
Read record data structure shared by the FASTA and FASTQ pipelines
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class ReadRecord:
    """
    A single sequencing read

    Attributes:
        read_id: Identifier (header text up to the first whitespace), never modified
        header: Full header text without the leading '>' or '@'
        sequence: Nucleotide sequence
        quality: Quality string (FASTQ only), same length as sequence
    """
    read_id: str
    header: str
    sequence: str
    quality: Optional[str] = None

    def __post_init__(self):
        """Validate sequence/quality alignment"""
        if self.quality is not None and len(self.quality) != len(self.sequence):
            raise ValueError(
                f"Length mismatch (seq {len(self.sequence)} vs qual {len(self.quality)}) at read {self.read_id}"
            )

    @classmethod
    def from_header(cls, header: str, sequence: str, quality: Optional[str] = None) -> "ReadRecord":
        """Build a record, taking the identifier from the first word of the header"""
        parts = header.split(None, 1)
        read_id = parts[0] if parts else ""
        return cls(read_id=read_id, header=header, sequence=sequence, quality=quality)

    @property
    def description(self) -> str:
        """Return the free text following the identifier"""
        parts = self.header.split(None, 1)
        return parts[1] if len(parts) > 1 else ""

    @property
    def is_fastq(self) -> bool:
        """Check if record carries quality scores"""
        return self.quality is not None

    def __len__(self) -> int:
        return len(self.sequence)
