#!/usr/bin/env python3
"""
Record emitters

Serialize records to FASTA (wrapped) or FASTQ (four unwrapped lines).
Each record is written in full before the caller pulls the next one.
"""

from typing import TextIO

from .read_record import ReadRecord
from ..utils.sequence_utils import wrap_sequence, FASTA_WRAP_WIDTH


class FastaEmitter:
    """Write records as FASTA with fixed-width sequence lines"""

    def __init__(self, handle: TextIO, wrap_width: int = FASTA_WRAP_WIDTH):
        if wrap_width < 1:
            raise ValueError(f"wrap_width must be positive, got {wrap_width}")
        self.handle = handle
        self.wrap_width = wrap_width
        self.records_written = 0

    def write(self, record: ReadRecord):
        self.handle.write(f">{record.header}\n")
        for line in wrap_sequence(record.sequence, self.wrap_width):
            self.handle.write(line)
            self.handle.write("\n")
        self.records_written += 1


class FastqEmitter:
    """Write records as four-line FASTQ"""

    def __init__(self, handle: TextIO):
        self.handle = handle
        self.records_written = 0

    def write(self, record: ReadRecord):
        if not record.is_fastq:
            raise ValueError(f"Cannot write FASTQ without quality scores for read {record.read_id}")
        self.handle.write(f"@{record.header}\n{record.sequence}\n+\n{record.quality}\n")
        self.records_written += 1
