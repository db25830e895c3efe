#!/usr/bin/env python3
"""
Strand normalization

Decides, per read, whether to keep or flip it relative to the target
orientation and applies the flip: reverse-complemented sequence, reversed
quality string (FASTQ) and rewritten header.
"""

from typing import Optional
from dataclasses import dataclass
from enum import Enum

from .resolver import Orientation, orientation_from_header, find_header_tag, parse_target_orientation
from ..records.read_record import ReadRecord
from ..utils.sequence_utils import reverse_complement, reverse_quality, FASTA_WRAP_WIDTH


class Action(Enum):
    """Per-read action"""
    KEEP = "keep"                # already in target orientation
    FLIP = "flip"                # reverse-complement onto the target strand
    PASSTHROUGH = "passthrough"  # orientation not known, emitted unchanged
    DROP = "drop"                # missing from table, not emitted


@dataclass
class RunStats:
    """
    Counters for one run

    Attributes:
        total: Records read
        flipped: Records reverse-complemented
        missing: FASTA records absent from the orientation table
        no_tag: FASTQ records without a usable orientation tag
        dropped: Records suppressed (missing and drop_missing set)
        mode: 'fasta' or 'fastq'
        drop_missing: Whether missing records were dropped
        wrap_width: FASTA line width used
    """
    total: int = 0
    flipped: int = 0
    missing: int = 0
    no_tag: int = 0
    dropped: int = 0
    mode: str = "fasta"
    drop_missing: bool = False
    wrap_width: int = FASTA_WRAP_WIDTH

    @property
    def emitted(self) -> int:
        """Return number of records written"""
        return self.total - self.dropped

    def summary_line(self) -> str:
        """One-line end-of-run report"""
        if self.mode == "fastq":
            return f"processed={self.total} flipped={self.flipped} no_orientation_tag={self.no_tag}"
        return (
            f"processed={self.total} flipped={self.flipped} missing_in_table={self.missing} "
            f"({'dropped' if self.drop_missing else 'kept'} mode) | wrap={self.wrap_width} cols"
        )


def decide_action(current: Optional[Orientation], target: Orientation, drop_missing: bool = False) -> Action:
    """
    Choose what to do with a read

    Args:
        current: Resolved orientation, UNKNOWN for an untagged FASTQ header,
            None for a FASTA read absent from the table
        target: Target orientation (PLUS or MINUS)
        drop_missing: Suppress reads absent from the table

    Returns:
        Action: KEEP, FLIP, PASSTHROUGH or DROP
    """
    if current is None:
        return Action.DROP if drop_missing else Action.PASSTHROUGH
    if current is Orientation.UNKNOWN:
        return Action.PASSTHROUGH
    if current is target:
        return Action.KEEP
    return Action.FLIP


def rewrite_header_tag(header: str, target: Orientation) -> str:
    """
    Set the value of the first orientation tag in a FASTQ header

    Only the marker orientation was resolved from is touched; any later
    ``orientation:`` text in the description is left as it is.
    """
    pos = find_header_tag(header)
    if pos < 0 or pos >= len(header) or header[pos] not in "+-":
        return header
    return header[:pos] + target.value + header[pos + 1:]


class StrandNormalizer:
    """
    Applies keep/flip decisions to a stream of records

    Holds the run configuration and updates the run counters once per record.
    """

    def __init__(self, target, drop_missing: bool = False, flipped_suffix: str = "",
                 stats: Optional[RunStats] = None):
        self.target = parse_target_orientation(target)
        self.drop_missing = drop_missing
        self.flipped_suffix = flipped_suffix or ""
        self.stats = stats if stats is not None else RunStats(drop_missing=drop_missing)

    def normalize_fasta(self, record: ReadRecord, current: Optional[Orientation]) -> Optional[ReadRecord]:
        """
        Normalize a FASTA record

        Args:
            record: Input record
            current: Orientation from the table, None if the read is absent

        Returns:
            The record to emit, or None when it is dropped
        """
        self.stats.total += 1
        action = decide_action(current, self.target, self.drop_missing)

        if current is None:
            self.stats.missing += 1
        if action is Action.DROP:
            self.stats.dropped += 1
            return None
        if action is not Action.FLIP:
            return record

        self.stats.flipped += 1
        header = record.header + self.flipped_suffix
        return ReadRecord(
            read_id=record.read_id,
            header=header,
            sequence=reverse_complement(record.sequence),
        )

    def normalize_fastq(self, record: ReadRecord) -> ReadRecord:
        """
        Normalize a FASTQ record using its header orientation tag

        Records without a usable tag pass through unchanged.
        """
        self.stats.total += 1
        current = orientation_from_header(record.header)
        action = decide_action(current, self.target)

        if action is Action.PASSTHROUGH:
            self.stats.no_tag += 1
            return record
        if action is Action.KEEP:
            return record

        self.stats.flipped += 1
        return ReadRecord(
            read_id=record.read_id,
            header=rewrite_header_tag(record.header, self.target),
            sequence=reverse_complement(record.sequence),
            quality=reverse_quality(record.quality),
        )
