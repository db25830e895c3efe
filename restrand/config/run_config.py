#!/usr/bin/env python3
"""
Run configuration

Collects every option of a restrand run and validates them up front, before
any input is read or output is opened.
"""

import logging
from typing import Optional
from dataclasses import dataclass

from ..errors import MissingTableArgument
from ..orientation.resolver import Orientation, parse_target_orientation
from ..table.table_loader import DEFAULT_ID_COL, DEFAULT_ORIENTATION_COL
from ..utils.sequence_utils import FASTA_WRAP_WIDTH


logger = logging.getLogger(__name__)


@dataclass
class RestrandConfig:
    """
    Restrand run configuration

    Attributes:
        input_path: FASTA/FASTQ input (plain or .gz), '-' for stdin
        table_path: Orientation table, required in FASTA mode
        output_path: Output file, None or '-' for stdout
        fastq: Read FASTQ and take orientation from header tags
        id_col: Read identifier column name in the table
        orientation_col: Orientation column name in the table
        target_orientation: '+' or '-'; reads in the other orientation are flipped
        drop_missing: Drop FASTA reads absent from the table instead of passing them through
        flipped_suffix: Text appended to headers of flipped FASTA reads
        reject_duplicates: Fail on repeated identifiers in the table
        wrap_width: FASTA output line width
    """
    input_path: str = "-"
    table_path: Optional[str] = None
    output_path: Optional[str] = None
    fastq: bool = False
    id_col: str = DEFAULT_ID_COL
    orientation_col: str = DEFAULT_ORIENTATION_COL
    target_orientation: str = "+"
    drop_missing: bool = False
    flipped_suffix: str = ""
    reject_duplicates: bool = False
    wrap_width: int = FASTA_WRAP_WIDTH

    def __post_init__(self):
        """Validate configuration parameters"""
        self.target = parse_target_orientation(self.target_orientation)

        if self.wrap_width < 1:
            raise ValueError(f"wrap_width must be positive, got {self.wrap_width}")

        if not self.fastq and not self.table_path:
            raise MissingTableArgument()

        if self.fastq:
            if self.table_path:
                logger.warning("Orientation table is ignored in FASTQ mode")
            if self.drop_missing:
                logger.warning("drop_missing is ignored in FASTQ mode")
            if self.flipped_suffix:
                logger.warning("flipped_suffix is ignored in FASTQ mode")

    @property
    def mode(self) -> str:
        """Return 'fastq' or 'fasta'"""
        return "fastq" if self.fastq else "fasta"
