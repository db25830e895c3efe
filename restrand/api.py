#!/usr/bin/env python3
"""
Restrand main API module

Streaming drivers that wire the orientation resolver, strand normalizer and
record emitters together, one record at a time, in input order.
"""

import logging
import time
from typing import Iterable, Optional, Union

from .config.run_config import RestrandConfig
from .orientation.normalizer import StrandNormalizer, RunStats
from .orientation.resolver import Orientation
from .records.read_record import ReadRecord
from .records.emitter import FastaEmitter, FastqEmitter
from .table.table_loader import OrientationTable, load_orientation_table
from .utils.misc import open_text_input, open_text_output, iter_fasta, iter_fastq, STDIO_SENTINEL


logger = logging.getLogger(__name__)


def restrand_fasta(
    records: Iterable[ReadRecord],
    emitter: FastaEmitter,
    table: OrientationTable,
    target: Union[str, Orientation] = "+",
    drop_missing: bool = False,
    flipped_suffix: str = "",
) -> RunStats:
    """
    Normalize FASTA records against an orientation table

    Args:
        records: Input records
        emitter: FASTA sink
        table: read identifier -> orientation
        target: Target orientation ('+' or '-')
        drop_missing: Drop reads absent from the table
        flipped_suffix: Text appended to flipped read headers

    Returns:
        RunStats: Counters for the run
    """
    stats = RunStats(mode="fasta", drop_missing=drop_missing, wrap_width=emitter.wrap_width)
    normalizer = StrandNormalizer(target, drop_missing, flipped_suffix, stats)

    for record in records:
        out = normalizer.normalize_fasta(record, table.get(record.read_id))
        if out is not None:
            emitter.write(out)

    return stats


def restrand_fastq(
    records: Iterable[ReadRecord],
    emitter: FastqEmitter,
    target: Union[str, Orientation] = "+",
) -> RunStats:
    """
    Normalize FASTQ records using the orientation tag in each header

    Args:
        records: Input records with quality strings
        emitter: FASTQ sink
        target: Target orientation ('+' or '-')

    Returns:
        RunStats: Counters for the run
    """
    stats = RunStats(mode="fastq")
    normalizer = StrandNormalizer(target, stats=stats)

    for record in records:
        emitter.write(normalizer.normalize_fastq(record))

    return stats


def run(config: RestrandConfig, table: Optional[OrientationTable] = None) -> RunStats:
    """
    Run a complete restrand job

    Loads the orientation table (FASTA mode, unless one is passed in), opens
    the input and output streams, processes every record and logs the
    end-of-run summary line.

    Args:
        config: Validated run configuration
        table: Preloaded orientation table, skips loading from config.table_path

    Returns:
        RunStats: Counters for the run
    """
    start_time = time.time()

    if not config.fastq and table is None:
        logger.info(f"Loading orientation table: {config.table_path}")
        table = load_orientation_table(
            config.table_path,
            id_col=config.id_col,
            orientation_col=config.orientation_col,
            reject_duplicates=config.reject_duplicates,
        )
        logger.info(f"Loaded orientations for {len(table)} reads")

    in_handle = open_text_input(config.input_path)
    try:
        out_handle = open_text_output(config.output_path)
        try:
            logger.info(f"Processing {config.mode.upper()} input: {config.input_path}")
            if config.fastq:
                emitter = FastqEmitter(out_handle)
                stats = restrand_fastq(iter_fastq(in_handle), emitter, config.target)
            else:
                emitter = FastaEmitter(out_handle, config.wrap_width)
                stats = restrand_fasta(
                    iter_fasta(in_handle),
                    emitter,
                    table,
                    config.target,
                    drop_missing=config.drop_missing,
                    flipped_suffix=config.flipped_suffix,
                )
            out_handle.flush()
        finally:
            if config.output_path not in (None, STDIO_SENTINEL):
                out_handle.close()
    finally:
        if config.input_path != STDIO_SENTINEL:
            in_handle.close()

    logger.info(stats.summary_line())
    logger.debug(f"Records written: {emitter.records_written}")
    logger.debug(f"Processing time: {time.time() - start_time:.2f} seconds")
    return stats
