#!/usr/bin/env python3
"""
Orientation table loading

Reads a tab-delimited table (plain or gzip) with a header row and builds
the read identifier -> Orientation mapping used in FASTA mode.
"""

import warnings
import logging
from typing import Dict

import pandas as pd

from ..errors import ColumnNotFound, DuplicateReadId, TableFormatError
from ..orientation.resolver import Orientation, parse_orientation_token


logger = logging.getLogger(__name__)

OrientationTable = Dict[str, Orientation]

DEFAULT_ID_COL = "ReadName"
DEFAULT_ORIENTATION_COL = "orientation"


def read_table(table_path, sep: str = "\t") -> pd.DataFrame:
    """
    Read a delimited table with every cell kept as verbatim text

    Compression is inferred from the file extension. Cells wrapped in double
    quotes are unquoted. Rows with more or fewer fields than the header raise
    TableFormatError.
    """
    try:
        with warnings.catch_warnings():
            # extra fields only warn with index_col=False
            warnings.simplefilter("error", pd.errors.ParserWarning)
            df = pd.read_csv(
                table_path,
                sep=sep,
                dtype=str,
                keep_default_na=False,
                na_values=[],
                skipinitialspace=False,
                index_col=False,
                compression="infer",
            )
    except pd.errors.EmptyDataError as e:
        raise TableFormatError(f"Orientation table {table_path} is empty") from e
    except (pd.errors.ParserError, pd.errors.ParserWarning) as e:
        raise TableFormatError(f"Cannot parse orientation table {table_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise TableFormatError(f"Orientation table {table_path} is not valid UTF-8 text: {e}") from e

    # no NA strings are recognised, so NaN only marks fields missing from a short row
    short_rows = df.isna().any(axis=1)
    if short_rows.any():
        row_number = int(short_rows.to_numpy().nonzero()[0][0]) + 1
        raise TableFormatError(
            f"Cannot parse orientation table {table_path}: data row {row_number} has fewer fields than the header"
        )
    return df


def build_orientation_table(df: pd.DataFrame, id_col: str = DEFAULT_ID_COL,
                            orientation_col: str = DEFAULT_ORIENTATION_COL,
                            reject_duplicates: bool = False) -> OrientationTable:
    """
    Build the orientation mapping from a table

    Args:
        df: Table with string cells
        id_col: Name of the read identifier column (exact match)
        orientation_col: Name of the orientation column (exact match)
        reject_duplicates: Raise on a repeated identifier instead of keeping the last row

    Returns:
        OrientationTable: read identifier -> PLUS/MINUS

    Raises:
        ColumnNotFound: A named column is absent
        EmptyOrientation, UnrecognizedOrientation: A cell cannot be parsed;
            the whole load fails
        DuplicateReadId: Repeated identifier with reject_duplicates set
    """
    columns = list(df.columns)
    for name in (id_col, orientation_col):
        if name not in columns:
            raise ColumnNotFound(name)

    table: OrientationTable = {}
    n_duplicates = 0
    for read_id, cell in zip(df[id_col], df[orientation_col]):
        orientation = parse_orientation_token(cell, read_id)
        if read_id in table:
            if reject_duplicates:
                raise DuplicateReadId(read_id)
            n_duplicates += 1
        table[read_id] = orientation

    if n_duplicates:
        logger.warning(f"{n_duplicates} duplicated read identifiers in orientation table; last row wins")
    logger.debug(f"Loaded orientations for {len(table)} reads")
    return table


def load_orientation_table(table_path, id_col: str = DEFAULT_ID_COL,
                           orientation_col: str = DEFAULT_ORIENTATION_COL,
                           reject_duplicates: bool = False) -> OrientationTable:
    """Load a tab-delimited orientation table from disk"""
    df = read_table(table_path)
    return build_orientation_table(df, id_col, orientation_col, reject_duplicates)
