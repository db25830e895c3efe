#!/usr/bin/env python3
"""
Orientation resolution

Turns orientation table cells and FASTQ header tags into Orientation values.
Table cells come from many upstream tools, so several aliases are accepted;
the FASTQ header tag is machine generated and only the strict
``orientation:+`` / ``orientation:-`` form is honoured.
"""

from typing import Callable, List, Tuple
from enum import Enum

from ..errors import EmptyOrientation, UnrecognizedOrientation, InvalidTargetOrientation


HEADER_TAG = "orientation:"


class Orientation(Enum):
    """Strand orientation of a read"""
    PLUS = "+"
    MINUS = "-"
    UNKNOWN = "?"

    @property
    def is_known(self) -> bool:
        """Return whether this is PLUS or MINUS"""
        return self is not Orientation.UNKNOWN

    def flipped(self) -> "Orientation":
        """Return the opposite strand"""
        if self is Orientation.PLUS:
            return Orientation.MINUS
        if self is Orientation.MINUS:
            return Orientation.PLUS
        raise ValueError("UNKNOWN orientation has no opposite strand")

    def __str__(self) -> str:
        return self.value


# Evaluated in order against the lower-cased token; first match wins
ALIAS_RULES: List[Tuple[Callable[[str], bool], Orientation]] = [
    (lambda t: t.startswith("plus"), Orientation.PLUS),
    (lambda t: t.startswith("fwd"), Orientation.PLUS),
    (lambda t: t == "1", Orientation.PLUS),
    (lambda t: t.startswith("minus"), Orientation.MINUS),
    (lambda t: t.startswith("rev"), Orientation.MINUS),
    (lambda t: t == "0", Orientation.MINUS),
    (lambda t: t == "rc", Orientation.MINUS),
]


def parse_orientation_token(token: str, read_id: str) -> Orientation:
    """
    Parse an orientation table cell

    Args:
        token: Raw cell value
        read_id: Read the cell belongs to, used in error messages

    Returns:
        Orientation: PLUS or MINUS

    Raises:
        EmptyOrientation: Cell is empty after trimming
        UnrecognizedOrientation: Cell matches no known alias

    Examples:
        >>> parse_orientation_token("Reverse", "read1")
        <Orientation.MINUS: '-'>
    """
    token = token.strip()
    if not token:
        raise EmptyOrientation(read_id)

    if token[0] == "+":
        return Orientation.PLUS
    if token[0] == "-":
        return Orientation.MINUS

    lowered = token.lower()
    for predicate, orientation in ALIAS_RULES:
        if predicate(lowered):
            return orientation

    raise UnrecognizedOrientation(token, read_id)


def find_header_tag(header: str) -> int:
    """Return index of the orientation symbol following the first tag marker, or -1"""
    pos = header.find(HEADER_TAG)
    if pos < 0:
        return -1
    return pos + len(HEADER_TAG)


def orientation_from_header(header: str) -> Orientation:
    """
    Read the orientation tag embedded in a FASTQ header

    Only the first ``orientation:`` marker is considered. The character right
    after it must be '+' or '-'; anything else yields UNKNOWN. Never raises.
    """
    pos = find_header_tag(header)
    if pos < 0 or pos >= len(header):
        return Orientation.UNKNOWN
    symbol = header[pos]
    if symbol == "+":
        return Orientation.PLUS
    if symbol == "-":
        return Orientation.MINUS
    return Orientation.UNKNOWN


def parse_target_orientation(value) -> Orientation:
    """Validate the run-wide target orientation ('+', '-' or a known Orientation)"""
    if isinstance(value, Orientation) and value.is_known:
        return value
    if value == "+":
        return Orientation.PLUS
    if value == "-":
        return Orientation.MINUS
    raise InvalidTargetOrientation(value)
