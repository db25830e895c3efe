#!/usr/bin/env python3
"""
Error types raised by restrand

All errors are fatal for a run. They subclass ValueError.
"""


class RestrandError(ValueError):
    """Base class for all restrand errors"""


class InvalidTargetOrientation(RestrandError):
    """Target orientation is not '+' or '-'"""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Target orientation must be '+' or '-', got '{value}'")


class ColumnNotFound(RestrandError):
    """Named column is absent from the table header"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Column '{name}' not found in orientation table header")


class EmptyOrientation(RestrandError):
    """Orientation cell is empty"""

    def __init__(self, read_id: str):
        self.read_id = read_id
        super().__init__(f"Empty orientation for read '{read_id}'")


class UnrecognizedOrientation(RestrandError):
    """Orientation cell holds a value that matches no known alias"""

    def __init__(self, token: str, read_id: str):
        self.token = token
        self.read_id = read_id
        super().__init__(f"Unrecognized orientation value '{token}' for read '{read_id}'")


class RecordParseError(RestrandError):
    """Malformed FASTA/FASTQ input"""

    def __init__(self, message: str, line_number: int = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)


class MissingTableArgument(RestrandError):
    """FASTA mode requested without an orientation table"""

    def __init__(self):
        super().__init__("An orientation table is required in FASTA mode (use --table, or --fastq for header tags)")


class TableFormatError(RestrandError):
    """Orientation table could not be parsed as tab-delimited text"""


class DuplicateReadId(RestrandError):
    """Read identifier appears more than once in the orientation table"""

    def __init__(self, read_id: str):
        self.read_id = read_id
        super().__init__(f"Duplicate read '{read_id}' in orientation table")
