import gzip
import sys

from ..errors import RecordParseError
from ..records.read_record import ReadRecord


STDIO_SENTINEL = "-"


def open_text_input(file_path):
    """Open text or gz input in text mode; '-' reads plain text from stdin."""
    if file_path == STDIO_SENTINEL:
        return sys.stdin
    if str(file_path).endswith(".gz"):
        return gzip.open(file_path, "rt", encoding="utf-8")
    return open(file_path, "r", encoding="utf-8")


def open_text_output(file_path=None):
    """Open output in text mode; None or '-' writes to stdout."""
    if file_path is None or file_path == STDIO_SENTINEL:
        return sys.stdout
    return open(file_path, "w")


def iter_fasta(handle):
    """
    Streaming FASTA iterator.
    Yields ReadRecord with header rebuilt as 'id[ description]'.
    Sequence lines are joined with surrounding whitespace removed.
    """
    header = None
    seq_lines = []
    line_number = 0

    while True:
        line = _read_line(handle, line_number + 1)
        if not line:
            break
        line_number += 1
        line = line.strip()
        if not line:
            continue
        if line.startswith(">"):
            if header is not None:
                yield ReadRecord.from_header(header, "".join(seq_lines))
            header = _normalize_header(line[1:])
            seq_lines = []
        elif header is None:
            raise RecordParseError("Expected '>' at beginning of FASTA record", line_number)
        else:
            seq_lines.append(line)

    if header is not None:
        yield ReadRecord.from_header(header, "".join(seq_lines))


def _read_line(handle, line_number):
    try:
        return handle.readline()
    except UnicodeDecodeError as e:
        raise RecordParseError(f"Input is not valid UTF-8 text: {e}", line_number) from e


def _normalize_header(title):
    parts = title.split(None, 1)
    if len(parts) > 1:
        return f"{parts[0]} {parts[1].strip()}"
    return parts[0] if parts else ""


def iter_fastq(handle):
    """
    FASTQ iterator: read 4 lines per record.
    Yields ReadRecord with the full header; no conversion on quality.
    """
    line_number = 0
    while True:
        id_line = _read_line(handle, line_number + 1)
        if not id_line:
            break
        line_number += 1
        if not id_line.strip():
            continue
        record_start = line_number
        seq_line = _read_line(handle, record_start + 1)
        plus_line = _read_line(handle, record_start + 2)
        qual_line = _read_line(handle, record_start + 3)
        line_number += 3

        if not (seq_line and plus_line and qual_line):
            raise RecordParseError("Incomplete FASTQ record encountered", record_start)

        if not id_line.startswith("@"):
            raise RecordParseError("Invalid FASTQ structure (missing @ header line)", record_start)
        if not plus_line.startswith("+"):
            raise RecordParseError("Invalid FASTQ structure (missing + separator line)", record_start + 2)

        header = id_line[1:].strip()
        seq = seq_line.strip()
        qual = qual_line.strip()
        if len(seq) != len(qual):
            raise RecordParseError(
                f"Length mismatch (seq {len(seq)} vs qual {len(qual)}) at read {header.split(None, 1)[0] if header else ''}",
                record_start,
            )
        yield ReadRecord.from_header(header, seq, qual)
