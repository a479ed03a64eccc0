"""
Newline-delimited record scanning over a transcript byte region.

Records are located by comparing fixed-size slices of the region's uint8
array against the newline byte, so a transcript is never split into a list
of lines and mapped files are scanned in place. Every function here is lazy
and restartable: each call starts a new scan from the beginning (or end) of
the region.
"""

from typing import Iterator, Optional, Union

import numpy as np

from .exceptions import DecodeFailureError
from .log_region import LogRegion
from .models import RecordSpan
from .patterns import FOOTER_WIDTH, NEWLINE

DEFAULT_CHUNK_SIZE = 1 << 20

Region = Union[LogRegion, np.ndarray, bytes]


def as_array(region: Region) -> np.ndarray:
    """uint8 view of a region without copying it."""
    if isinstance(region, LogRegion):
        return region.array
    if isinstance(region, np.ndarray):
        return region
    return np.frombuffer(region, dtype=np.uint8)


def newline_offsets(
    region: Region, reverse: bool = False, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> Iterator[int]:
    """
    Yield the offsets of newline bytes in a region.

    Args:
        region: LogRegion, uint8 array or bytes.
        reverse: Yield offsets from the end of the region toward the start.
        chunk_size: Bytes examined per numpy comparison.

    Yields:
        Absolute offsets, ascending (or descending when reverse is set).
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    array = as_array(region)
    length = len(array)
    if not reverse:
        for start in range(0, length, chunk_size):
            for offset in np.flatnonzero(array[start:start + chunk_size] == NEWLINE):
                yield start + int(offset)
    else:
        for end in range(length, 0, -chunk_size):
            start = max(0, end - chunk_size)
            for offset in np.flatnonzero(array[start:end] == NEWLINE)[::-1]:
                yield start + int(offset)


def iter_records(
    region: Region, reverse: bool = False, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> Iterator[RecordSpan]:
    """
    Yield the newline-terminated records of a region.

    Forward scans start with the first record of the file. Backward scans
    only yield records with a newline on both sides, so the first line of
    the file is never produced. In both directions bytes after the last
    newline form an unterminated record and are skipped.
    """
    if not reverse:
        previous = -1
        for offset in newline_offsets(region, chunk_size=chunk_size):
            yield RecordSpan(previous + 1, offset)
            previous = offset
    else:
        later: Optional[int] = None
        for offset in newline_offsets(region, reverse=True, chunk_size=chunk_size):
            if later is not None:
                yield RecordSpan(offset + 1, later)
            later = offset


def read_span(region: Region, start: int, end: int) -> bytes:
    """Copy of the bytes in [start, end)."""
    return as_array(region)[start:end].tobytes()


def footer_window(region: Region, span: RecordSpan) -> Optional[bytes]:
    """
    Bytes of a record plus its newline, if the record has footer width.

    Only records exactly as long as a bare timestamp and separator can be
    truncated writes, so any other record is skipped without being read.
    """
    if span.length != FOOTER_WIDTH - 1:
        return None
    return read_span(region, span.start, span.end + 1)


def decode_bytes(raw: bytes, file_name: str, position: int) -> str:
    """
    Decode record bytes as UTF-8.

    Raises:
        DecodeFailureError: If the bytes are not valid UTF-8.
    """
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeFailureError(
            file_name, position + e.start, raw.decode("utf-8", errors="replace")
        ) from e


def decode_record(region: Region, span: RecordSpan, file_name: str) -> str:
    """Text of a record, without its newline."""
    return decode_bytes(read_span(region, span.start, span.end), file_name, span.start)
