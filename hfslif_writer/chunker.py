"""
Payload chunking for HFSLIF file data.

The file data is a logical stream of:

    file header (36) | control byte (1) | payload (N) | footer 07 FF FF

which is cut into 254-byte pieces. Each piece is stored in a 256-byte
physical record behind a 2-byte big-endian length prefix. The prefix
counts the header, control and payload bytes in the record; footer bytes
and zero padding are not counted. The header and footer may both straddle
a record boundary.
"""

import struct
from typing import BinaryIO, Iterator

from .constants import (
    FILE_FOOTER,
    FILE_FOOTER_SIZE,
    FILE_PREAMBLE_SIZE,
    RECORD_DATA_SIZE,
    RECORD_SIZE,
)
from .logging_config import get_logger
from .models import FieldOption, FileHeader

log = get_logger('chunker')


def record_count(payload_length: int) -> int:
    """
    Number of physical records needed for a payload.

    Closed-form ceiling division over the full logical stream, so the
    volume header can be written before any data record is produced.
    """
    if payload_length < 0:
        raise ValueError(f"Payload length cannot be negative: {payload_length}")
    logical_size = FILE_PREAMBLE_SIZE + payload_length + FILE_FOOTER_SIZE
    return (logical_size + RECORD_DATA_SIZE - 1) // RECORD_DATA_SIZE


def iter_records(
    payload: bytes,
    description: str,
    field_option: FieldOption
) -> Iterator[bytes]:
    """
    Generate the physical data records for a payload.

    Args:
        payload: Raw file content
        description: File description (truncated to 32 characters)
        field_option: Invasm field control byte

    Yields:
        256-byte records, in file order
    """
    header = FileHeader.for_payload(len(payload), description)
    preamble = header.to_bytes() + bytes([field_option])
    stream = memoryview(preamble + bytes(payload) + FILE_FOOTER)

    # Bytes counted by the length prefixes
    counted = FILE_PREAMBLE_SIZE + len(payload)
    count = record_count(len(payload))

    log.debug("Chunking %d payload bytes into %d record(s)", len(payload), count)

    for index in range(count):
        start = index * RECORD_DATA_SIZE
        chunk = stream[start:start + RECORD_DATA_SIZE]
        length = max(0, min(RECORD_DATA_SIZE, counted - start))

        record = bytearray(struct.pack('>H', length))
        record += chunk
        record.extend(bytes(RECORD_SIZE - len(record)))
        yield bytes(record)


def write_records(
    sink: BinaryIO,
    payload: bytes,
    description: str,
    field_option: FieldOption
) -> int:
    """
    Write all data records for a payload to a sink.

    Returns:
        Number of records written
    """
    written = 0
    for record in iter_records(payload, description, field_option):
        sink.write(record)
        written += 1
    return written
