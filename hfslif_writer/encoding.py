"""
Byte-level encoding primitives for LIF structures.

Every multi-byte integer in a LIF volume is big-endian, and every text
field is fixed width, left aligned and space padded. Encoders build a
record by appending to a ``bytearray`` with these helpers, then pad it to
the record size with ``pad_record``.
"""

import struct
from typing import Iterable


def put_uint8(buf: bytearray, value: int) -> None:
    """Append a single byte."""
    buf.append(value)


def put_uint16(buf: bytearray, value: int) -> None:
    """Append a big-endian 16-bit unsigned integer."""
    buf += struct.pack('>H', value)


def put_uint32(buf: bytearray, value: int) -> None:
    """Append a big-endian 32-bit unsigned integer."""
    buf += struct.pack('>I', value)


def put_bytes(buf: bytearray, data: bytes, width: int | None = None) -> None:
    """
    Append raw bytes.

    Args:
        buf: Destination buffer
        data: Bytes to append
        width: If given, data must be exactly this long
    """
    if width is not None and len(data) != width:
        raise ValueError(f"Expected {width} bytes, got {len(data)}")
    buf += data


def fixed_ascii(text: str, width: int) -> bytes:
    """
    Encode text as a fixed-width ASCII field.

    Longer text is truncated, shorter text is padded with spaces.
    Non-ASCII characters become '?'.
    """
    return text.encode('ascii', errors='replace')[:width].ljust(width)


def put_ascii(buf: bytearray, text: str, width: int) -> None:
    """Append a fixed-width, left-aligned, space-padded ASCII field."""
    buf += fixed_ascii(text, width)


def pad_record(
    buf: bytearray,
    size: int,
    overlays: Iterable[tuple[int, bytes]] = ()
) -> bytes:
    """
    Zero-fill a record buffer up to size and apply sentinel spans.

    Args:
        buf: Encoded record fields
        size: Final record size in bytes
        overlays: (absolute offset, bytes) spans written over the padding

    Returns:
        The completed record
    """
    if len(buf) > size:
        raise ValueError(f"Record overflow: {len(buf)} bytes > {size}")

    record = bytearray(buf)
    record.extend(bytes(size - len(buf)))
    for offset, span in overlays:
        if offset < len(buf) or offset + len(span) > size:
            raise ValueError(f"Sentinel at offset {offset} outside record padding")
        record[offset:offset + len(span)] = span
    return bytes(record)
