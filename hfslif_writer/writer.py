"""
HFSLIF image creation.

Builds a single-file LIF volume: volume header record, directory record,
then the chunked file data. The geometry is computed up front from the
payload length, so the image is written in a single sequential pass.
"""

import io
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO

from .chunker import record_count, write_records
from .constants import (
    DATA_START_RECORD,
    DESCRIPTION_SIZE,
    FILE_FOOTER_SIZE,
    FILE_NAME,
    FILE_PREAMBLE_SIZE,
    MAX_SECTOR_COUNT,
    RECORD_SIZE,
)
from .exceptions import ImageWriteError, PayloadReadError, PayloadTooLargeError
from .logging_config import get_logger
from .models import DirectoryEntry, FieldOption, VolumeHeader

log = get_logger('writer')


@dataclass(frozen=True)
class ImageLayout:
    """Geometry of an HFSLIF image for a given payload size."""
    payload_size: int
    record_count: int

    @property
    def sector_count(self) -> int:
        """Total 256-byte records in the image, headers included."""
        return self.record_count + DATA_START_RECORD

    @property
    def image_size(self) -> int:
        return self.sector_count * RECORD_SIZE

    @property
    def logical_size(self) -> int:
        """File header, control byte, payload and footer."""
        return FILE_PREAMBLE_SIZE + self.payload_size + FILE_FOOTER_SIZE

    def to_dict(self) -> dict[str, Any]:
        return {
            'payload_size': self.payload_size,
            'record_count': self.record_count,
            'sector_count': self.sector_count,
            'image_size': self.image_size,
        }


def plan_layout(payload_length: int) -> ImageLayout:
    """
    Compute the image geometry for a payload.

    Raises:
        PayloadTooLargeError: If the sector count exceeds 16 bits
    """
    layout = ImageLayout(payload_size=payload_length,
                         record_count=record_count(payload_length))
    if layout.sector_count > MAX_SECTOR_COUNT:
        raise PayloadTooLargeError(
            f"Payload of {payload_length} bytes needs {layout.sector_count} records; "
            f"the volume header allows at most {MAX_SECTOR_COUNT}"
        )
    return layout


def resolve_field_option(field_option: FieldOption | str) -> FieldOption:
    """Accept a FieldOption or an IALDOWN.EXE letter (A-D)."""
    if isinstance(field_option, FieldOption):
        return field_option
    return FieldOption.from_letter(field_option)


def write_image(
    sink: BinaryIO,
    payload: bytes,
    description: str,
    field_option: FieldOption | str,
    file_name: str = FILE_NAME
) -> ImageLayout:
    """
    Write a complete HFSLIF image to a sink.

    All configuration is validated before the first byte is written.

    Args:
        sink: Binary stream opened for writing
        payload: File content to pack
        description: Description shown in the analyzer's directory list
        field_option: Invasm field option (FieldOption or letter A-D)
        file_name: Directory entry name (10 characters max)

    Returns:
        The layout of the written image

    Raises:
        InvalidFieldOptionError: If field_option is not recognised
        PayloadTooLargeError: If the payload does not fit in one volume
    """
    option = resolve_field_option(field_option)
    layout = plan_layout(len(payload))

    if len(description) > DESCRIPTION_SIZE:
        log.debug("Description truncated to %d characters: %r",
                  DESCRIPTION_SIZE, description[:DESCRIPTION_SIZE])

    log.debug("Layout: %d data record(s), %d sector(s), %d bytes",
              layout.record_count, layout.sector_count, layout.image_size)

    sink.write(VolumeHeader.for_record_count(layout.record_count).to_bytes())
    sink.write(DirectoryEntry(record_length=layout.record_count,
                              file_name=file_name).to_bytes())
    write_records(sink, payload, description, option)

    return layout


def build_image(
    payload: bytes,
    description: str,
    field_option: FieldOption | str,
    file_name: str = FILE_NAME
) -> bytes:
    """Build a complete HFSLIF image in memory."""
    buf = io.BytesIO()
    write_image(buf, payload, description, field_option, file_name)
    return buf.getvalue()


def read_payload(input_path: str | os.PathLike) -> bytes:
    """
    Read the payload file in full.

    Raises:
        PayloadReadError: If the file cannot be read
    """
    try:
        return Path(input_path).read_bytes()
    except OSError as e:
        raise PayloadReadError(f"Failed to read input file: {e}") from e


def create_hfslif(
    input_path: str | os.PathLike,
    output_path: str | os.PathLike,
    description: str,
    field_option: FieldOption | str,
    file_name: str = FILE_NAME,
    force: bool = False
) -> ImageLayout:
    """
    Pack a file into a new HFSLIF image on disk.

    Args:
        input_path: File to pack (usually a relocatable inverse assembler)
        output_path: Path for the new image
        description: Description shown in the analyzer's directory list
        field_option: Invasm field option (FieldOption or letter A-D)
        file_name: Directory entry name
        force: Overwrite an existing output file

    Returns:
        The layout of the written image

    Raises:
        ConfigurationError: Invalid field option or oversized payload
        PayloadReadError: If the input cannot be read
        ImageWriteError: If the output exists or cannot be written
    """
    option = resolve_field_option(field_option)
    output = Path(output_path)

    if output.exists() and not force:
        raise ImageWriteError(f"File already exists: {output}. Use --force to overwrite.")

    payload = read_payload(input_path)
    plan_layout(len(payload))

    log.debug("Read %d bytes from %s", len(payload), input_path)

    try:
        f = open(output, 'wb')
    except OSError as e:
        raise ImageWriteError(f"Failed to create HFSLIF image: {e}") from e

    try:
        with f:
            layout = write_image(f, payload, description, option, file_name)
    except OSError as e:
        _remove_partial(output)
        raise ImageWriteError(f"Failed to write HFSLIF image: {e}") from e

    log.debug("Wrote %s (%d bytes, %d data record(s))",
              output, layout.image_size, layout.record_count)
    return layout


def _remove_partial(path: Path) -> None:
    """Delete a partially written image, ignoring a missing file."""
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        log.warning("Could not remove partial image %s: %s", path, e)
