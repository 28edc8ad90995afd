"""
Data model classes for HFSLIF (HP LIF) volume structures.
"""

from dataclasses import dataclass
from enum import IntEnum

from .constants import (
    DATA_START_RECORD,
    DESCRIPTION_SIZE,
    DIRECTORY_DATE_TIME,
    DIRECTORY_END_MARKER,
    DIRECTORY_END_MARKER_OFFSET,
    DIRECTORY_SIZE,
    DIRECTORY_START_RECORD,
    FILE_NAME,
    FILE_NAME_SIZE,
    FILE_TYPE_INVASM,
    GENERAL_PURPOSE,
    HEAD_COUNT,
    LIF_IDENTIFIER,
    LIF_MAGIC,
    LIF_VERSION,
    RECORD_SIZE,
    TRACK_COUNT,
    VOLUME_DATE_TIME,
    VOLUME_LABEL,
    VOLUME_LABEL_SIZE,
    VOLUME_RECORD,
    VOLUME_TRAILER_STAMP,
    VOLUME_TRAILER_STAMP_OFFSET,
)
from .encoding import pad_record, put_ascii, put_bytes, put_uint16, put_uint32
from .exceptions import InvalidFieldOptionError


class FieldOption(IntEnum):
    """
    Invasm field control byte, as selected by IALDOWN.EXE letters A-D.

    The value of each member is the byte written after the file header.
    """
    NONE = 0xFF             # A: no "Invasm" field
    NO_POPUP = 0x00         # B: field with no pop-up
    POPUP_2_CHOICES = 0x01  # C: field with pop-up, 2 choices
    POPUP_8_CHOICES = 0x02  # D: field with pop-up, 8 choices

    @classmethod
    def from_letter(cls, text: str) -> 'FieldOption':
        """Resolve an option letter (case-insensitive)."""
        letter = text.strip().upper() if isinstance(text, str) else ''
        try:
            return _OPTION_BY_LETTER[letter]
        except KeyError:
            raise InvalidFieldOptionError(
                f"Invalid invasm field option \"{text}\" specified. Use A, B, C or D."
            ) from None

    @property
    def letter(self) -> str:
        return _LETTER_BY_OPTION[self]

    @property
    def description(self) -> str:
        return _OPTION_DESCRIPTIONS[self]


_OPTION_BY_LETTER = {
    'A': FieldOption.NONE,
    'B': FieldOption.NO_POPUP,
    'C': FieldOption.POPUP_2_CHOICES,
    'D': FieldOption.POPUP_8_CHOICES,
}
_LETTER_BY_OPTION = {option: letter for letter, option in _OPTION_BY_LETTER.items()}
_OPTION_DESCRIPTIONS = {
    FieldOption.NONE: 'No "Invasm" field',
    FieldOption.NO_POPUP: '"Invasm" field with no pop-up',
    FieldOption.POPUP_2_CHOICES: '"Invasm" field with pop-up, 2 choices',
    FieldOption.POPUP_8_CHOICES: '"Invasm" field with pop-up, 8 choices',
}


@dataclass
class VolumeHeader:
    """
    LIF volume header, written as the first 256-byte record.

    Layout (big-endian):
        0-1:   Magic ID (0x8000)
        2-7:   Volume label
        8-11:  Directory start record
        12-13: LIF identifier (0x1000)
        14-15: Reserved
        16-19: Directory size
        20-21: LIF version
        22-23: Reserved
        24-27: Track count
        28-31: Head count
        32-35: Sector count (total records in the image)
        36-41: Date/time
        248-253: 0x11 stamp, rest of the record zero
    """
    sector_count: int
    magic_id: int = LIF_MAGIC
    volume_label: str = VOLUME_LABEL
    directory_start: int = DIRECTORY_START_RECORD
    lif_identifier: int = LIF_IDENTIFIER
    directory_size: int = DIRECTORY_SIZE
    lif_version: int = LIF_VERSION
    track_count: int = TRACK_COUNT
    head_count: int = HEAD_COUNT
    date_time: bytes = VOLUME_DATE_TIME

    @classmethod
    def for_record_count(cls, record_count: int) -> 'VolumeHeader':
        """Build the header for an image with record_count data records."""
        return cls(sector_count=record_count + DATA_START_RECORD)

    def to_bytes(self) -> bytes:
        """Serialize to a 256-byte record."""
        data = bytearray()
        put_uint16(data, self.magic_id)
        put_ascii(data, self.volume_label, VOLUME_LABEL_SIZE)
        put_uint32(data, self.directory_start)
        put_uint16(data, self.lif_identifier)
        put_uint16(data, 0)
        put_uint32(data, self.directory_size)
        put_uint16(data, self.lif_version)
        put_uint16(data, 0)
        put_uint32(data, self.track_count)
        put_uint32(data, self.head_count)
        put_uint32(data, self.sector_count)
        put_bytes(data, self.date_time, 6)
        return pad_record(data, RECORD_SIZE,
                          [(VOLUME_TRAILER_STAMP_OFFSET, VOLUME_TRAILER_STAMP)])


@dataclass
class DirectoryEntry:
    """
    LIF directory entry, written as the second 256-byte record.

    Layout (big-endian):
        0-9:   File name (space padded)
        10-11: File type (0xC302 = relocatable inverse assembler)
        12-15: Start record
        16-19: Length in records
        20-25: Date/time (zero)
        26-27: Volume record (0x8001)
        28-31: General purpose field (0x00000080)
        42-43: 0xFFFF terminator, rest of the record zero
    """
    record_length: int
    file_name: str = FILE_NAME
    file_type: int = FILE_TYPE_INVASM
    start_record: int = DATA_START_RECORD
    date_time: bytes = DIRECTORY_DATE_TIME
    volume_record: int = VOLUME_RECORD
    general_purpose: int = GENERAL_PURPOSE

    def to_bytes(self) -> bytes:
        """Serialize to a 256-byte record."""
        data = bytearray()
        put_ascii(data, self.file_name, FILE_NAME_SIZE)
        put_uint16(data, self.file_type)
        put_uint32(data, self.start_record)
        put_uint32(data, self.record_length)
        put_bytes(data, self.date_time, 6)
        put_uint16(data, self.volume_record)
        put_uint32(data, self.general_purpose)
        # Only a single entry is supported, so the terminator always
        # occupies the following slot.
        return pad_record(data, RECORD_SIZE,
                          [(DIRECTORY_END_MARKER_OFFSET, DIRECTORY_END_MARKER)])


@dataclass
class FileHeader:
    """Header at the start of the file data: size (4) + description (32)."""
    data_size: int
    description: str

    @classmethod
    def for_payload(cls, payload_length: int, description: str) -> 'FileHeader':
        # The size includes the control byte that follows the header
        return cls(data_size=payload_length + 1, description=description)

    def to_bytes(self) -> bytes:
        data = bytearray()
        put_uint32(data, self.data_size)
        put_ascii(data, self.description, DESCRIPTION_SIZE)
        return bytes(data)
