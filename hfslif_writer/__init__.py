"""
HFSLIF Writer

Packs a relocatable HP inverse assembler (or any payload) into a HFSLIF
image: a single-file HP LIF volume that HP logic analyzers accept over FTP.
"""

from .constants import (
    FILE_FOOTER,
    FILE_HEADER_SIZE,
    FILE_PREAMBLE_SIZE,
    FIRST_RECORD_PAYLOAD_CAPACITY,
    RECORD_DATA_SIZE,
    RECORD_SIZE,
)
from .exceptions import (
    ConfigurationError,
    HFSLIFError,
    ImageIOError,
    ImageWriteError,
    InvalidFieldOptionError,
    PayloadReadError,
    PayloadTooLargeError,
)
from .models import DirectoryEntry, FieldOption, FileHeader, VolumeHeader
from .chunker import iter_records, record_count, write_records
from .writer import (
    ImageLayout,
    build_image,
    create_hfslif,
    plan_layout,
    read_payload,
    write_image,
)
from .formatter import OutputFormatter
from .commands import cmd_layout, cmd_pack

__version__ = "1.0.0"

__all__ = [
    # Data models
    "VolumeHeader",
    "DirectoryEntry",
    "FileHeader",
    "FieldOption",
    "ImageLayout",
    # Exceptions
    "HFSLIFError",
    "ConfigurationError",
    "InvalidFieldOptionError",
    "PayloadTooLargeError",
    "ImageIOError",
    "PayloadReadError",
    "ImageWriteError",
    # Encoding
    "record_count",
    "iter_records",
    "write_records",
    "plan_layout",
    "write_image",
    "build_image",
    "read_payload",
    "create_hfslif",
    # Commands
    "cmd_pack",
    "cmd_layout",
    # Output
    "OutputFormatter",
    # Constants
    "RECORD_SIZE",
    "RECORD_DATA_SIZE",
    "FILE_HEADER_SIZE",
    "FILE_PREAMBLE_SIZE",
    "FIRST_RECORD_PAYLOAD_CAPACITY",
    "FILE_FOOTER",
]
