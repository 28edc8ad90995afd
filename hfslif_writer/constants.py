"""
Constants for the HFSLIF (HP LIF) image writer.
"""

# Record geometry
RECORD_SIZE = 256
RECORD_PREFIX_SIZE = 2                             # Big-endian content length
RECORD_DATA_SIZE = RECORD_SIZE - RECORD_PREFIX_SIZE  # 254 bytes per data record

# Volume header (record 0)
LIF_MAGIC = 0x8000
VOLUME_LABEL = "HFSLIF"
VOLUME_LABEL_SIZE = 6
LIF_IDENTIFIER = 0x1000
LIF_VERSION = 0
DIRECTORY_START_RECORD = 1
DIRECTORY_SIZE = 1
TRACK_COUNT = 1
HEAD_COUNT = 1
VOLUME_DATE_TIME = b'\x11' * 6
VOLUME_HEADER_SIZE = 42

# Directory entry (record 1)
FILE_NAME = "WS_FILE"
FILE_NAME_SIZE = 10
FILE_TYPE_INVASM = 0xC302      # Relocatable inverse assembler
DATA_START_RECORD = 2
DIRECTORY_DATE_TIME = bytes(6)
VOLUME_RECORD = 0x8001
GENERAL_PURPOSE = 0x00000080
DIRECTORY_ENTRY_SIZE = 32

# Sentinel spans inside the zero padding, keyed by absolute record offset.
# Origin of the 0x11 stamp is unknown; the analyzer expects it.
VOLUME_TRAILER_STAMP_OFFSET = VOLUME_HEADER_SIZE + 206
VOLUME_TRAILER_STAMP = b'\x11' * 6
# File type 0xFFFF in the slot after our entry: end of directory.
DIRECTORY_END_MARKER_OFFSET = DIRECTORY_ENTRY_SIZE + 10
DIRECTORY_END_MARKER = b'\xFF\xFF'

# File header (start of the logical file stream)
DESCRIPTION_SIZE = 32
FILE_HEADER_SIZE = 4 + DESCRIPTION_SIZE           # 36
CONTROL_BYTE_SIZE = 1
FILE_PREAMBLE_SIZE = FILE_HEADER_SIZE + CONTROL_BYTE_SIZE  # 37
FIRST_RECORD_PAYLOAD_CAPACITY = RECORD_DATA_SIZE - FILE_PREAMBLE_SIZE  # 217

# End of file marker written after the last payload byte
FILE_FOOTER = b'\x07\xFF\xFF'
FILE_FOOTER_SIZE = len(FILE_FOOTER)

# Sector count is stored by the legacy tool as a 16-bit value
MAX_SECTOR_COUNT = 0xFFFF
