"""
Command handlers for the HFSLIF image writer.
"""

from .constants import FILE_NAME
from .exceptions import HFSLIFError
from .formatter import OutputFormatter
from .models import FieldOption
from .writer import create_hfslif, plan_layout, read_payload


def cmd_pack(args, formatter: OutputFormatter) -> int:
    """Handle the 'pack' command."""
    file_name = getattr(args, 'name', None) or FILE_NAME
    force = getattr(args, 'force', False)

    try:
        # Reject a bad option before touching the filesystem
        option = FieldOption.from_letter(args.option)

        layout = create_hfslif(
            args.input,
            args.output,
            args.description,
            option,
            file_name=file_name,
            force=force,
        )
    except HFSLIFError as e:
        formatter.error(str(e))
        return 1
    except OSError as e:
        formatter.error(f"Filesystem error: {e}")
        return 1

    formatter.success(
        f"Created HFSLIF image: {args.output} "
        f"({layout.image_size} bytes, {layout.record_count} data record(s))",
        output=str(args.output),
        field_option=option.letter,
        **layout.to_dict(),
    )
    return 0


def cmd_layout(args, formatter: OutputFormatter) -> int:
    """Handle the 'layout' command."""
    try:
        payload = read_payload(args.input)
        layout = plan_layout(len(payload))
    except HFSLIFError as e:
        formatter.error(str(e))
        return 1

    formatter.layout(layout, str(args.input))
    return 0


EXTENDED_HELP = """
HFSLIF Writer - Extended Help
=============================

Packs a relocatable HP inverse assembler into a HFSLIF file structure,
suitable for transferring to an HP logic analyzer via FTP. This is an
alternative to the HP-provided IALDOWN.EXE, which only supports uploading
over a serial or GPIB connection.

PACK SYNTAX
-----------
  hfslif_writer pack <input> <output> <description> <option>

  input        The relocatable inverse assembler file, usually a ".A" file
               as output by ASM.EXE.
  output       Path to write the generated HFSLIF file to.
  description  Up to 32 characters shown on the logic analyzer when listing
               this file on disk. Longer text is truncated.
  option       Invasm field control, as in IALDOWN.EXE. One of:
                 A = No "Invasm" field
                 B = "Invasm" field with no pop-up
                 C = "Invasm" field with pop-up, 2 choices
                 D = "Invasm" field with pop-up, 8 choices

  -n, --name   Directory file name (10 characters max, default WS_FILE)
  -f, --force  Overwrite an existing output file

LAYOUT SYNTAX
-------------
  hfslif_writer layout <input>

  Shows the record count and image size the input would produce,
  without writing anything.

EXAMPLES
--------
  hfslif_writer pack Z80.A Z80_IA "Z80 inverse assembler" A
  hfslif_writer pack I8085.A I8085 "8085 disassembler" c --force
  hfslif_writer --json layout Z80.A
"""


def print_extended_help() -> None:
    """Print extended help with syntax examples."""
    print(EXTENDED_HELP)
