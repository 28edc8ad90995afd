"""
Entry point for the HFSLIF image writer.

Allows running as: python -m hfslif_writer
"""

import argparse
import sys

from . import __version__
from .commands import cmd_layout, cmd_pack, print_extended_help
from .formatter import OutputFormatter
from .logging_config import setup_logging, QUIET, NORMAL, VERBOSE


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog='hfslif_writer',
        description='Pack an HP inverse assembler into a HFSLIF (LIF) image',
        epilog='Use --help-syntax for detailed syntax and examples.'
    )

    # Global options
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Show detailed output')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Suppress non-essential output')
    parser.add_argument('--json', action='store_true', help='Output in JSON format')
    parser.add_argument('--help-syntax', action='store_true',
                        help='Show detailed help with syntax and examples')

    subparsers = parser.add_subparsers(dest='command', required=True)

    # Pack command
    pack_parser = subparsers.add_parser('pack', help='Pack a file into a HFSLIF image',
                                        epilog='Use --help-syntax for option letters.')
    pack_parser.add_argument('input', help='Relocatable inverse assembler (.A) file')
    pack_parser.add_argument('output', help='Output HFSLIF image path')
    pack_parser.add_argument('description',
                             help='Description shown on the analyzer (32 characters max)')
    pack_parser.add_argument('option', metavar='OPTION',
                             help='Invasm field option: A, B, C or D')
    pack_parser.add_argument('-n', '--name',
                             help='Directory file name (default WS_FILE)')
    pack_parser.add_argument('-f', '--force', action='store_true',
                             help='Overwrite existing file')
    pack_parser.add_argument('--json', action='store_true', default=argparse.SUPPRESS,
                             help='Output in JSON format')

    # Layout command
    layout_parser = subparsers.add_parser('layout', help='Show the image layout for a file')
    layout_parser.add_argument('input', help='File that would be packed')
    layout_parser.add_argument('--json', action='store_true', default=argparse.SUPPRESS,
                               help='Output in JSON format')

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    argv = sys.argv[1:] if argv is None else argv

    # Check for extended help before argparse
    if '--help-syntax' in argv:
        print_extended_help()
        return 0

    args = build_parser().parse_args(argv)

    # Configure logging based on verbosity flags
    if args.quiet:
        setup_logging(level=QUIET)
    elif args.verbose:
        setup_logging(level=VERBOSE)
    else:
        setup_logging(level=NORMAL)

    formatter = OutputFormatter(json_mode=args.json)

    match args.command:
        case 'pack':
            return cmd_pack(args, formatter)
        case 'layout':
            return cmd_layout(args, formatter)
        case _:
            formatter.error(f"Unknown command: {args.command}")
            return 1


if __name__ == '__main__':
    sys.exit(main())
