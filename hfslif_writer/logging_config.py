"""
Logging configuration for the HFSLIF image writer.

The CLI picks one of three verbosity levels; library callers get a silent
package logger until they configure it themselves.
"""

import logging
import os
import sys
from typing import TextIO

QUIET = logging.WARNING
NORMAL = logging.INFO
VERBOSE = logging.DEBUG

logger = logging.getLogger('hfslif_writer')
logger.addHandler(logging.NullHandler())


class ColorFormatter(logging.Formatter):
    """Formatter that colours the level on terminals that support it."""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, fmt: str | None = None, stream: TextIO | None = None,
                 use_colors: bool = True):
        super().__init__(fmt)
        self.use_colors = use_colors and _is_color_terminal(stream or sys.stderr)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = self.COLORS.get(record.levelname)
        if self.use_colors and color:
            return f"{color}{message}{self.RESET}"
        return message


def _is_color_terminal(stream: TextIO) -> bool:
    if not hasattr(stream, 'isatty') or not stream.isatty():
        return False
    if sys.platform == 'win32':
        return 'TERM' in os.environ
    return True


def setup_logging(
    level: int = NORMAL,
    stream: TextIO | None = None,
    use_colors: bool = True,
    format_string: str | None = None
) -> None:
    """
    Configure the package logger.

    Args:
        level: QUIET, NORMAL or VERBOSE
        stream: Output stream (defaults to stderr)
        use_colors: Colour output when the stream is a terminal
        format_string: Custom format string (optional)
    """
    if stream is None:
        stream = sys.stderr

    if format_string is None:
        if level <= logging.DEBUG:
            format_string = '%(levelname)s: %(name)s: %(message)s'
        else:
            format_string = '%(message)s'

    handler = logging.StreamHandler(stream)
    handler.setFormatter(ColorFormatter(format_string, stream, use_colors))

    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a named child of it."""
    if name is None:
        return logger
    return logger.getChild(name)
