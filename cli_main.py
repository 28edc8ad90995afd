#!/usr/bin/env python3
"""
Entry point script for the standalone executable.
Used by PyInstaller to build a single-file hfslif_writer.
"""

import sys
from hfslif_writer.__main__ import main

if __name__ == '__main__':
    sys.exit(main())
