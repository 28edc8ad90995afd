"""
Output formatting for the HFSLIF image writer.
"""

import json
import sys

from .writer import ImageLayout


class OutputFormatter:
    """Handle output formatting (text or JSON)."""

    def __init__(self, json_mode: bool = False):
        self.json_mode = json_mode

    def success(self, message: str, **data) -> None:
        """Output success message."""
        if self.json_mode:
            output = {"status": "success", "message": message, **data}
            print(json.dumps(output))
        else:
            print(message)

    def error(self, message: str) -> None:
        """Output error message."""
        if self.json_mode:
            output = {"status": "error", "message": message}
            print(json.dumps(output))
        else:
            print(f"Error: {message}", file=sys.stderr)

    def layout(self, layout: ImageLayout, path: str = "") -> None:
        """Output the planned geometry of an image."""
        if self.json_mode:
            output = {"status": "success", "input": path, **layout.to_dict()}
            print(json.dumps(output))
            return

        if path:
            print(f"Layout for {path}")
            print()
        print(f"  Payload size:   {layout.payload_size:>10,} bytes")
        print(f"  Logical size:   {layout.logical_size:>10,} bytes")
        print(f"  Data records:   {layout.record_count:>10}")
        print(f"  Sector count:   {layout.sector_count:>10}")
        print(f"  Image size:     {layout.image_size:>10,} bytes")
