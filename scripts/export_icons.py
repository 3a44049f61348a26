#!/usr/bin/env python3
"""Regenerate static/file.svg and static/file_directory.svg."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from octexport import OcticonRegistry, export_icons

if __name__ == "__main__":
    export_icons(OcticonRegistry.bundled())
