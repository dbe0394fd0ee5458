#!/usr/bin/env python3
"""
Markdown Toggle - styled text <-> markdown syntax converter

Simple usage:
    python mdtoggle.py convert notes.md          # Outputs notes.json
    python mdtoggle.py convert notes.json -o out.md
    python mdtoggle.py inspect notes.md          # Table of styled ranges
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from markdown_toggle.cli import app

if __name__ == "__main__":
    app()
