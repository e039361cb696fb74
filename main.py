#!/usr/bin/env python3
"""
Main CLI for the SF Symbols Font Toolkit
========================================

Runs the ``sfsymbols`` command without installing the console script.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from sfsymbols.cli import cli  # noqa: E402

if __name__ == "__main__":
    cli()
