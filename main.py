#!/usr/bin/env python3
"""
Main script to generate and publish a Super Happy Dev episode.
Runs the pipeline in src/super_happy_dev; run from project root.
"""

import sys
from pathlib import Path

# Allow running from a checkout without `pip install -e .`
_SRC = Path(__file__).resolve().parent / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from super_happy_dev.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
