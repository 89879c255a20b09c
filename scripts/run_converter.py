#!/usr/bin/env python
"""
Run radix conversion from a source checkout (without installing the package).

Usage:
    python scripts/run_converter.py 11Z --from 36 --to 2
    radixconv 11Z --from 36 --to 2  # Alternative (if installed as package)
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from radixconv.cli import main


if __name__ == "__main__":
    sys.exit(main())
