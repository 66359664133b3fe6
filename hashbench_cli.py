#!/usr/bin/env python3
"""
hashbench CLI Entry Point

Runs the hashbench command-line tool from a source checkout without
installing the package.
"""

import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent / 'src'
if src_path.exists():
    sys.path.insert(0, str(src_path))

# Import and run the CLI
from hashbench.main import main

if __name__ == '__main__':
    main()
