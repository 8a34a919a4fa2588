#!/usr/bin/env python3
"""
Flight Crew Scheduling Workbook I/O

Main entry point for reading and writing flight crew scheduling workbooks.
"""

import sys
from pathlib import Path

# Ensure the package is in the path
sys.path.insert(0, str(Path(__file__).parent))

from api.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
