"""
Script to build an app cache from a source checkout
"""

import os
import sys

# Add current directory to path to allow imports from core, models, etc.
sys.path.append(os.getcwd())

from ingestion.cli import main

if __name__ == "__main__":
    sys.exit(main())
