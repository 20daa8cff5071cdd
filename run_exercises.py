#!/usr/bin/env python3
"""
Run both lambda exercises from a source checkout.

Run with: python run_exercises.py [--help]
"""

import sys
from pathlib import Path

# Add this directory to path so the package imports without installing
sys.path.insert(0, str(Path(__file__).parent))

from lambda_exercises.main import main

if __name__ == "__main__":
    sys.exit(main())
