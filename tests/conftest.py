"""Pytest configuration for the blockgen test suite."""

import sys
from pathlib import Path

# Make the blockgen package importable without installing it
sys.path.insert(0, str(Path(__file__).parent.parent))
