#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--rows R --cols C --mines M --seed S]
    python main.py demo [--games N --delay D]
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from minesweeper.cli import main  # noqa: E402


if __name__ == "__main__":
    main()
